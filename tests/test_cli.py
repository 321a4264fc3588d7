import json

import pytest

from swisspairing.testing.__main__ import (
    create_main_parser,
    dispatch,
    format_standings,
    main,
)


def test_generate_prints_results(capsys):
    exit_code = main(["generate", "--players", "6", "--seed", "5", "--pattern", "predictable"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "=== RESULTS ===" in out
    assert "Player 6" in out
    assert "Rounds: 3" in out
    assert "no violations" in out


def test_generate_writes_output(tmp_path, capsys):
    output = tmp_path / "tournament.json"

    exit_code = main(["generate", "--players", "9", "--seed", "2", "--output", str(output)])

    assert exit_code == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert len(data["players"]) == 9
    assert len(data["rounds"]) == 4


def test_generate_with_config_file(tmp_path, capsys):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"name": "Config Cup", "seed": 11}))
    output = tmp_path / "out.json"

    exit_code = main(
        ["generate", "--players", "4", "--config", str(config), "--output", str(output)]
    )

    assert exit_code == 0
    assert json.loads(output.read_text(encoding="utf-8"))["config"]["seed"] == 11


def test_invalid_config_file_fails(tmp_path, capsys):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"max_pairing_attempts": 0}))

    exit_code = main(["generate", "--players", "4", "--config", str(config)])

    assert exit_code == 1
    assert "max_pairing_attempts" in capsys.readouterr().err


def test_benchmark(capsys):
    exit_code = main(["benchmark", "--players", "8", "--iterations", "2", "--seed", "1"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Average:" in out


def test_dispatch_help(capsys):
    assert dispatch("help", []) == 0
    assert "generate" in capsys.readouterr().out
    assert dispatch("nonsense", []) == 1


def test_main_parser_subcommands():
    args = create_main_parser().parse_args(["generate", "--players", "10"])

    assert args.command == "generate"
    assert args.players == 10


def test_format_standings_marks_byes():
    from swisspairing.models.tournament import Standing

    standing = Standing(
        rank=1,
        player_id="Player-1",
        name="Ann",
        match_points=6,
        game_points=12,
        matches_played=2,
        games_played=4,
        omwp=0.5,
        gwp=1.0,
        ogwp=0.5,
        has_bye=True,
    )

    table = format_standings([standing])

    assert table.splitlines()[0] == "Rank\tName\t\tMP\tOMWP\tGWP\tOGWP"
    assert "Ann *" in table
    assert "1.00" in table


@pytest.mark.parametrize(
    "argv",
    [
        ["benchmark", "--iterations", "0", "--players", "4"],
        ["benchmark", "--players", "-3"],
        ["generate", "--players", "0"],
        ["generate", "--players", "many"],
    ],
)
def test_counts_below_one_are_rejected(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)

    assert excinfo.value.code == 2
    assert "--" in capsys.readouterr().err


def test_interactive_dispatch_rejects_zero_iterations(capsys):
    with pytest.raises(SystemExit):
        dispatch("benchmark", ["--iterations", "0"])

    assert "must be at least 1" in capsys.readouterr().err
