import pytest

from swisspairing.exceptions import InvalidScoreException
from swisspairing.models.player import Player
from swisspairing.models.tournament import RoundData
from swisspairing.utils.validation import (
    check_range,
    validate_match_score,
    validate_match_score_strict,
)
from swisspairing.validation import create_round_validator


@pytest.fixture
def roster():
    players = [Player(name) for name in ("Ann", "Bob", "Cid", "Dee", "Eve")]
    return {p.id: p for p in players}, [p.id for p in players]


def _round(number, pairs, bye=None):
    return RoundData(
        round_number=number,
        pairings=[(f"p{number}-{i}", home, away) for i, (home, away) in enumerate(pairs)],
        bye_player_id=bye,
    )


def test_clean_rounds_pass(roster):
    players_by_id, (a, b, c, d, e) = roster
    rounds = [
        _round(1, [(a, b), (c, d)], bye=e),
        _round(2, [(a, c), (b, e)], bye=d),
    ]

    report = create_round_validator().validate_tournament(players_by_id, rounds)

    assert report.is_valid
    assert report.rounds_checked == 2
    assert report.violations == []
    assert "no violations" in report.summary


def test_self_pairing(roster):
    players_by_id, (a, b, c, d, e) = roster

    report = create_round_validator().validate_tournament(
        players_by_id, [_round(1, [(a, a), (b, c), (d, e)])]
    )

    assert "R1" in report.violated_rules
    assert "Ann paired with themselves" in report.violations[0].message


def test_player_seated_twice(roster):
    players_by_id, (a, b, c, d, e) = roster

    report = create_round_validator().validate_tournament(
        players_by_id, [_round(1, [(a, b), (a, c), (d, e)])]
    )

    assert report.violated_rules == {"R2"}
    assert report.violations[0].player_ids == [a]


def test_unpaired_player(roster):
    players_by_id, (a, b, c, d, e) = roster

    report = create_round_validator().validate_tournament(
        players_by_id, [_round(1, [(a, b), (c, d)])]
    )

    assert report.violated_rules == {"R3"}
    assert report.violations[0].player_ids == [e]


def test_rematch(roster):
    players_by_id, (a, b, c, d, e) = roster
    rounds = [
        _round(1, [(a, b), (c, d)], bye=e),
        _round(2, [(b, a), (c, e)], bye=d),
    ]

    report = create_round_validator().validate_tournament(players_by_id, rounds)

    assert report.violated_rules == {"R4"}
    assert report.violations[0].round_number == 2
    assert set(report.violations[0].player_ids) == {a, b}


def test_second_bye(roster):
    players_by_id, (a, b, c, d, e) = roster
    rounds = [
        _round(1, [(a, b), (c, d)], bye=e),
        _round(2, [(a, c), (b, d)], bye=e),
    ]

    report = create_round_validator().validate_tournament(players_by_id, rounds)

    assert report.violated_rules == {"R5"}


def test_bye_player_also_seated(roster):
    players_by_id, (a, b, c, d, e) = roster

    report = create_round_validator().validate_tournament(
        players_by_id, [_round(1, [(a, b), (c, e)], bye=e)]
    )

    assert "R6" in report.violated_rules
    assert "R3" in report.violated_rules


def test_report_to_dict(roster):
    players_by_id, (a, b, c, d, e) = roster

    data = create_round_validator().validate_tournament(
        players_by_id, [_round(1, [(a, b), (c, d)])]
    ).to_dict()

    assert not data["is_valid"]
    assert data["rounds_checked"] == 1
    assert data["violations"][0]["rule"] == "R3"


def test_check_range():
    assert check_range("home_score", 2, 0, 2)
    failed = check_range("home_score", 3, 0, 2)

    assert not failed
    assert failed.field == "home_score"
    assert failed.error_message == "Invalid home_score: 3 (must be between 0 and 2)"
    with pytest.raises(InvalidScoreException):
        failed.raise_for_status()


@pytest.mark.parametrize("value", [0.5, 1.0, "1", None, True])
def test_check_range_requires_integer(value):
    result = check_range("drawn_games", value, 0, 3)

    assert not result
    assert result.error_message == f"Invalid drawn_games: {value!r} (must be an integer)"
    with pytest.raises(InvalidScoreException) as excinfo:
        result.raise_for_status()
    assert str(excinfo.value) == result.error_message


def test_validate_match_score_reports_first_failure():
    result = validate_match_score(3, 3, 0)

    assert not result.is_valid
    assert result.field == "home_score"


def test_validate_match_score_strict():
    validate_match_score_strict(2, 1, 0)
    with pytest.raises(InvalidScoreException) as excinfo:
        validate_match_score_strict(2, 2, 1)
    assert excinfo.value.field == "games_total"
    assert excinfo.value.value == 5
