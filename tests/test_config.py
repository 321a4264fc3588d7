import json

import pytest

from swisspairing.constants import DEFAULT_MAX_PAIRING_ATTEMPTS, DEFAULT_TOURNAMENT_NAME
from swisspairing.exceptions import InvalidConfigurationException
from swisspairing.models.tournament import TournamentConfig


def test_defaults():
    config = TournamentConfig()

    assert config.name == DEFAULT_TOURNAMENT_NAME
    assert config.seed is None
    assert config.max_pairing_attempts == DEFAULT_MAX_PAIRING_ATTEMPTS
    assert config.shuffle_pairings


@pytest.mark.parametrize("attempts", [0, -5])
def test_pairing_attempts_must_be_positive(attempts):
    with pytest.raises(InvalidConfigurationException):
        TournamentConfig(max_pairing_attempts=attempts)


def test_from_dict_fills_missing_keys():
    config = TournamentConfig.from_dict({"name": "Friday Night", "seed": 3})

    assert config.name == "Friday Night"
    assert config.seed == 3
    assert config.max_pairing_attempts == DEFAULT_MAX_PAIRING_ATTEMPTS


def test_dict_round_trip():
    config = TournamentConfig(name="League", seed=8, shuffle_pairings=False)

    assert TournamentConfig.from_dict(config.to_dict()) == config


def test_from_file(tmp_path):
    path = tmp_path / "tournament.json"
    path.write_text(json.dumps({"name": "Regional", "max_pairing_attempts": 50}))

    config = TournamentConfig.from_file(path)

    assert config.name == "Regional"
    assert config.max_pairing_attempts == 50


def test_from_file_rejects_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{name: ")

    with pytest.raises(InvalidConfigurationException):
        TournamentConfig.from_file(path)


def test_from_file_rejects_non_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]")

    with pytest.raises(InvalidConfigurationException):
        TournamentConfig.from_file(str(path))
