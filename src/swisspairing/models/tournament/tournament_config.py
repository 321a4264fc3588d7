"""TournamentConfig data class."""

# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from swisspairing.constants import DEFAULT_MAX_PAIRING_ATTEMPTS, DEFAULT_TOURNAMENT_NAME
from swisspairing.exceptions import InvalidConfigurationException


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    seed : int or None
        Seed for the tournament's random generator. None draws from system
        entropy.
    max_pairing_attempts : int
        Number of full pairing attempts for one round before giving up.
    shuffle_pairings : bool
        Shuffle the presentation order of each round's pairing list.
    """

    name: str = DEFAULT_TOURNAMENT_NAME
    seed: Optional[int] = None
    max_pairing_attempts: int = DEFAULT_MAX_PAIRING_ATTEMPTS
    shuffle_pairings: bool = True

    def __post_init__(self) -> None:
        if self.max_pairing_attempts < 1:
            raise InvalidConfigurationException(
                f"max_pairing_attempts must be at least 1, got {self.max_pairing_attempts}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "seed": self.seed,
            "max_pairing_attempts": self.max_pairing_attempts,
            "shuffle_pairings": self.shuffle_pairings,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", DEFAULT_TOURNAMENT_NAME),
            seed=data.get("seed"),
            max_pairing_attempts=data.get(
                "max_pairing_attempts", DEFAULT_MAX_PAIRING_ATTEMPTS
            ),
            shuffle_pairings=data.get("shuffle_pairings", True),
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "TournamentConfig":
        """Load configuration from a JSON file.

        Raises:
            InvalidConfigurationException: If the file is not a JSON object
        """
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise InvalidConfigurationException(f"Invalid config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise InvalidConfigurationException(
                f"Config file {path} must contain a JSON object"
            )
        return cls.from_dict(data)
