"""Match result data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class MatchResult:
    """Represents the result of a single match.

    Attributes
    ----------
    pairing_id : str
        ID of the pairing the result belongs to
    home_id : str
        ID of the home player
    away_id : str
        ID of the away player
    home_score : int
        Games won by the home player
    away_score : int
        Games won by the away player
    drawn_games : int
        Games drawn
    """

    pairing_id: str
    home_id: str
    away_id: str
    home_score: int
    away_score: int
    drawn_games: int = 0

    @property
    def games_played(self) -> int:
        return self.home_score + self.away_score + self.drawn_games

    @property
    def is_draw(self) -> bool:
        return self.home_score == self.away_score

    @property
    def winner_id(self) -> Optional[str]:
        """ID of the match winner, or None for a drawn match."""
        if self.home_score > self.away_score:
            return self.home_id
        if self.away_score > self.home_score:
            return self.away_id
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match result to dictionary."""
        return {
            "pairing_id": self.pairing_id,
            "home_id": self.home_id,
            "away_id": self.away_id,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "drawn_games": self.drawn_games,
        }
