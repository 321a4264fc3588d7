"""A competitor in a Swiss tournament and their cumulative record."""

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

from __future__ import annotations

from typing import Any, Dict, List

from swisspairing.constants import (
    BYE_GAMES_WON,
    GAME_DRAW_POINTS,
    GAME_LOSS_POINTS,
    GAME_WIN_POINTS,
    MATCH_DRAW_POINTS,
    MATCH_LOSS_POINTS,
    MATCH_WIN_POINTS,
    MIN_WIN_PERCENTAGE,
)
from swisspairing.exceptions import NoOpponentsException
from swisspairing.utils import generate_id, setup_logger

logger = setup_logger(__name__)


class Player:
    """Represents a player in the tournament.

    A player only knows how to update its own counters. Opponents are stored
    by id and resolved through the tournament's player registry, so records
    never hold references to each other.

    Attributes:
        id: Unique identifier for the player
        name: Player's display name
        match_points: 3 per match won, 1 per match drawn
        game_points: 3 per game won, 1 per game drawn
        matches_played: Number of matches finished, byes included
        games_played: Number of games finished, bye games included
        opponent_ids: Ids of every opponent faced, in round order (no byes)
        has_bye: Whether the player has received a bye
    """

    def __init__(self, name: str) -> None:
        self.id: str = generate_id(self.__class__.__name__)
        self.name: str = name

        self.match_points: int = 0
        self.game_points: int = 0
        self.matches_played: int = 0
        self.games_played: int = 0

        self.opponent_ids: List[str] = []
        self.has_bye: bool = False

        # Runtime cache for opponent lookups
        self._opponents_played_cache: List[Player] = []

    # ========== Games ==========

    def lose_game(self) -> None:
        """Register a lost game. Only the number of games played changes."""
        self.games_played += 1
        self.game_points += GAME_LOSS_POINTS

    def draw_game(self) -> None:
        """Register a drawn game worth one game point."""
        self.games_played += 1
        self.game_points += GAME_DRAW_POINTS

    def win_game(self) -> None:
        """Register a won game worth three game points."""
        self.games_played += 1
        self.game_points += GAME_WIN_POINTS

    # ========== Matches ==========

    def lose_match(self) -> None:
        """Register a lost match. Only the number of matches played changes."""
        self.matches_played += 1
        self.match_points += MATCH_LOSS_POINTS

    def draw_match(self) -> None:
        """Register a drawn match worth one match point."""
        self.matches_played += 1
        self.match_points += MATCH_DRAW_POINTS

    def win_match(self) -> None:
        """Register a won match worth three match points."""
        self.matches_played += 1
        self.match_points += MATCH_WIN_POINTS

    def grant_bye(self) -> None:
        """Award the player a bye, scored as a 2-0 match win.

        No opponent is recorded. The flag lets the tournament make sure
        nobody receives more than one bye.
        """
        for _ in range(BYE_GAMES_WON):
            self.win_game()
        self.win_match()
        self.has_bye = True
        logger.debug("Player %s received a bye", self.name)

    # ========== Percentages ==========

    def match_win_percentage(self) -> float:
        """Match points over the maximum possible, never below 1/3."""
        if self.matches_played == 0:
            return MIN_WIN_PERCENTAGE
        return max(
            MIN_WIN_PERCENTAGE,
            self.match_points / (MATCH_WIN_POINTS * self.matches_played),
        )

    def game_win_percentage(self) -> float:
        """Game points over the maximum possible, never below 1/3."""
        if self.games_played == 0:
            return MIN_WIN_PERCENTAGE
        return max(
            MIN_WIN_PERCENTAGE,
            self.game_points / (GAME_WIN_POINTS * self.games_played),
        )

    def get_opponent_objects(self, players_dict: Dict[str, Player]) -> List[Player]:
        """Resolve opponent IDs to Player objects using cached lookup.

        Args:
            players_dict: Dictionary mapping player IDs to Player objects

        Returns:
            List of opponent Player objects in the order they were faced
        """
        if len(self._opponents_played_cache) != len(self.opponent_ids):
            self._opponents_played_cache = [
                players_dict[opp_id] for opp_id in self.opponent_ids
            ]
        return self._opponents_played_cache

    def opponents_match_win_percentage(self, players_dict: Dict[str, Player]) -> float:
        """Average match win percentage of every opponent faced.

        Raises:
            NoOpponentsException: If the player has not faced anyone
        """
        opponents = self._require_opponents(players_dict)
        return sum(opp.match_win_percentage() for opp in opponents) / len(opponents)

    def opponents_game_win_percentage(self, players_dict: Dict[str, Player]) -> float:
        """Average game win percentage of every opponent faced.

        Raises:
            NoOpponentsException: If the player has not faced anyone
        """
        opponents = self._require_opponents(players_dict)
        return sum(opp.game_win_percentage() for opp in opponents) / len(opponents)

    def _require_opponents(self, players_dict: Dict[str, Player]) -> List[Player]:
        opponents = self.get_opponent_objects(players_dict)
        if not opponents:
            raise NoOpponentsException(f"{self.name} has not faced any opponent")
        return opponents

    def has_played(self, other: Player) -> bool:
        """Whether ``other`` is already in this player's opponent history."""
        return other.id in self.opponent_ids

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player data to dictionary format.

        Returns:
            Dictionary containing all public player data
        """
        data = {}
        for k, v in self.__dict__.items():
            if not k.startswith("_"):
                data[k] = list(v) if isinstance(v, list) else v
        return data

    def __repr__(self) -> str:
        return (
            f"Player(name='{self.name}', match_points={self.match_points}, "
            f"id='{self.id}')"
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.match_points} MP)"
