"""A single round's matchup between two players."""

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

from enum import Enum
from typing import Optional

from swisspairing.exceptions import DuplicateResultException, InvalidPairingException
from swisspairing.models.pairing.match_result import MatchResult
from swisspairing.models.player import Player
from swisspairing.utils import generate_id, setup_logger
from swisspairing.utils.validation import validate_match_score

logger = setup_logger(__name__)


class PlayerSide(Enum):
    """Which side of a pairing a player sits on."""

    HOME = "home"
    AWAY = "away"


class Pairing:
    """Binds two players for one round and forwards results to them.

    Creating a pairing is the only place opponent history grows: each player
    is appended to the other's ``opponent_ids``.

    Attributes:
        id: Unique identifier, used by the driver to report the result
        home: The left-hand player
        away: The right-hand player
        result: The recorded MatchResult, or None while the match is open
    """

    def __init__(self, home: Player, away: Player) -> None:
        if home is away or home.id == away.id:
            raise InvalidPairingException(f"Cannot pair {home.name} with themselves")

        self.id: str = generate_id(self.__class__.__name__)
        self.home: Player = home
        self.away: Player = away
        self.result: Optional[MatchResult] = None

        home.opponent_ids.append(away.id)
        away.opponent_ids.append(home.id)

    @property
    def is_completed(self) -> bool:
        return self.result is not None

    def win_game(self, side: PlayerSide) -> None:
        """Register a won game for ``side`` and a lost game for the other."""
        if side == PlayerSide.HOME:
            winner, loser = self.home, self.away
        else:
            winner, loser = self.away, self.home

        winner.win_game()
        loser.lose_game()

    def draw_game(self) -> None:
        """Register a drawn game for both players."""
        self.home.draw_game()
        self.away.draw_game()

    def end_match(
        self, home_score: int, away_score: int, drawn_games: int = 0
    ) -> MatchResult:
        """Record the final score of the match.

        Every value is validated before either player is touched, so a
        rejected score leaves both records unchanged.

        Args:
            home_score: Games won by the home player (0-2)
            away_score: Games won by the away player (0-2)
            drawn_games: Games drawn (0-3)

        Returns:
            The stored MatchResult

        Raises:
            InvalidScoreException: If a value or the game total is out of range
            DuplicateResultException: If the result was already recorded
        """
        if self.result is not None:
            raise DuplicateResultException(
                f"Result for {self.home.name} vs {self.away.name} already recorded"
            )

        validation = validate_match_score(home_score, away_score, drawn_games)
        if not validation:
            logger.warning(
                "Rejected result for %s vs %s: %s",
                self.home.name,
                self.away.name,
                validation.error_message,
            )
            validation.raise_for_status()

        for _ in range(home_score):
            self.win_game(PlayerSide.HOME)
        for _ in range(away_score):
            self.win_game(PlayerSide.AWAY)
        for _ in range(drawn_games):
            self.draw_game()

        if home_score > away_score:
            self.home.win_match()
            self.away.lose_match()
        elif away_score > home_score:
            self.home.lose_match()
            self.away.win_match()
        else:
            self.home.draw_match()
            self.away.draw_match()

        self.result = MatchResult(
            pairing_id=self.id,
            home_id=self.home.id,
            away_id=self.away.id,
            home_score=home_score,
            away_score=away_score,
            drawn_games=drawn_games,
        )
        logger.debug(
            "Recorded: %s %d-%d-%d %s",
            self.home.name,
            home_score,
            away_score,
            drawn_games,
            self.away.name,
        )
        return self.result

    def __repr__(self) -> str:
        return f"Pairing(home='{self.home.name}', away='{self.away.name}', id='{self.id}')"
