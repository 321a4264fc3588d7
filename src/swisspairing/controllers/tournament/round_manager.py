"""Round management for tournaments.

This module handles bye selection and pairing generation for a single round.
"""

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

import random
from typing import List

from swisspairing.constants import DEFAULT_MAX_PAIRING_ATTEMPTS
from swisspairing.exceptions import NoPairingAvailableException
from swisspairing.models.player import Player
from swisspairing.type_hints import MatchPairing, MaybePlayer
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Chooses the bye and the pairings for one round.

    This class is responsible for:
    - Picking the bye recipient when the roster is odd
    - Matching players of similar match points without rematches
    - Retrying the whole round until every player is matched

    The random generator is shared with the tournament, so a seeded generator
    makes every round reproducible.
    """

    def __init__(
        self,
        rng: random.Random,
        max_pairing_attempts: int = DEFAULT_MAX_PAIRING_ATTEMPTS,
    ):
        """Initialize the round manager.

        Args:
            rng: Random generator used for every shuffle
            max_pairing_attempts: Full attempts per round before giving up
        """
        self.rng = rng
        self.max_pairing_attempts = max_pairing_attempts

    def select_bye_player(self, players: List[Player]) -> MaybePlayer:
        """Pick the player who sits out this round.

        The roster is shuffled in place first so that ties on match points are
        broken at random. The first player with the fewest match points who
        has not had a bye yet is chosen.

        Args:
            players: The active roster

        Returns:
            The chosen player, or None if everybody already had a bye
        """
        self.rng.shuffle(players)

        candidates = [p for p in players if not p.has_bye]
        if not candidates:
            logger.warning("Every player already received a bye; no bye this round")
            return None

        return min(candidates, key=lambda p: p.match_points)

    def create_pairings(
        self, players: List[Player], round_number: int
    ) -> List[MatchPairing]:
        """Match every player in ``players`` for the given round.

        Each attempt starts from a fresh shuffle. Attempts that leave someone
        unmatched are thrown away entirely; nothing is written to the players
        until a complete matching has been found.

        Args:
            players: The active roster, bye recipient already removed
            round_number: Round being paired, for logging

        Returns:
            List of (home, away) tuples covering the roster

        Raises:
            NoPairingAvailableException: If no attempt succeeded
        """
        expected = len(players) // 2

        for attempt in range(1, self.max_pairing_attempts + 1):
            matches = self._attempt_pairings(players)
            if len(matches) == expected:
                if attempt > 1:
                    logger.debug(
                        "Round %s paired after %s attempts", round_number, attempt
                    )
                return matches

        logger.error(
            "Round %s: no complete pairing after %s attempts",
            round_number,
            self.max_pairing_attempts,
        )
        raise NoPairingAvailableException(round_number, self.max_pairing_attempts)

    def _attempt_pairings(self, players: List[Player]) -> List[MatchPairing]:
        """Greedy pass from the top of the standings down.

        The queue is sorted ascending by match points after a shuffle, so the
        stable sort groups equal scores while keeping their order random. The
        highest remaining player is popped as home and takes the closest
        remaining player (scanning down from the top) they have not met yet.
        A home player with no such candidate stays unmatched.
        """
        queue = list(players)
        self.rng.shuffle(queue)
        queue.sort(key=lambda p: p.match_points)

        matches: List[MatchPairing] = []
        while len(queue) > 1:
            home = queue.pop()
            for i in range(len(queue) - 1, -1, -1):
                if not home.has_played(queue[i]):
                    matches.append((home, queue.pop(i)))
                    break

        return matches
