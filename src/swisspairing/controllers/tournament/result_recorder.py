"""Result recording and validation for tournaments.

This module handles recording match results against the current round's
pairing table.
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

from typing import Dict, Optional

from swisspairing.exceptions import PairingNotFoundException
from swisspairing.models.pairing import MatchResult, Pairing
from swisspairing.models.tournament import RoundData
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Looking up the pairing a result belongs to
    - Delegating score validation and bookkeeping to the pairing
    - Removing resolved pairings from the active table
    - Appending the result to the round history
    """

    def record_result(
        self,
        pairings: Dict[str, Pairing],
        pairing_id: str,
        home_score: int,
        away_score: int,
        drawn_games: int = 0,
        round_data: Optional[RoundData] = None,
    ) -> MatchResult:
        """Record the result of one active pairing.

        Args:
            pairings: Active pairing table (id -> Pairing), updated in place
            pairing_id: ID handed out by ``advance_round``
            home_score: Games won by the home player
            away_score: Games won by the away player
            drawn_games: Games drawn
            round_data: Round history entry to append the result to

        Returns:
            The recorded MatchResult

        Raises:
            PairingNotFoundException: If the id is not in the active table
            InvalidScoreException: If the score is invalid; nothing changes
        """
        pairing = pairings.get(pairing_id)
        if pairing is None:
            logger.error("Pairing %s not found in the current round", pairing_id)
            raise PairingNotFoundException(pairing_id)

        result = pairing.end_match(home_score, away_score, drawn_games)
        del pairings[pairing_id]

        if round_data is not None:
            round_data.results.append(result)
            if round_data.is_completed:
                logger.info("All results for round %s recorded", round_data.round_number)

        return result
