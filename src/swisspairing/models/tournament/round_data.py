"""Data model for tournament round."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from swisspairing.models.pairing import MatchResult
from swisspairing.type_hints import PairingIDs


@dataclass
class RoundData:
    """Container for all data related to a single tournament round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    pairings : list of tuple of str
        List of (pairing_id, home_player_id, away_player_id) triples.
    bye_player_id : str or None
        ID of the player receiving a bye, or None if no bye was assigned.
    results : list
        Recorded match results. Empty until results are recorded.
    """

    round_number: int
    pairings: List[PairingIDs] = field(default_factory=list)
    bye_player_id: Optional[str] = None
    results: List[MatchResult] = field(default_factory=list)

    @property
    def is_completed(self) -> bool:
        """True once every pairing of the round has a result."""
        return self.pending_pairing_ids == set()

    @property
    def pending_pairing_ids(self) -> Set[str]:
        recorded = {r.pairing_id for r in self.results}
        return {pairing_id for pairing_id, _, _ in self.pairings} - recorded

    def player_ids(self) -> List[str]:
        """IDs of every player seated this round, bye excluded."""
        ids = []
        for _, home_id, away_id in self.pairings:
            ids.extend((home_id, away_id))
        return ids

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round_number": self.round_number,
            "pairings": [list(p) for p in self.pairings],
            "bye_player_id": self.bye_player_id,
            "results": [r.to_dict() for r in self.results],
            "is_completed": self.is_completed,
        }
