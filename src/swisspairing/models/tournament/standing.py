"""Standing data class: one row of the final ranking."""

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

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Standing:
    """Snapshot of a player's record at ranking time.

    Attributes
    ----------
    rank : int
        Position in the ranking (1-indexed).
    player_id : str
        ID of the ranked player.
    name : str
        Display name.
    match_points, game_points, matches_played, games_played : int
        Counters copied from the player record.
    omwp, gwp, ogwp : float
        Opponents' match win percentage, game win percentage and opponents'
        game win percentage.
    has_bye : bool
        Whether the player received a bye.
    """

    rank: int
    player_id: str
    name: str
    match_points: int
    game_points: int
    matches_played: int
    games_played: int
    omwp: float
    gwp: float
    ogwp: float
    has_bye: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
