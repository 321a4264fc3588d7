"""Swiss Pairing: Swiss-system tournament pairing and ranking.

Typical use::

    from swisspairing import new_tournament

    tournament = new_tournament(["Ann", "Bob", "Cid", "Dee"])
    rows = tournament.advance_round()
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

from swisspairing.models.pairing import MatchResult, Pairing, PlayerSide
from swisspairing.models.player import Player
from swisspairing.models.tournament import RoundData, Standing, TournamentConfig
from swisspairing.tournament import Tournament, calculate_rounds, new_tournament

__version__ = "0.1.0"

__all__ = [
    "MatchResult",
    "Pairing",
    "Player",
    "PlayerSide",
    "RoundData",
    "Standing",
    "Tournament",
    "TournamentConfig",
    "calculate_rounds",
    "new_tournament",
]
