"""Tournament management system for Swiss Pairing.

This package exposes the tournament facade together with the controllers it
delegates to.
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

from swisspairing.controllers.tournament import (
    ResultRecorder,
    RoundManager,
    TiebreakCalculator,
)
from swisspairing.models.tournament import RoundData, Standing, TournamentConfig
from swisspairing.tournament.tournament import (
    Tournament,
    calculate_rounds,
    new_tournament,
)

__all__ = [
    "Tournament",
    "TournamentConfig",
    "RoundData",
    "Standing",
    "RoundManager",
    "ResultRecorder",
    "TiebreakCalculator",
    "calculate_rounds",
    "new_tournament",
]
