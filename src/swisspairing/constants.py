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

# --- Constants ---

# Game outcome points
GAME_WIN_POINTS = 3
GAME_DRAW_POINTS = 1
GAME_LOSS_POINTS = 0

# Match outcome points
MATCH_WIN_POINTS = 3
MATCH_DRAW_POINTS = 1
MATCH_LOSS_POINTS = 0

# A bye counts as a 2-0 match win
BYE_GAMES_WON = 2

# Lower bound for every win percentage, also used when a player has no
# opponents to average over
MIN_WIN_PERCENTAGE = 1.0 / 3.0

# Valid result ranges (inclusive)
MIN_GAME_WINS = 0
MAX_GAME_WINS = 2
MIN_DRAWN_GAMES = 0
MAX_DRAWN_GAMES = 3
MIN_GAMES_PER_MATCH = 1
MAX_GAMES_PER_MATCH = 3

# Pairing retries before a round is given up
DEFAULT_MAX_PAIRING_ATTEMPTS = 10000

DEFAULT_TOURNAMENT_NAME = "Untitled Tournament"

# Tiebreaker keys
TB_MATCH_POINTS = "match_points"
TB_OMWP = "omwp"
TB_GWP = "gwp"
TB_OGWP = "ogwp"

TIEBREAK_NAMES = {
    TB_MATCH_POINTS: "MP",
    TB_OMWP: "OMWP",
    TB_GWP: "GWP",
    TB_OGWP: "OGWP",
}

# Highest priority first
TIEBREAK_ORDER = [TB_MATCH_POINTS, TB_OMWP, TB_GWP, TB_OGWP]
