"""Tiebreak calculation for tournaments.

This module ranks players by match points and the three standard Swiss
tiebreaks: opponents' match win percentage, game win percentage and
opponents' game win percentage.
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
from typing import Dict, Iterable, List, Optional

from swisspairing.constants import (
    MIN_WIN_PERCENTAGE,
    TB_GWP,
    TB_MATCH_POINTS,
    TB_OGWP,
    TB_OMWP,
    TIEBREAK_ORDER,
)
from swisspairing.models.player import Player
from swisspairing.models.tournament import Standing
from swisspairing.type_hints import PlayerRegistry
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class TiebreakCalculator:
    """Calculates tiebreak values and the final ranking.

    Ranking uses, in priority order:
    - Match points
    - Opponents' match win percentage (OMWP)
    - Game win percentage (GWP)
    - Opponents' game win percentage (OGWP)

    A player without opponents (no round was played) gets the 1/3 floor for
    OMWP and OGWP.
    """

    def calculate_player_tiebreaks(
        self, player: Player, all_players: PlayerRegistry
    ) -> Dict[str, float]:
        """Calculate all tiebreak values for a single player.

        Args:
            player: The player to calculate tiebreaks for
            all_players: Dictionary of all players for opponent lookups

        Returns:
            Mapping of tiebreak key to value
        """
        if player.opponent_ids:
            omwp = player.opponents_match_win_percentage(all_players)
            ogwp = player.opponents_game_win_percentage(all_players)
        else:
            omwp = ogwp = MIN_WIN_PERCENTAGE

        return {
            TB_MATCH_POINTS: float(player.match_points),
            TB_OMWP: omwp,
            TB_GWP: player.game_win_percentage(),
            TB_OGWP: ogwp,
        }

    def calculate_all_tiebreaks(
        self, players: Iterable[Player], all_players: PlayerRegistry
    ) -> Dict[str, Dict[str, float]]:
        """Calculate tiebreaks for every player, keyed by player id."""
        return {
            player.id: self.calculate_player_tiebreaks(player, all_players)
            for player in players
        }

    def rank_players(
        self,
        players: Iterable[Player],
        all_players: PlayerRegistry,
        rng: Optional[random.Random] = None,
    ) -> List[Standing]:
        """Rank players and return standings, best first.

        The list is shuffled so that exact ties end up in random order, then
        sorted once per tiebreak starting with the least important one. Each
        sort is stable, so the last sort (match points) dominates and earlier
        ones only decide among equal values.

        Args:
            players: Players to rank
            all_players: Dictionary of all players for opponent lookups
            rng: Random generator for the initial shuffle

        Returns:
            Standings in ranking order
        """
        ordered = list(players)
        (rng or random.Random()).shuffle(ordered)

        tiebreaks = self.calculate_all_tiebreaks(ordered, all_players)

        for key in reversed(TIEBREAK_ORDER):
            ordered.sort(key=lambda p: tiebreaks[p.id][key], reverse=True)

        standings = []
        for rank, player in enumerate(ordered, start=1):
            values = tiebreaks[player.id]
            standings.append(
                Standing(
                    rank=rank,
                    player_id=player.id,
                    name=player.name,
                    match_points=player.match_points,
                    game_points=player.game_points,
                    matches_played=player.matches_played,
                    games_played=player.games_played,
                    omwp=values[TB_OMWP],
                    gwp=values[TB_GWP],
                    ogwp=values[TB_OGWP],
                    has_bye=player.has_bye,
                )
            )

        logger.debug("Ranked %s players", len(standings))
        return standings
