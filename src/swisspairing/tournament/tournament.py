"""Swiss tournament: rounds, byes, pairings, results and ranking."""

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
from typing import Dict, List, Optional, Sequence

from swisspairing.controllers.tournament import (
    ResultRecorder,
    RoundManager,
    TiebreakCalculator,
)
from swisspairing.exceptions import (
    DuplicatePlayerException,
    NoPairingAvailableException,
    TournamentStateException,
)
from swisspairing.models.pairing import MatchResult, Pairing
from swisspairing.models.player import Player
from swisspairing.models.tournament import RoundData, Standing, TournamentConfig
from swisspairing.type_hints import RoundSchedule
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


def calculate_rounds(num_players: int) -> int:
    """Number of Swiss rounds for ``num_players``: ceil(log2(n)).

    Raises:
        TournamentStateException: If there are no players
    """
    if num_players < 1:
        raise TournamentStateException("A tournament needs at least one player")
    # bit_length of n-1 is ceil(log2(n)) for n >= 1, without float rounding
    return (num_players - 1).bit_length()


class Tournament:
    """Manages the whole tournament.

    Holds the players, hands out pairings one round at a time and ranks the
    players on demand. The driver loop looks like::

        tournament = new_tournament(names)
        while (rows := tournament.advance_round()) is not None:
            for pairing_id, home, away in rows:
                tournament.record_result(pairing_id, 2, 1, 0)
        standings = tournament.ranking()

    Attributes:
        config: Tournament settings
        rounds: Total number of rounds
        current_round: Last round handed out (0 before the first)
        players: Active roster; the bye recipient is absent while a round is
            being paired
        players_by_id: Every player keyed by id
        pairings: Unresolved pairings of the current round, keyed by id
        needs_bye: True when the roster size is odd
        round_history: One RoundData per round handed out
    """

    def __init__(
        self,
        players: Sequence[Player],
        config: Optional[TournamentConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or TournamentConfig()
        self.rng = rng or random.Random(self.config.seed)

        self.players: List[Player] = list(players)
        self.players_by_id: Dict[str, Player] = {}
        for player in self.players:
            if player.id in self.players_by_id:
                raise DuplicatePlayerException(
                    f"Player {player.name} was added more than once"
                )
            self.players_by_id[player.id] = player

        self.rounds: int = calculate_rounds(len(self.players))
        self.current_round: int = 0
        self.needs_bye: bool = len(self.players) % 2 == 1
        self.pairings: Dict[str, Pairing] = {}
        self.round_history: List[RoundData] = []

        self.round_manager = RoundManager(
            self.rng, max_pairing_attempts=self.config.max_pairing_attempts
        )
        self.result_recorder = ResultRecorder()
        self.tiebreak_calculator = TiebreakCalculator()

        logger.info(
            "Tournament '%s' created with %s players, %s rounds",
            self.config.name,
            len(self.players),
            self.rounds,
        )

    @property
    def is_finished(self) -> bool:
        return self.current_round > self.rounds

    @property
    def current_round_data(self) -> Optional[RoundData]:
        return self.round_history[-1] if self.round_history else None

    def get_pairing(self, pairing_id: str) -> Optional[Pairing]:
        """Return the unresolved pairing with this id, if any."""
        return self.pairings.get(pairing_id)

    def advance_round(self) -> Optional[RoundSchedule]:
        """Advance the tournament by one round.

        If there are rounds left, pair the players by match points and return
        the pairings. With an odd roster the lowest-ranked player who has not
        had a bye yet sits out with a 2-0 win.

        Returns:
            List of (pairing_id, home_name, away_name), or None once every
            round has been played

        Raises:
            NoPairingAvailableException: If the round could not be paired
        """
        self.current_round += 1
        if self.current_round > self.rounds:
            logger.info("Tournament '%s' has no rounds left", self.config.name)
            return None

        if self.pairings:
            logger.warning(
                "Starting round %s with %s unresolved pairings from round %s",
                self.current_round,
                len(self.pairings),
                self.current_round - 1,
            )
        self.pairings.clear()

        bye_player = None
        if self.needs_bye:
            bye_player = self.round_manager.select_bye_player(self.players)
            if bye_player is not None:
                self.players.remove(bye_player)

        logger.info(
            "Creating round %s/%s with %s players",
            self.current_round,
            self.rounds,
            len(self.players),
        )

        try:
            matches = self.round_manager.create_pairings(
                self.players, self.current_round
            )
        except NoPairingAvailableException:
            # Leave the round unplayed so the driver can retry it
            self.current_round -= 1
            raise
        finally:
            if bye_player is not None:
                self.players.append(bye_player)

        if bye_player is not None:
            bye_player.grant_bye()

        round_data = RoundData(
            round_number=self.current_round,
            bye_player_id=bye_player.id if bye_player else None,
        )
        schedule: RoundSchedule = []
        for home, away in matches:
            pairing = Pairing(home, away)
            self.pairings[pairing.id] = pairing
            round_data.pairings.append((pairing.id, home.id, away.id))
            schedule.append((pairing.id, home.name, away.name))

        if self.config.shuffle_pairings:
            self.rng.shuffle(schedule)

        self.round_history.append(round_data)
        return schedule

    def record_result(
        self,
        pairing_id: str,
        home_score: int,
        away_score: int,
        drawn_games: int = 0,
    ) -> MatchResult:
        """Record the result of a pairing, specified by its id.

        Raises:
            PairingNotFoundException: If the pairing is not active
            InvalidScoreException: If the score is invalid
        """
        return self.result_recorder.record_result(
            self.pairings,
            pairing_id,
            home_score,
            away_score,
            drawn_games,
            round_data=self.current_round_data,
        )

    def ranking(self) -> List[Standing]:
        """Rank all players using all tiebreakers.

        Only needed when the standings are displayed; pairing a round uses
        match points alone.
        """
        return self.tiebreak_calculator.rank_players(
            self.players_by_id.values(), self.players_by_id, rng=self.rng
        )


def new_tournament(
    names: Sequence[str],
    config: Optional[TournamentConfig] = None,
    rng: Optional[random.Random] = None,
) -> Tournament:
    """Create a tournament with one new player per name.

    Args:
        names: Unique display names, in roster order
        config: Optional tournament settings
        rng: Optional random generator, overrides ``config.seed``

    Raises:
        DuplicatePlayerException: If a name appears twice
        TournamentStateException: If ``names`` is empty
    """
    seen = set()
    for name in names:
        if name in seen:
            raise DuplicatePlayerException(f"Duplicate player name: {name}")
        seen.add(name)

    return Tournament([Player(name) for name in names], config=config, rng=rng)
