"""Round validation for Swiss tournaments.

Checks a finished (or running) tournament's round history against the rules
every Swiss round must obey:

- R1: nobody is paired with themselves
- R2: nobody is paired twice in the same round
- R3: every active player is paired or has the bye
- R4: no two players meet twice
- R5: nobody receives more than one bye
- R6: the bye recipient does not also play that round
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

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Set

from swisspairing.models.tournament import RoundData
from swisspairing.type_hints import PlayerRegistry
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)

RULE_DESCRIPTIONS = {
    "R1": "No self pairing",
    "R2": "Nobody paired twice in a round",
    "R3": "Every active player paired or on bye",
    "R4": "No rematches",
    "R5": "At most one bye per player",
    "R6": "Bye recipient does not play",
}


@dataclass
class Violation:
    """A single broken rule."""

    rule: str
    round_number: int
    description: str
    player_ids: List[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return f"Round {self.round_number} [{self.rule}] {self.description}"


@dataclass
class ValidationReport:
    """Complete validation report for a tournament's rounds."""

    rounds_checked: int
    violations: List[Violation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def violated_rules(self) -> Set[str]:
        return {v.rule for v in self.violations}

    @property
    def summary(self) -> str:
        if self.is_valid:
            return f"{self.rounds_checked} rounds checked, no violations"
        return (
            f"{self.rounds_checked} rounds checked, {len(self.violations)} "
            f"violations ({', '.join(sorted(self.violated_rules))})"
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "rounds_checked": self.rounds_checked,
            "is_valid": self.is_valid,
            "summary": self.summary,
            "violations": [
                {
                    "rule": v.rule,
                    "round_number": v.round_number,
                    "description": v.description,
                    "player_ids": v.player_ids,
                }
                for v in self.violations
            ],
        }


class RoundValidator:
    """Validates round history against the Swiss pairing rules."""

    def validate_tournament(
        self, players_by_id: PlayerRegistry, rounds: Iterable[RoundData]
    ) -> ValidationReport:
        """Check every round in order.

        Args:
            players_by_id: All players of the tournament
            rounds: Round history, oldest first

        Returns:
            ValidationReport listing every violation found
        """
        report = ValidationReport(rounds_checked=0)
        met: Set[frozenset] = set()
        byes: Counter = Counter()

        for round_data in rounds:
            report.rounds_checked += 1
            report.violations.extend(
                self.validate_round(players_by_id, round_data, met, byes)
            )

        if report.is_valid:
            logger.debug(report.summary)
        else:
            logger.warning(report.summary)
        return report

    def validate_round(
        self,
        players_by_id: PlayerRegistry,
        round_data: RoundData,
        met: Set[frozenset],
        byes: Counter,
    ) -> List[Violation]:
        """Check one round, updating ``met`` and ``byes`` for later rounds."""
        number = round_data.round_number
        violations: List[Violation] = []

        seated = Counter(round_data.player_ids())

        for _, home_id, away_id in round_data.pairings:
            if home_id == away_id:
                violations.append(
                    Violation(
                        "R1",
                        number,
                        f"{self._name(players_by_id, home_id)} paired with themselves",
                        [home_id],
                    )
                )
                continue

            pair = frozenset((home_id, away_id))
            if pair in met:
                violations.append(
                    Violation(
                        "R4",
                        number,
                        f"{self._name(players_by_id, home_id)} and "
                        f"{self._name(players_by_id, away_id)} met before",
                        [home_id, away_id],
                    )
                )
            met.add(pair)

        for player_id, count in seated.items():
            if count > 1:
                violations.append(
                    Violation(
                        "R2",
                        number,
                        f"{self._name(players_by_id, player_id)} paired {count} times",
                        [player_id],
                    )
                )

        bye_id = round_data.bye_player_id
        if bye_id is not None:
            byes[bye_id] += 1
            if byes[bye_id] > 1:
                violations.append(
                    Violation(
                        "R5",
                        number,
                        f"{self._name(players_by_id, bye_id)} received a second bye",
                        [bye_id],
                    )
                )
            if bye_id in seated:
                violations.append(
                    Violation(
                        "R6",
                        number,
                        f"{self._name(players_by_id, bye_id)} has the bye and a game",
                        [bye_id],
                    )
                )

        unpaired = [
            player_id
            for player_id in players_by_id
            if player_id not in seated and player_id != bye_id
        ]
        if unpaired:
            violations.append(
                Violation(
                    "R3",
                    number,
                    f"{len(unpaired)} players neither paired nor on bye",
                    unpaired,
                )
            )

        return violations

    @staticmethod
    def _name(players_by_id: PlayerRegistry, player_id: str) -> str:
        player = players_by_id.get(player_id)
        return player.name if player else player_id


def create_round_validator() -> RoundValidator:
    """Factory for the default validator."""
    return RoundValidator()
