"""Exceptions for use in Swiss Pairing"""

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

from typing import Optional

# ========== Base Application Exception ==========


class SwissPairingException(Exception):
    """Base exception for all Swiss Pairing errors.

    All custom exceptions in the package inherit from this class, so a driver
    can catch every tournament error with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(SwissPairingException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when a pairing configuration is invalid."""

    pass


class NoPairingAvailableException(PairingException):
    """Raised when no complete pairing could be generated for a round."""

    def __init__(self, round_number: int, attempts: int) -> None:
        self.round_number = round_number
        self.attempts = attempts
        super().__init__(
            f"No complete pairing found for round {round_number} "
            f"after {attempts} attempts"
        )


# ========== Tournament Exceptions ==========


class TournamentException(SwissPairingException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class DuplicatePlayerException(TournamentException):
    """Raised when attempting to add a player that already exists."""

    pass


# ========== Player Exceptions ==========


class PlayerException(SwissPairingException):
    """Base exception for player-related errors."""

    pass


class NoOpponentsException(PlayerException):
    """Raised when an opponent-based percentage is requested for a player
    who has not faced anyone yet."""

    pass


# ========== Result Exceptions ==========


class ResultException(SwissPairingException):
    """Base exception for result recording errors."""

    pass


class InvalidScoreException(ResultException):
    """Raised when a score or drawn game count is out of range.

    Attributes:
        field: Name of the offending input ("home_score", "away_score",
            "drawn_games" or "games_total")
        value: The value that failed the check
        minimum: Inclusive lower bound
        maximum: Inclusive upper bound
    """

    def __init__(
        self,
        field: str,
        value: int,
        minimum: int,
        maximum: int,
        message: Optional[str] = None,
    ) -> None:
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            message
            or f"Invalid {field}: {value} (must be between {minimum} and {maximum})"
        )


class PairingNotFoundException(ResultException):
    """Raised when a pairing id is not in the current round's pairing table."""

    def __init__(self, pairing_id: str, message: Optional[str] = None) -> None:
        self.pairing_id = pairing_id
        super().__init__(message or f"Pairing not found: {pairing_id}")


class DuplicateResultException(ResultException):
    """Raised when attempting to record a result that already exists."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(SwissPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
