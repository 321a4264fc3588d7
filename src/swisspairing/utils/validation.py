"""Validation utilities for Swiss Pairing.

This module provides reusable range checks with consistent error handling.
"""

from typing import Optional

from swisspairing.constants import (
    MAX_DRAWN_GAMES,
    MAX_GAME_WINS,
    MAX_GAMES_PER_MATCH,
    MIN_DRAWN_GAMES,
    MIN_GAME_WINS,
    MIN_GAMES_PER_MATCH,
)
from swisspairing.exceptions import InvalidScoreException


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        field: Name of the checked value
        value: The checked value
        minimum: Inclusive lower bound used for the check
        maximum: Inclusive upper bound used for the check
    """

    def __init__(
        self,
        is_valid: bool,
        field: str,
        value: int,
        minimum: int,
        maximum: int,
        error_message: Optional[str] = None,
    ):
        self.is_valid = is_valid
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        self.error_message = error_message

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def raise_for_status(self) -> None:
        """Raise InvalidScoreException if the check failed."""
        if not self.is_valid:
            raise InvalidScoreException(
                self.field,
                self.value,
                self.minimum,
                self.maximum,
                message=self.error_message,
            )

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.field}={self.value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Range Validation ==========


def check_range(field: str, value: int, minimum: int, maximum: int) -> ValidationResult:
    """Check that ``minimum <= value <= maximum``.

    Example:
        >>> bool(check_range("home_score", 2, 0, 2))
        True
        >>> check_range("home_score", 4, 0, 2).error_message
        'Invalid home_score: 4 (must be between 0 and 2)'
        >>> check_range("home_score", 0.5, 0, 2).error_message
        'Invalid home_score: 0.5 (must be an integer)'
    """
    # bool is an int subclass but never a game count
    if not isinstance(value, int) or isinstance(value, bool):
        return ValidationResult(
            False,
            field,
            value,
            minimum,
            maximum,
            error_message=f"Invalid {field}: {value!r} (must be an integer)",
        )

    if minimum <= value <= maximum:
        return ValidationResult(True, field, value, minimum, maximum)

    return ValidationResult(
        False,
        field,
        value,
        minimum,
        maximum,
        error_message=f"Invalid {field}: {value} (must be between {minimum} and {maximum})",
    )


# ========== Match Score Validation ==========


def validate_match_score(
    home_score: int, away_score: int, drawn_games: int
) -> ValidationResult:
    """Validate the three numbers that describe a finished match.

    Each game count is checked on its own first, then the total number of
    games played. The first failing check is returned.

    Args:
        home_score: Games won by the home player (0-2)
        away_score: Games won by the away player (0-2)
        drawn_games: Games drawn (0-3)

    Returns:
        ValidationResult for the first failing check, or a valid result for
        the total
    """
    checks = (
        ("home_score", home_score, MIN_GAME_WINS, MAX_GAME_WINS),
        ("away_score", away_score, MIN_GAME_WINS, MAX_GAME_WINS),
        ("drawn_games", drawn_games, MIN_DRAWN_GAMES, MAX_DRAWN_GAMES),
    )
    for field, value, minimum, maximum in checks:
        result = check_range(field, value, minimum, maximum)
        if not result:
            return result

    # At least one game needs to have been completed, even if it's a draw
    return check_range(
        "games_total",
        home_score + away_score + drawn_games,
        MIN_GAMES_PER_MATCH,
        MAX_GAMES_PER_MATCH,
    )


def validate_match_score_strict(
    home_score: int, away_score: int, drawn_games: int
) -> None:
    """Validate a match score and raise if invalid.

    Raises:
        InvalidScoreException: If any value or the game total is out of range
    """
    validate_match_score(home_score, away_score, drawn_games).raise_for_status()
