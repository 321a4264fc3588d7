from swisspairing.validation.round_checker import (
    RoundValidator,
    ValidationReport,
    Violation,
    create_round_validator,
)

__all__ = ["RoundValidator", "ValidationReport", "Violation", "create_round_validator"]
