"""Validation result types.

This module defines the structured outcome of a bracket validation:
a validity flag plus, on failure, exactly one error classification.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "ErrorCode",
    "ValidationResult",
]


class ErrorCode(str, Enum):
    """Classification of an invalid bracket string.

    Codes are listed in the order the validator checks them; only the
    first matching condition is ever reported.
    """

    NO_BRACKETS = "NO_BRACKETS"
    ODD_BRACKET_COUNT = "ODD_BRACKET_COUNT"
    CLOSING_BEFORE_OPENING = "CLOSING_BEFORE_OPENING"
    MISMATCHED_CLOSING = "MISMATCHED_CLOSING"
    UNCLOSED_OPENING = "UNCLOSED_OPENING"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorCode.NO_BRACKETS: "The input contains no brackets",
    ErrorCode.ODD_BRACKET_COUNT: "The total number of brackets is odd",
    ErrorCode.CLOSING_BEFORE_OPENING: (
        "A closing bracket appears before any matching opening bracket"
    ),
    ErrorCode.MISMATCHED_CLOSING: (
        "A closing bracket does not match the last opened bracket"
    ),
    ErrorCode.UNCLOSED_OPENING: "There are more opening brackets than closing ones",
}


@dataclass(frozen=True)
class ValidationResult:
    """Immutable validation result.

    ``error_code`` is set if and only if ``valid`` is False.
    """

    valid: bool
    error_code: ErrorCode | None = None

    def __post_init__(self):
        if self.valid and self.error_code is not None:
            raise ValueError("A valid result cannot carry an error code")
        if not self.valid and self.error_code is None:
            raise ValueError("An invalid result requires an error code")

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def error(cls, code: ErrorCode) -> "ValidationResult":
        return cls(valid=False, error_code=code)

    @property
    def failed(self) -> bool:
        """Check if validation failed."""
        return not self.valid

    def format(self, verbose: bool = False) -> str:
        """Format the result as a single console line.

        Args:
            verbose: Append the human description of the error code

        Returns:
            ``True.`` for valid input, ``False. Error: <CODE>`` otherwise.
        """
        if self.valid:
            return "True."
        line = f"False. Error: {self.error_code.value}"
        if verbose:
            line += f" ({self.error_code.description})"
        return line
