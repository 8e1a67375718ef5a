"""Bracket balance validator.

Checks that ``()``, ``[]`` and ``{}`` in a string are balanced and
correctly nested. Non-bracket characters are ignored.
"""

from bracket_validator.validation.brackets import (
    OPENING_BRACKETS,
    bracket_stream,
    closing_bracket_for,
)
from bracket_validator.validation.results import ErrorCode, ValidationResult


def validate(text: str) -> ValidationResult:
    """Validate the brackets in ``text``.

    Rules are applied in a fixed order and the first one that matches
    decides the error code: no brackets, odd bracket count, first
    structural violation from the left, leftover opening brackets.

    Args:
        text: Any string, possibly empty

    Returns:
        ValidationResult, never raises for string input
    """
    stream = bracket_stream(text)

    if not stream:
        return ValidationResult.error(ErrorCode.NO_BRACKETS)
    if len(stream) % 2 != 0:
        return ValidationResult.error(ErrorCode.ODD_BRACKET_COUNT)

    pending: list[str] = []
    for bracket in stream:
        if bracket in OPENING_BRACKETS:
            pending.append(bracket)
            continue

        if not pending:
            return ValidationResult.error(ErrorCode.CLOSING_BEFORE_OPENING)
        if bracket != closing_bracket_for(pending[-1]):
            return ValidationResult.error(ErrorCode.MISMATCHED_CLOSING)
        pending.pop()

    if pending:
        return ValidationResult.error(ErrorCode.UNCLOSED_OPENING)
    return ValidationResult.ok()
