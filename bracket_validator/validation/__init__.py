"""Bracket validation.

This package provides the bracket balance validator, its structured
result types, and a service for validating many lines at once.
"""

from bracket_validator.validation.brackets import bracket_stream, closing_bracket_for
from bracket_validator.validation.results import ErrorCode, ValidationResult
from bracket_validator.validation.service import LineResult, ValidationService
from bracket_validator.validation.validator import validate

__all__ = [
    "ErrorCode",
    "LineResult",
    "ValidationResult",
    "ValidationService",
    "bracket_stream",
    "closing_bracket_for",
    "validate",
]
