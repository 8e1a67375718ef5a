"""Validation service for checking many lines at once.

This module provides a service layer that runs the validator over a
sequence of lines and aggregates the results for batch commands.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from bracket_validator.utils.logging import get_logger
from bracket_validator.validation.results import ValidationResult
from bracket_validator.validation.validator import validate

logger = get_logger(__name__)


@dataclass(frozen=True)
class LineResult:
    """Validation result for one numbered input line."""

    line_number: int
    text: str
    result: ValidationResult


class ValidationService:
    """Validates batches of lines and formats reports.

    Each line is validated independently; trailing newlines are stripped
    before validation.
    """

    def __init__(self, verbose: bool = False):
        """Initialize service.

        Args:
            verbose: Include error code descriptions in reports
        """
        self.verbose = verbose

    def validate_all(self, lines: Iterable[str]) -> list[LineResult]:
        """Validate every line.

        Args:
            lines: Input lines, e.g. an open text file

        Returns:
            One LineResult per line, numbered from 1
        """
        results = []
        for number, line in enumerate(lines, start=1):
            text = line.rstrip("\r\n")
            result = validate(text)
            logger.debug(
                "Validated line", line_number=number, valid=result.valid
            )
            results.append(LineResult(number, text, result))
        return results

    def has_errors(self, results: list[LineResult]) -> bool:
        """Check if any line failed validation."""
        return any(r.result.failed for r in results)

    def format_report(self, results: list[LineResult]) -> str:
        """Format one ``<n>: <result>`` line per validated line.

        Args:
            results: Results from validate_all()

        Returns:
            Report string, empty when there are no results
        """
        return "\n".join(
            f"{r.line_number}: {r.result.format(verbose=self.verbose)}"
            for r in results
        )

    def summary(self, results: list[LineResult]) -> str:
        """Summarize valid vs. invalid counts."""
        invalid = sum(1 for r in results if r.result.failed)
        valid = len(results) - invalid
        if not results:
            return "No lines to validate"
        noun = "line" if len(results) == 1 else "lines"
        return f"{len(results)} {noun} checked: {valid} valid, {invalid} invalid"
