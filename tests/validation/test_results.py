"""Tests for validation result types and bracket tables."""

import dataclasses

import pytest

from bracket_validator.validation import (
    ErrorCode,
    ValidationResult,
    bracket_stream,
    closing_bracket_for,
)


class TestValidationResult:
    """Tests for ValidationResult value object."""

    def test_ok(self):
        result = ValidationResult.ok()

        assert result.valid
        assert not result.failed
        assert result.error_code is None

    def test_error(self):
        result = ValidationResult.error(ErrorCode.MISMATCHED_CLOSING)

        assert not result.valid
        assert result.failed
        assert result.error_code == ErrorCode.MISMATCHED_CLOSING

    def test_is_immutable(self):
        result = ValidationResult.ok()

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.valid = False

    def test_valid_result_rejects_error_code(self):
        with pytest.raises(ValueError):
            ValidationResult(valid=True, error_code=ErrorCode.NO_BRACKETS)

    def test_invalid_result_requires_error_code(self):
        with pytest.raises(ValueError):
            ValidationResult(valid=False)

    def test_format_valid(self):
        assert ValidationResult.ok().format() == "True."
        assert ValidationResult.ok().format(verbose=True) == "True."

    def test_format_invalid(self):
        result = ValidationResult.error(ErrorCode.NO_BRACKETS)

        assert result.format() == "False. Error: NO_BRACKETS"

    def test_format_invalid_verbose(self):
        result = ValidationResult.error(ErrorCode.UNCLOSED_OPENING)

        formatted = result.format(verbose=True)
        assert formatted.startswith("False. Error: UNCLOSED_OPENING (")
        assert ErrorCode.UNCLOSED_OPENING.description in formatted


class TestErrorCode:
    """Tests for ErrorCode enum."""

    def test_values_are_literal_codes(self):
        assert [code.value for code in ErrorCode] == [
            "NO_BRACKETS",
            "ODD_BRACKET_COUNT",
            "CLOSING_BEFORE_OPENING",
            "MISMATCHED_CLOSING",
            "UNCLOSED_OPENING",
        ]

    def test_every_code_has_description(self):
        for code in ErrorCode:
            assert code.description


class TestBrackets:
    """Tests for bracket helpers."""

    @pytest.mark.parametrize(
        "opening,closing", [("(", ")"), ("[", "]"), ("{", "}")]
    )
    def test_closing_bracket_for(self, opening, closing):
        assert closing_bracket_for(opening) == closing

    @pytest.mark.parametrize("char", [")", "]", "}", "<", "a", ""])
    def test_closing_bracket_for_rejects_non_opening(self, char):
        with pytest.raises(ValueError, match="Unsupported opening bracket"):
            closing_bracket_for(char)

    def test_bracket_stream_keeps_order(self):
        assert bracket_stream("a(b[c]d{e}f)g") == "([]{})"

    def test_bracket_stream_empty(self):
        assert bracket_stream("no brackets here") == ""
