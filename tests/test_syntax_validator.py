"""Tests for structural pattern validation.

Validates check order, diagnostic content and strict-mode rules.
"""

import pytest
from hypothesis import event, given

from formatpattern import FormatType, validate
from formatpattern.constants import EMPTY_CONTEXT
from formatpattern.diagnostics import DiagnosticCode
from formatpattern.syntax import detect_type, validate_pattern
from tests.strategies import pattern_chaos, valid_patterns


class TestEmptyAndBraces:
    """Checks 1 and 2: empty pattern and brace balance."""

    def test_empty_pattern(self) -> None:
        """Empty pattern fails with every diagnostic field populated."""
        result = validate("")

        assert not result.is_valid
        error = result.errors[0]
        assert error.code is DiagnosticCode.EMPTY_PATTERN
        assert "Parse failed" in error.message
        assert "empty" in error.message
        assert error.position == 0
        assert error.context == EMPTY_CONTEXT
        assert error.suggestions

    def test_unclosed_brace(self) -> None:
        """Unclosed '{' is reported at its own position."""
        error = validate("{missing_close").errors[0]

        assert error.code is DiagnosticCode.UNBALANCED_BRACES
        assert "Unbalanced braces" in error.message
        assert error.position == 0
        assert error.context == "{missing_cl"

    def test_brace_suggestions_mention_matching_brace(self) -> None:
        """Brace suggestions reference matching braces."""
        suggestions = " ".join(validate("{x").errors[0].suggestions)

        assert "matching" in suggestions
        assert "brace" in suggestions

    def test_unopened_brace(self) -> None:
        """'}' without '{' is reported where it occurs."""
        error = validate("Total: x}").errors[0]

        assert error.code is DiagnosticCode.UNBALANCED_BRACES
        assert error.position == 8

    def test_first_unmatched_brace_is_reported(self) -> None:
        """'{{{}' reports the outermost unclosed brace."""
        error = validate("{{{}").errors[0]

        assert error.code is DiagnosticCode.UNBALANCED_BRACES
        assert error.position == 0

    def test_dynamic_suggestion_follows_canned_ones(self) -> None:
        """The last suggestion is derived from the offending character."""
        suggestions = validate("x}").errors[0].suggestions

        assert "'}'" in suggestions[-1]


class TestInvalidSyntax:
    """Check 3: nonsensical symbol sequences."""

    @pytest.mark.parametrize(
        ("pattern", "position"),
        [
            ("{{}}", 1),
            ("{a{b}}", 2),
        ],
    )
    def test_nested_braces(self, pattern: str, position: int) -> None:
        """Balanced but nested braces are invalid syntax."""
        error = validate(pattern).errors[0]

        assert error.code is DiagnosticCode.INVALID_SYNTAX
        assert "Invalid pattern syntax" in error.message
        assert error.position == position

    def test_repeated_percent(self) -> None:
        """A run of '%' signs is rejected at the run's start."""
        error = validate("0%%").errors[0]

        assert error.code is DiagnosticCode.INVALID_SYNTAX
        assert error.position == 1
        assert "2 times" in error.message

    def test_currency_run_limit(self) -> None:
        """Up to three generic currency signs are allowed."""
        assert validate("¤¤¤#,##0").is_valid

        error = validate("¤¤¤¤#,##0").errors[0]
        assert error.code is DiagnosticCode.INVALID_SYNTAX
        assert error.position == 0

    def test_extra_decimal_separator(self) -> None:
        """Second '.' inside the digit body is reported."""
        error = validate("0.0.0").errors[0]

        assert error.code is DiagnosticCode.INVALID_SYNTAX
        assert error.position == 3

    def test_decimal_point_in_affix_is_literal(self) -> None:
        """A '.' outside the digit body is prefix text."""
        assert validate("No. 0.00").is_valid

    def test_decimal_separator_per_section(self) -> None:
        """Each ';' section may carry its own decimal separator."""
        assert validate("0.00;(0.00)").is_valid

    def test_extra_section_separator(self) -> None:
        """A third section is reported at the second ';'."""
        error = validate("0;0;0").errors[0]

        assert error.code is DiagnosticCode.INVALID_SYNTAX
        assert error.position == 3

    @pytest.mark.parametrize("pattern", ["%", ",", "¤"])
    def test_missing_digits(self, pattern: str) -> None:
        """Number families need at least one digit placeholder."""
        error = validate(pattern).errors[0]

        assert error.code is DiagnosticCode.INVALID_SYNTAX
        assert "no digit placeholder" in error.message

    def test_apostrophes_are_plain_text(self) -> None:
        """Quotes need no pairing."""
        assert validate("Don't panic, {name}").is_valid


class TestTypeMismatch:
    """Check 4: caller-asserted type."""

    def test_mismatch_message(self) -> None:
        """Asserting the wrong type fails with 'type mismatch'."""
        error = validate("#,##0", type="date").errors[0]

        assert error.code is DiagnosticCode.TYPE_MISMATCH
        assert "type mismatch" in error.message
        assert "expected date" in error.message
        assert "detected number" in error.message

    def test_matching_type_passes(self) -> None:
        """Asserting the detected type is accepted."""
        assert validate("#,##0", type=FormatType.NUMBER).is_valid

    def test_syntax_errors_win_over_mismatch(self) -> None:
        """Structural errors are reported before type checks."""
        error = validate("{x", type="number").errors[0]

        assert error.code is DiagnosticCode.UNBALANCED_BRACES

    def test_unknown_type_is_reported(self) -> None:
        """A type name outside FormatType fails validation instead of raising."""
        result = validate("#,##0", type="money")

        assert not result.is_valid
        assert result.errors[0].code is DiagnosticCode.TYPE_MISMATCH
        assert result.errors[0].message == "Pattern type mismatch: unknown type 'money'"


class TestStrictMode:
    """Check 5: strict-mode restrictions."""

    def test_custom_pattern(self) -> None:
        """Custom patterns are rejected only in strict mode."""
        assert validate("abc").is_valid

        error = validate("abc", strict=True).errors[0]
        assert error.code is DiagnosticCode.STRICT_VIOLATION
        assert error.message.startswith("Strict mode:")

    def test_field_letter_in_number_pattern(self) -> None:
        """A date/time field inside a number pattern is strict-only."""
        assert validate("E #,##0.00").is_valid

        error = validate("E #,##0.00", strict=True).errors[0]
        assert error.code is DiagnosticCode.STRICT_VIOLATION
        assert error.position == 0

    def test_word_label_in_number_pattern(self) -> None:
        """Words such as 'EUR' or 'Amount:' are literal text, even in strict mode."""
        assert validate("EUR #,##0.00", strict=True).is_valid
        assert validate("Amount: #,##0.00", strict=True).is_valid

    def test_digits_in_date_pattern(self) -> None:
        """Digit placeholders inside a date pattern are strict-only."""
        assert validate("yyyy-MM-dd 00").is_valid

        error = validate("yyyy-MM-dd 00", strict=True).errors[0]
        assert error.position == 11

    def test_literal_letter_in_time_pattern(self) -> None:
        """Plain letters in a time pattern are strict-only."""
        assert validate("HH:mm at").is_valid

        error = validate("HH:mm at", strict=True).errors[0]
        assert error.code is DiagnosticCode.STRICT_VIOLATION
        assert error.position == 6

    def test_empty_placeholder(self) -> None:
        """'{}' is allowed outside strict mode."""
        assert validate("Value: {}").is_valid

        error = validate("Value: {}", strict=True).errors[0]
        assert error.code is DiagnosticCode.STRICT_VIOLATION
        assert error.position == 7

    def test_clean_patterns_pass_strict(self) -> None:
        """Well-formed single-family patterns pass strict mode."""
        for pattern in ("#,##0.00", "¤#,##0.00", "#0.##%", "yyyy-MM-dd", "HH:mm", "{value}"):
            assert validate(pattern, strict=True).is_valid, pattern


class TestTransforms:
    """Unknown transform reporting."""

    def test_unknown_transform_is_warning(self) -> None:
        """Outside strict mode an unknown transform only warns."""
        result = validate("{value|shout}")

        assert result.is_valid
        assert result.warning_count == 1
        warning = result.warnings[0]
        assert warning.code is DiagnosticCode.UNKNOWN_TRANSFORM
        assert warning.severity == "warning"
        assert "shout" in warning.message

    def test_unknown_transform_is_error_in_strict_mode(self) -> None:
        """Strict mode turns the first unknown transform into the error."""
        result = validate("{value|shout|whisper}", strict=True)

        assert not result.is_valid
        assert result.errors[0].code is DiagnosticCode.UNKNOWN_TRANSFORM
        assert "shout" in result.errors[0].message
        assert result.warnings == ()

    @pytest.mark.parametrize("step", ["truncate", "truncate:x", "upper:2"])
    def test_malformed_arguments_warn(self, step: str) -> None:
        """Arguments must fit the transform."""
        assert validate(f"{{value|{step}}}").warning_count == 1

    def test_known_transforms(self) -> None:
        """Known transforms produce no warnings."""
        result = validate("{value|trim|upper|truncate:10}")

        assert result.warnings == ()


class TestValidatorProperties:
    """Property-based validator checks."""

    @given(pattern=pattern_chaos())
    def test_strict_never_more_permissive(self, pattern: str) -> None:
        """Anything strict mode accepts, non-strict mode accepts."""
        strict = validate(pattern, strict=True)
        lenient = validate(pattern)
        event(f"strict_valid={strict.is_valid} lenient_valid={lenient.is_valid}")

        if strict.is_valid:
            assert lenient.is_valid

    @given(pattern=pattern_chaos())
    def test_errors_are_complete(self, pattern: str) -> None:
        """Every error has a context, suggestions and an in-range position."""
        for error in validate(pattern).errors:
            assert error.context
            assert error.suggestions
            assert 0 <= error.position <= max(len(pattern) - 1, 0)

    @given(pattern=valid_patterns())
    def test_generated_patterns_are_valid(self, pattern: str) -> None:
        """Family strategies only produce valid patterns."""
        result = validate_pattern(pattern, detect_type(pattern))

        assert result.is_valid, result.errors
