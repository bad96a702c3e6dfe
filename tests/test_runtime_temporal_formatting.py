"""Tests for date, time and datetime formatters.

Validates CLDR field rendering, literal text handling, ISO string
coercion and the fallback contract for non-calendar values.
"""

from datetime import date, datetime, time

import pytest
from hypothesis import given

from formatpattern import FormatType, parse
from formatpattern.diagnostics import DiagnosticCode
from tests.strategies import calendar_values, cell_values, date_patterns, datetime_patterns

MARCH_15 = date(2024, 3, 15)
MARCH_15_AFTERNOON = datetime(2024, 3, 15, 14, 5, 9)


def _format(pattern: str, value: object, **call_options: object) -> str:
    spec, errors = parse(pattern)
    assert spec is not None, errors
    text, format_errors = spec.format(value, call_options or None)
    assert format_errors == (), format_errors
    return text


class TestDateFormatting:
    """Date patterns."""

    def test_iso_date(self) -> None:
        """'yyyy-MM-dd' renders zero-padded fields."""
        spec, _ = parse("yyyy-MM-dd")

        assert spec is not None
        assert spec.type is FormatType.DATE
        text, errors = spec.format(MARCH_15)
        assert errors == ()
        assert "2024" in text
        assert "03" in text
        assert "15" in text
        assert text == "2024-03-15"

    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            ("dd/MM/yyyy", "15/03/2024"),
            ("d.M.yy", "15.3.24"),
            ("MMM d, yyyy", "Mar 15, 2024"),
            ("E, MMM dd", "Fri, Mar 15"),
            ("EEEE", "2024-03-15"),
        ],
    )
    def test_field_variants(self, pattern: str, expected: str) -> None:
        """Field widths follow CLDR; 'EEEE' alone is a custom pattern."""
        assert _format(pattern, MARCH_15) == expected

    def test_datetime_value_accepted(self) -> None:
        """A datetime renders through a date pattern."""
        assert _format("yyyy-MM-dd", MARCH_15_AFTERNOON) == "2024-03-15"

    def test_iso_string_coerced(self) -> None:
        """ISO 8601 text is parsed before formatting."""
        assert _format("dd/MM/yyyy", "2024-03-15") == "15/03/2024"

    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            ("Due: yyyy-MM-dd", "Due: 2024-03-15"),
            ("Month: MMMM", "Month: March"),
            ("d de MMMM", "15 de March"),
        ],
    )
    def test_word_labels(self, pattern: str, expected: str) -> None:
        """Words that are not all field letters are copied verbatim."""
        assert _format(pattern, MARCH_15) == expected

    def test_malformed_call_options_ignored(self) -> None:
        """A non-string locale or a non-mapping falls back to parse options."""
        spec, _ = parse("yyyy-MM-dd")

        assert spec is not None
        assert spec.format(MARCH_15, {"locale": 5}) == ("2024-03-15", ())
        assert spec.format(MARCH_15, ["de_DE"]) == ("2024-03-15", ())

    def test_locale_month_names(self) -> None:
        """Month names come from the locale."""
        assert _format("d MMMM yyyy", MARCH_15, locale="de_DE") == "15 März 2024"


class TestTimeFormatting:
    """Time patterns."""

    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            ("HH:mm", "14:05"),
            ("HH:mm:ss", "14:05:09"),
            ("h:mm", "2:05"),
        ],
    )
    def test_time_fields(self, pattern: str, expected: str) -> None:
        """Hours, minutes and seconds are zero-padded per field width."""
        assert _format(pattern, time(14, 5, 9)) == expected

    def test_datetime_value_accepted(self) -> None:
        """A datetime renders through a time pattern."""
        assert _format("HH:mm", MARCH_15_AFTERNOON) == "14:05"

    def test_iso_time_string(self) -> None:
        """'HH:MM' text is parsed as a time of day."""
        assert _format("HH:mm", "09:30") == "09:30"

    def test_date_value_rejected(self) -> None:
        """A bare date has no time of day."""
        spec, _ = parse("HH:mm")

        assert spec is not None
        text, errors = spec.format(MARCH_15)
        assert text == "{!time}"
        assert errors[0].code is DiagnosticCode.INVALID_VALUE


class TestDatetimeFormatting:
    """Datetime patterns."""

    def test_datetime(self) -> None:
        """Date and time fields render together."""
        spec, _ = parse("yyyy-MM-dd HH:mm")

        assert spec is not None
        assert spec.type is FormatType.DATETIME
        assert spec.format(MARCH_15_AFTERNOON) == ("2024-03-15 14:05", ())

    def test_literal_words_are_quoted(self) -> None:
        """Words between fields are copied, not read as fields."""
        assert _format("dd.MM.yyyy at HH:mm", MARCH_15_AFTERNOON) == "15.03.2024 at 14:05"

    def test_apostrophe_literal(self) -> None:
        """An apostrophe is plain text."""
        assert _format("yyyy-MM-dd 'HH", MARCH_15_AFTERNOON) == "2024-03-15 '14"

    def test_date_value_rejected(self) -> None:
        """A datetime pattern needs a datetime."""
        spec, _ = parse("yyyy-MM-dd HH:mm")

        assert spec is not None
        assert spec.format(MARCH_15)[0] == "{!datetime}"


class TestTemporalFallbacks:
    """Invalid values and unsupported field widths."""

    @pytest.mark.parametrize("value", [42, "not a date", None, time(9, 0), True])
    def test_invalid_values(self, value: object) -> None:
        """Non-dates render '{!date}' with an INVALID_VALUE error."""
        spec, _ = parse("yyyy-MM-dd")

        assert spec is not None
        text, errors = spec.format(value)
        assert text == "{!date}"
        assert len(errors) == 1
        assert errors[0].code is DiagnosticCode.INVALID_VALUE

    @pytest.mark.parametrize("pattern", ["ddd-MM-yyyy", "yyyy-MMMMMM-dd", "HHH:mm"])
    def test_unsupported_field_width(self, pattern: str) -> None:
        """Field widths CLDR does not define fail at parse time."""
        spec, errors = parse(pattern)

        assert spec is None
        assert errors[0].code is DiagnosticCode.INVALID_SYNTAX
        assert "not supported" in errors[0].message

    def test_unsupported_width_passes_validation(self) -> None:
        """Field widths are checked when compiling, not when validating."""
        spec, errors = parse("ddd-MM-yyyy", validate_only=True)

        assert (spec, errors) == (None, ())


class TestTemporalProperties:
    """Property-based temporal checks."""

    @given(pattern=date_patterns(), value=calendar_values())
    def test_date_formatters_never_raise(self, pattern: str, value: object) -> None:
        """Date formatters accept dates and reject times without raising."""
        spec, _ = parse(pattern)
        assert spec is not None

        text, errors = spec.format(value)
        if isinstance(value, date):
            assert errors == ()
        else:
            assert text == "{!date}"

    @given(pattern=datetime_patterns(), value=cell_values())
    def test_datetime_formatters_never_raise(self, pattern: str, value: object) -> None:
        """Any cell value yields text and at most one error."""
        spec, _ = parse(pattern)
        assert spec is not None

        text, errors = spec.format(value)
        assert isinstance(text, str)
        assert len(errors) <= 1
