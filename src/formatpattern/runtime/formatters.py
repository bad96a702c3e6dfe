"""Formatter closures for each format family.

Each builder runs once per compiled pattern. It resolves everything that does
not depend on the runtime value (Babel patterns, rounding precision, text
segments) and returns a closure over that immutable data. Closures never
raise for bad values: they return ``(text, errors)`` where a non-empty error
tuple means ``text`` is a fallback.

Fallback values:
    - Value of the wrong kind: "{!number}", "{!date}", ...
    - Babel failure: the value's plain string form

Python 3.13+. Uses Babel for i18n.
"""

from collections.abc import Callable, Mapping
from contextlib import suppress
from datetime import date, datetime, time
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation, localcontext
from types import MappingProxyType
from typing import Any

from babel import dates as babel_dates
from babel import numbers as babel_numbers

from formatpattern.constants import (
    DEFAULT_CURRENCY,
    FALLBACK_INVALID_VALUE,
    GENERIC_CURRENCY_SIGN,
    MAX_DECIMAL_DIGITS,
)
from formatpattern.diagnostics import ErrorTemplate, FormattingError
from formatpattern.enums import FormatType, ValueKind
from formatpattern.syntax import Placeholder, Token, Transform

from .locale_context import LocaleContext
from .options import CallOptions, FormatOptions
from .patterns import (
    implied_currency,
    number_pattern_text,
    percent_scale,
    temporal_pattern_text,
    text_segments,
)
from .value_kinds import classify_value, is_finite_number

__all__ = [
    "FormatResult",
    "Formatter",
    "build_custom_formatter",
    "build_number_formatter",
    "build_temporal_formatter",
    "build_text_formatter",
    "display_text",
]

type FormatResult = tuple[str, tuple[FormattingError, ...]]
type Formatter = Callable[..., FormatResult]

_TEMPORAL_KINDS: MappingProxyType[FormatType, tuple[frozenset[ValueKind], str]] = (
    MappingProxyType(
        {
            FormatType.DATE: (frozenset({ValueKind.DATE, ValueKind.DATETIME}), "date or datetime"),
            FormatType.TIME: (frozenset({ValueKind.TIME, ValueKind.DATETIME}), "time or datetime"),
            FormatType.DATETIME: (frozenset({ValueKind.DATETIME}), "datetime"),
        }
    )
)

_NUMBER_ACCEPTS = "int, float or Decimal"


def _invalid_value(value: object, format_type: FormatType, accepted: str) -> FormatResult:
    fallback = FALLBACK_INVALID_VALUE.format(type=format_type.value)
    diagnostic = ErrorTemplate.invalid_value(value, format_type.value, accepted)
    return fallback, (FormattingError(diagnostic, fallback_value=fallback),)


def display_text(value: object) -> str:
    """Canonical string form of a value; None renders as the empty string."""
    return "" if value is None else str(value)


# ============================================================================
# NUMBER, CURRENCY, PERCENTAGE
# ============================================================================


def _as_decimal(value: int | float | Decimal) -> Decimal:
    """Exact Decimal for ints; floats go through their shortest repr.

    The repr makes 0.35 round as written, not as its binary approximation
    0.34999...
    """
    match value:
        case Decimal():
            return value
        case int():
            return Decimal(value)
        case _:
            return Decimal(str(value))


def _round_half_even(number: Decimal, exponent: int) -> Decimal:
    """Round to ``exponent`` fraction digits, ties to even.

    Must run inside a context wide enough for the result; see
    ``_working_precision``.
    """
    return number.quantize(Decimal(1).scaleb(-exponent), rounding=ROUND_HALF_EVEN)


def _working_precision(number: Decimal, exponent: int, current: int) -> int:
    """Decimal precision holding every digit of ``number`` at ``exponent`` places."""
    needed = number.adjusted() + exponent + 2
    return max(current, min(needed, MAX_DECIMAL_DIGITS))


def build_number_formatter(
    tokens: tuple[Token, ...], format_type: FormatType, options: FormatOptions
) -> Formatter:
    """Compile a number, currency or percentage pattern.

    Rounding happens here, half to even at the last decimal placeholder; for
    percentages two extra digits are kept because Babel scales by 100.

    Raises:
        ValueError: If Babel cannot parse the assembled pattern
    """
    verbatim = babel_numbers.parse_pattern(number_pattern_text(tokens, generic_currency=False))
    generic = (
        babel_numbers.parse_pattern(number_pattern_text(tokens, generic_currency=True))
        if format_type is FormatType.CURRENCY
        else verbatim
    )
    has_generic_sign = any(token.text == GENERIC_CURRENCY_SIGN for token in tokens)
    fallback_currency = implied_currency(tokens, DEFAULT_CURRENCY)
    exponent = verbatim.frac_prec[1] + percent_scale(tokens)
    type_name = format_type.value

    def format_number(value: Any, call_options: Mapping[str, Any] | None = None) -> FormatResult:
        if not is_finite_number(value):
            return _invalid_value(value, format_type, _NUMBER_ACCEPTS)
        call = CallOptions.from_mapping(call_options)
        ctx = LocaleContext.create(call.locale or options.locale)
        currency = call.currency or options.currency
        number = _as_decimal(value)

        # Babel quantizes again in the thread's context, so both steps share it
        with localcontext() as decimal_context:
            decimal_context.prec = _working_precision(number, exponent, decimal_context.prec)
            try:
                amount = _round_half_even(number, exponent)
            except InvalidOperation as e:
                diagnostic = ErrorTemplate.formatting_failed(number, type_name, str(e))
                return str(number), (FormattingError(diagnostic, fallback_value=str(number)),)

            try:
                if format_type is FormatType.CURRENCY and currency is not None:
                    return ctx.format_currency(amount, currency, generic), ()
                if has_generic_sign:
                    return ctx.format_currency(amount, fallback_currency, verbatim), ()
                return ctx.format_number(amount, verbatim, type_name=type_name), ()
            except FormattingError as e:
                return e.fallback_value, (e,)

    return format_number


# ============================================================================
# DATE, TIME, DATETIME
# ============================================================================


def _coerce_temporal(value: object, format_type: FormatType) -> date | time | None:
    """Pass calendar values through and convert ISO 8601 strings.

    Returns:
        The calendar value, or None if value is neither calendar nor ISO text
    """
    match value:
        case date() | time():
            return value
        case str():
            parsers: tuple[Callable[[str], date | time], ...] = (
                (time.fromisoformat, datetime.fromisoformat)
                if format_type is FormatType.TIME
                else (datetime.fromisoformat,)
            )
            for parser in parsers:
                with suppress(ValueError):
                    return parser(value.strip())
    return None


def build_temporal_formatter(
    tokens: tuple[Token, ...], format_type: FormatType, options: FormatOptions
) -> Formatter:
    """Compile a date, time or datetime pattern.

    Raises:
        ValueError: If Babel cannot parse the assembled pattern
    """
    cldr_pattern = temporal_pattern_text(tokens)
    babel_dates.parse_pattern(cldr_pattern)
    accepted_kinds, accepted = _TEMPORAL_KINDS[format_type]
    type_name = format_type.value

    def format_temporal(value: Any, call_options: Mapping[str, Any] | None = None) -> FormatResult:
        coerced = _coerce_temporal(value, format_type)
        if coerced is None or classify_value(coerced) not in accepted_kinds:
            return _invalid_value(value, format_type, accepted)
        call = CallOptions.from_mapping(call_options)
        ctx = LocaleContext.create(call.locale or options.locale)
        try:
            return ctx.format_temporal(coerced, cldr_pattern, type_name=type_name), ()
        except FormattingError as e:
            return e.fallback_value, (e,)

    return format_temporal


# ============================================================================
# TEXT, CUSTOM
# ============================================================================


def _apply_transform(text: str, transform: Transform) -> str:
    match (transform.name, transform.argument):
        case ("upper", None):
            return text.upper()
        case ("lower", None):
            return text.lower()
        case ("capitalize", None):
            return text.capitalize()
        case ("trim", None):
            return text.strip()
        case ("truncate", str() as limit) if limit.isdigit():
            return text[: int(limit)]
        case _:
            # Unknown transforms were reported by validation; render unchanged
            return text


def _render_placeholder(
    placeholder: Placeholder, value: object, fields: Mapping[str, Any] | None
) -> str:
    source = fields[placeholder.name] if fields and placeholder.name in fields else value
    text = display_text(source)
    for transform in placeholder.transforms:
        text = _apply_transform(text, transform)
    return text


def build_text_formatter(tokens: tuple[Token, ...]) -> Formatter:
    """Compile a text pattern. The resulting formatter accepts any value."""
    segments = text_segments(tokens)

    def format_text(value: Any, call_options: Mapping[str, Any] | None = None) -> FormatResult:
        fields = CallOptions.from_mapping(call_options).fields
        parts = [
            segment
            if isinstance(segment, str)
            else _render_placeholder(segment, value, fields)
            for segment in segments
        ]
        return "".join(parts), ()

    return format_text


def build_custom_formatter() -> Formatter:
    """Formatter for patterns with no recognized family: the value as text."""

    def format_custom(value: Any, _call_options: Mapping[str, Any] | None = None) -> FormatResult:
        return display_text(value), ()

    return format_custom

