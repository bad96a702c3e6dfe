"""Locale context for thread-safe formatting.

This module provides locale-aware formatting without global state mutation.
Uses Babel for CLDR-compliant number, currency, date and time formatting.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatters use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)
    - Babel failures surface as FormattingError carrying a fallback value

Python 3.13+. Uses Babel for i18n.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation

from babel import Locale
from babel import dates as babel_dates
from babel import numbers as babel_numbers
from babel.numbers import NumberPattern

from formatpattern.constants import DEFAULT_LOCALE
from formatpattern.diagnostics import ErrorTemplate, FormattingError
from formatpattern.locale_utils import get_babel_locale, normalize_locale

__all__ = ["LocaleContext"]

type TemporalValue = date | time | datetime


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for formatting operations.

    Use LocaleContext.create() to construct instances; it resolves the Babel
    Locale once per code and falls back to en_US (with a logged warning) for
    unknown or malformed codes.

    Examples:
        >>> ctx = LocaleContext.create("de-DE")
        >>> ctx.locale_code
        'de_DE'

        >>> ctx = LocaleContext.create("invalid-locale")
        >>> ctx.is_fallback
        True
    """

    locale_code: str
    babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def create(cls, locale_code: str | None) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        Args:
            locale_code: BCP 47 or POSIX locale identifier; None selects
                DEFAULT_LOCALE

        Returns:
            LocaleContext instance. For unknown/invalid locales, formatting uses
            en_US rules while preserving the requested code for debugging.
        """
        code = normalize_locale(locale_code) if locale_code else DEFAULT_LOCALE
        babel_locale, is_fallback = get_babel_locale(code)
        return cls(locale_code=code, babel_locale=babel_locale, is_fallback=is_fallback)

    @staticmethod
    def clear_cache() -> None:
        """Clear the Babel locale cache.

        Use this method to free memory or reset state in tests.
        """
        get_babel_locale.cache_clear()

    def format_number(self, value: Decimal, pattern: NumberPattern, *, type_name: str) -> str:
        """Format a pre-rounded number with a compiled Babel pattern.

        Args:
            value: Finite Decimal already rounded to display precision
            pattern: Parsed Babel number pattern
            type_name: Format type reported in diagnostics

        Returns:
            Formatted number string according to locale rules

        Raises:
            FormattingError: If Babel rejects the value
        """
        try:
            return str(
                babel_numbers.format_decimal(value, format=pattern, locale=self.babel_locale)
            )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            diagnostic = ErrorTemplate.formatting_failed(value, type_name, str(e))
            raise FormattingError(diagnostic, fallback_value=str(value)) from e

    def format_currency(self, value: Decimal, currency: str, pattern: NumberPattern) -> str:
        """Format a pre-rounded amount, rendering '¤' for the given currency.

        Pattern decimals win over ISO 4217 currency digits: "¤#,##0" shows
        no decimals even for USD.

        Args:
            value: Finite Decimal already rounded to display precision
            currency: ISO 4217 currency code (EUR, USD, JPY, ...)
            pattern: Parsed Babel number pattern containing '¤'

        Returns:
            Formatted currency string according to locale rules

        Raises:
            FormattingError: If Babel rejects the value or currency

        Example:
            >>> ctx = LocaleContext.create("en-US")
            >>> ctx.format_currency(Decimal("1234.50"), "EUR", parse_pattern("¤#,##0.00"))
            '€1,234.50'
        """
        try:
            return str(
                babel_numbers.format_currency(
                    value,
                    currency,
                    format=pattern,
                    locale=self.babel_locale,
                    currency_digits=False,
                )
            )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            diagnostic = ErrorTemplate.formatting_failed(value, "currency", str(e))
            raise FormattingError(diagnostic, fallback_value=f"{currency} {value}") from e

    def format_temporal(self, value: TemporalValue, pattern: str, *, type_name: str) -> str:
        """Format a date, time or datetime with a CLDR pattern.

        Args:
            value: Calendar value; datetime is checked before date because it
                is a date subclass
            pattern: CLDR date/time pattern, literal letters quoted
            type_name: Format type reported in diagnostics

        Returns:
            Formatted string according to locale rules

        Raises:
            FormattingError: If Babel cannot render the value with the pattern
        """
        try:
            match value:
                case datetime():
                    text = babel_dates.format_datetime(
                        value, format=pattern, locale=self.babel_locale
                    )
                case date():
                    text = babel_dates.format_date(value, format=pattern, locale=self.babel_locale)
                case _:
                    text = babel_dates.format_time(value, format=pattern, locale=self.babel_locale)
            return str(text)
        except (ValueError, TypeError, OverflowError, AttributeError, KeyError) as e:
            diagnostic = ErrorTemplate.formatting_failed(value, type_name, str(e))
            raise FormattingError(diagnostic, fallback_value=value.isoformat()) from e
