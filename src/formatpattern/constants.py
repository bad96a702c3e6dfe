"""Shared constants for formatpattern.

This module provides centralized configuration constants used across the
syntax and runtime packages. Placing constants here avoids circular imports
and provides a single source of truth.

Constants are grouped by domain:
- Symbol tables: Characters with structural meaning in patterns
- Cache limits: Memory bounds for caching subsystems
- Defaults: Locale and currency used when callers supply none
- Diagnostics: Context snippet sizing
- Fallback strings: Output used when a value cannot be formatted

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Symbol tables
    "CURRENCY_SIGNS",
    "GENERIC_CURRENCY_SIGN",
    "LITERAL_CURRENCY_CODES",
    "DIGIT_PLACEHOLDERS",
    "SEPARATORS",
    "DATE_SYMBOLS",
    "DATE_ANCHOR_SYMBOLS",
    "TIME_SYMBOLS",
    "PERCENT_SIGN",
    "QUOTE",
    "MAX_CURRENCY_RUN",
    "MAX_DECIMAL_DIGITS",
    # Cache limits
    "DEFAULT_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_CACHED_PATTERN_LENGTH",
    # Defaults
    "DEFAULT_LOCALE",
    "DEFAULT_CURRENCY",
    # Diagnostics
    "CONTEXT_RADIUS",
    "EMPTY_CONTEXT",
    # Fallback strings
    "FALLBACK_INVALID_VALUE",
]

# ============================================================================
# SYMBOL TABLES
# ============================================================================

# CLDR generic currency placeholder (U+00A4).
GENERIC_CURRENCY_SIGN: str = "¤"

# Every character recognized as a currency marker.
CURRENCY_SIGNS: frozenset[str] = frozenset({GENERIC_CURRENCY_SIGN, "$", "€", "£", "¥"})

# ISO 4217 code implied by a literal currency sign when no currency is supplied.
LITERAL_CURRENCY_CODES: MappingProxyType[str, str] = MappingProxyType(
    {
        "$": "USD",
        "€": "EUR",
        "£": "GBP",
        "¥": "JPY",
    }
)

DIGIT_PLACEHOLDERS: frozenset[str] = frozenset({"#", "0"})

SEPARATORS: frozenset[str] = frozenset({",", ".", ";", "-", "/", ":", " "})

# Date field letters. Only the anchors participate in type detection;
# "E" (weekday) is tokenized as a date field but never classifies a pattern
# on its own, so literals such as "EUR" do not turn a pattern into a date.
DATE_SYMBOLS: frozenset[str] = frozenset({"y", "M", "d", "E"})
DATE_ANCHOR_SYMBOLS: frozenset[str] = frozenset({"y", "M", "d"})

TIME_SYMBOLS: frozenset[str] = frozenset({"H", "h", "m", "s"})

PERCENT_SIGN: str = "%"

# Quote character of compiled Babel patterns: 'text' is literal, '' is a quote.
QUOTE: str = "'"

# Babel understands up to three currency signs (symbol, ISO code, name).
MAX_CURRENCY_RUN: int = 3

# Most significant digits a number formatter keeps when rounding. Values
# needing more are reported as formatting failures.
MAX_DECIMAL_DIGITS: int = 1000

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Default maximum compiled specifications kept by a PatternCache.
# Reports typically reuse a few dozen distinct patterns; 1000 leaves headroom
# for multi-locale rendering.
DEFAULT_CACHE_SIZE: int = 1000

# Maximum cached Babel Locale objects.
MAX_LOCALE_CACHE_SIZE: int = 128

# Patterns longer than this are compiled on every call instead of cached, so a
# stream of generated one-off patterns cannot crowd out the working set.
MAX_CACHED_PATTERN_LENGTH: int = 1000

# ============================================================================
# DEFAULTS
# ============================================================================

DEFAULT_LOCALE: str = "en_US"

DEFAULT_CURRENCY: str = "USD"

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Characters shown on each side of an error position in context snippets.
CONTEXT_RADIUS: int = 10

# Context shown for the empty pattern, which has no substring to display.
EMPTY_CONTEXT: str = "<empty>"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Template for values a formatter cannot accept (e.g. text passed to number).
# Use .format(type=...): "{!number}".
FALLBACK_INVALID_VALUE: str = "{{!{type}}}"
