"""Enumerations for formatpattern type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class FormatType(StrEnum):
    """Semantic family of a format pattern.

    StrEnum provides automatic string conversion: str(FormatType.NUMBER) == "number"
    """

    NUMBER = "number"
    """Digit placeholders with grouping and decimals: #,##0.00"""

    CURRENCY = "currency"
    """Number pattern with a currency marker: ¤#,##0.00"""

    PERCENTAGE = "percentage"
    """Number pattern scaled by 100: #0.##%"""

    DATE = "date"
    """Calendar date fields: yyyy-MM-dd"""

    TIME = "time"
    """Time-of-day fields: HH:mm:ss"""

    DATETIME = "datetime"
    """Date and time fields together: yyyy-MM-dd HH:mm"""

    TEXT = "text"
    """Placeholder substitution: %{value}"""

    CUSTOM = "custom"
    """No recognized family; the value is rendered as-is."""


class TokenKind(StrEnum):
    """Kind of a pattern token.

    StrEnum provides automatic string conversion: str(TokenKind.LITERAL) == "literal"
    """

    LITERAL = "literal"
    SEPARATOR = "separator"
    NUMBER_COMPONENT = "number_component"
    CURRENCY_SYMBOL = "currency_symbol"
    DATE_COMPONENT = "date_component"
    TIME_COMPONENT = "time_component"
    TEXT_PLACEHOLDER = "text_placeholder"
    BRACE_OPEN = "brace_open"
    BRACE_CLOSE = "brace_close"


class ValueKind(StrEnum):
    """Closed set of runtime value shapes accepted by compiled formatters."""

    NUMBER = "number"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    BOOLEAN = "boolean"
    STRING = "string"


# Number-like families share the Babel number pipeline.
NUMBER_FAMILY: frozenset[FormatType] = frozenset(
    {FormatType.NUMBER, FormatType.CURRENCY, FormatType.PERCENTAGE}
)

# Calendar families share the Babel dates pipeline.
TEMPORAL_FAMILY: frozenset[FormatType] = frozenset(
    {FormatType.DATE, FormatType.TIME, FormatType.DATETIME}
)


__all__ = [
    "NUMBER_FAMILY",
    "TEMPORAL_FAMILY",
    "FormatType",
    "TokenKind",
    "ValueKind",
]
