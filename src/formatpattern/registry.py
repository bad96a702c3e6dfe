"""Static pattern documentation for help and tooling surfaces.

Never consulted on the formatting hot path. Each entry documents one format
family with a description, worked examples, a symbol glossary and the
pattern used when a value is rendered without an explicit pattern.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .enums import FormatType

__all__ = ["PatternInfo", "default_pattern", "pattern_info"]


@dataclass(frozen=True, slots=True)
class PatternInfo:
    """Documentation for one format family.

    Attributes:
        description: One-line summary
        examples: Valid patterns of this family
        symbols: Symbol to meaning
        default_pattern: Pattern used when none is given for a value
    """

    description: str
    examples: tuple[str, ...]
    symbols: Mapping[str, str]
    default_pattern: str


_NUMBER_SYMBOLS = {
    "#": "Digit placeholder (optional)",
    "0": "Digit placeholder (required)",
    ",": "Grouping separator",
    ".": "Decimal separator",
    ";": "Positive/negative sub-pattern separator",
}

_INFO: MappingProxyType[FormatType, PatternInfo] = MappingProxyType(
    {
        FormatType.NUMBER: PatternInfo(
            description="Number formatting patterns using # and 0 placeholders",
            examples=("#,##0", "#,##0.00", "0.##", "#,##0;(#,##0)"),
            symbols=MappingProxyType(_NUMBER_SYMBOLS),
            default_pattern="#,##0.###",
        ),
        FormatType.CURRENCY: PatternInfo(
            description="Currency formatting with symbol placement",
            examples=("¤#,##0.00", "#,##0.00 ¤", "$#,##0.00", "¤¤ #,##0.00"),
            symbols=MappingProxyType(
                {
                    "¤": "Currency symbol of the requested currency",
                    "¤¤": "ISO 4217 code of the requested currency",
                    "$": "Dollar sign (USD unless a currency is given)",
                    "€": "Euro sign (EUR unless a currency is given)",
                    "£": "Pound sign (GBP unless a currency is given)",
                    "¥": "Yen sign (JPY unless a currency is given)",
                    **_NUMBER_SYMBOLS,
                }
            ),
            default_pattern="¤#,##0.00",
        ),
        FormatType.PERCENTAGE: PatternInfo(
            description="Percentage formatting; the value is multiplied by 100",
            examples=("#0.##%", "0%", "%#0.##", "#,##0.0 %"),
            symbols=MappingProxyType(
                {
                    "%": "Percent sign; scales the value by 100",
                    "#": "Digit placeholder (optional)",
                    "0": "Digit placeholder (required)",
                }
            ),
            default_pattern="#0.##%",
        ),
        FormatType.DATE: PatternInfo(
            description="Date formatting using standard date components",
            examples=("yyyy-MM-dd", "dd/MM/yyyy", "MMM dd, yyyy", "E, MMM dd"),
            symbols=MappingProxyType(
                {
                    "yyyy": "4-digit year",
                    "yy": "2-digit year",
                    "MM": "2-digit month",
                    "MMM": "Month abbreviation",
                    "MMMM": "Full month name",
                    "dd": "2-digit day",
                    "E": "Weekday abbreviation",
                    "EEEE": "Full weekday name",
                }
            ),
            default_pattern="yyyy-MM-dd",
        ),
        FormatType.TIME: PatternInfo(
            description="Time-of-day formatting",
            examples=("HH:mm", "HH:mm:ss", "h:mm"),
            symbols=MappingProxyType(
                {
                    "HH": "2-digit hour (0-23)",
                    "hh": "2-digit hour (1-12)",
                    "mm": "2-digit minute",
                    "ss": "2-digit second",
                }
            ),
            default_pattern="HH:mm:ss",
        ),
        FormatType.DATETIME: PatternInfo(
            description="Date and time fields combined",
            examples=("yyyy-MM-dd HH:mm", "dd/MM/yyyy HH:mm:ss", "MMM d, yyyy h:mm"),
            symbols=MappingProxyType(
                {
                    "yyyy": "4-digit year",
                    "MM": "2-digit month",
                    "dd": "2-digit day",
                    "HH": "2-digit hour (0-23)",
                    "mm": "2-digit minute",
                    "ss": "2-digit second",
                }
            ),
            default_pattern="yyyy-MM-dd HH:mm:ss",
        ),
        FormatType.TEXT: PatternInfo(
            description="Text formatting with transformations and substitutions",
            examples=(
                "%{value}",
                "%{value|upper}",
                "%{value|truncate:20}",
                "Total: {amount}",
            ),
            symbols=MappingProxyType(
                {
                    "%{value}": "Value substitution",
                    "{name}": "Field lookup, falling back to the value",
                    "|upper": "Uppercase transformation",
                    "|lower": "Lowercase transformation",
                    "|capitalize": "Capitalize the first character",
                    "|trim": "Strip surrounding whitespace",
                    "|truncate:n": "Truncate to n characters",
                }
            ),
            default_pattern="{value}",
        ),
    }
)


def pattern_info() -> Mapping[FormatType, PatternInfo]:
    """Documentation for every supported format family.

    Example:
        >>> info = pattern_info()
        >>> info[FormatType.NUMBER].symbols["#"]
        'Digit placeholder (optional)'
    """
    return _INFO


def default_pattern(format_type: FormatType) -> str | None:
    """Pattern used for a type when the caller supplies none (None for custom)."""
    entry = _INFO.get(format_type)
    return entry.default_pattern if entry is not None else None
