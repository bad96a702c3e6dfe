"""Runtime value classification.

Values reaching a compiled formatter belong to a closed set of kinds. Each
kind maps to the format type used when no pattern was chosen for the value.

Python 3.13+. Zero external dependencies.
"""

import math
from datetime import date, datetime, time
from decimal import Decimal
from types import MappingProxyType

from formatpattern.enums import FormatType, ValueKind

__all__ = [
    "FormatValue",
    "classify_value",
    "default_format_type",
    "is_finite_number",
]

# Values with a canonical formatting path. Anything else is rendered by the
# text and custom formatters through str().
type FormatValue = int | float | Decimal | bool | str | date | time | datetime

_DEFAULT_TYPES: MappingProxyType[ValueKind, FormatType] = MappingProxyType(
    {
        ValueKind.NUMBER: FormatType.NUMBER,
        ValueKind.DATE: FormatType.DATE,
        ValueKind.TIME: FormatType.TIME,
        ValueKind.DATETIME: FormatType.DATETIME,
        ValueKind.BOOLEAN: FormatType.TEXT,
        ValueKind.STRING: FormatType.TEXT,
    }
)


def classify_value(value: object) -> ValueKind | None:
    """Classify a runtime value into its ValueKind.

    bool is checked before int and datetime before date, since each is a
    subclass of the latter.

    Returns:
        ValueKind, or None for values outside the closed set

    Example:
        >>> classify_value(True)
        <ValueKind.BOOLEAN: 'boolean'>
        >>> classify_value(Decimal("1.5"))
        <ValueKind.NUMBER: 'number'>
    """
    match value:
        case bool():
            return ValueKind.BOOLEAN
        case int() | float() | Decimal():
            return ValueKind.NUMBER
        case datetime():
            return ValueKind.DATETIME
        case date():
            return ValueKind.DATE
        case time():
            return ValueKind.TIME
        case str():
            return ValueKind.STRING
        case _:
            return None


def default_format_type(kind: ValueKind) -> FormatType:
    """Format type used for a value kind when no pattern was chosen."""
    return _DEFAULT_TYPES[kind]


def is_finite_number(value: object) -> bool:
    """True for int, float and Decimal values that are not NaN or infinite."""
    match value:
        case bool():
            return False
        case int():
            return True
        case float():
            return math.isfinite(value)
        case Decimal():
            return value.is_finite()
        case _:
            return False
