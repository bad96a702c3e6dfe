"""Pattern type detection.

Classifies a pattern by scanning character classes, without tokenizing.
Placeholder contents are skipped, so a field name such as ``{date}`` never
turns a text pattern into a date pattern. Likewise, letters of a word that
is not made only of field symbols are literal: "Amount: #,##0.00" is a
number pattern and "Dear {name}" a text pattern.

Python 3.13+. Zero external dependencies.
"""

from formatpattern.constants import (
    CURRENCY_SIGNS,
    DATE_ANCHOR_SYMBOLS,
    DIGIT_PLACEHOLDERS,
    PERCENT_SIGN,
    TIME_SYMBOLS,
)
from formatpattern.enums import FormatType

from .words import is_field_word, is_word_char, word_end

__all__ = ["detect_type"]

# A pattern made only of these is a number pattern even without digits
# (",." is rejected later for missing digit placeholders).
_NUMBER_CHARS = DIGIT_PLACEHOLDERS | {",", "."}


def detect_type(pattern: str) -> FormatType:
    """Classify a pattern into its format family.

    Precedence, first match wins: currency, percentage, datetime, date,
    time, text, number, custom. Never fails.

    Args:
        pattern: Format pattern text

    Returns:
        Detected FormatType (CUSTOM when nothing matches)

    Example:
        >>> detect_type("¤#,##0.00")
        <FormatType.CURRENCY: 'currency'>
        >>> detect_type("%{value}")
        <FormatType.TEXT: 'text'>
    """
    if any(char in CURRENCY_SIGNS for char in pattern):
        return FormatType.CURRENCY

    has_percent = has_date = has_time = has_digits = has_placeholder = False
    depth = 0
    literal_end = 0

    for index, char in enumerate(pattern):
        if char == "{":
            depth += 1
            continue
        if char == "}":
            if depth > 0:
                depth -= 1
                has_placeholder = True
            continue
        if depth > 0:
            continue

        if index >= literal_end and is_word_char(char):
            end = word_end(pattern, index)
            if not is_field_word(pattern[index:end]):
                literal_end = end
        if index < literal_end:
            continue

        if char == PERCENT_SIGN:
            # "%{name}" is the text placeholder prefix, not a percent sign
            if pattern[index + 1 : index + 2] != "{":
                has_percent = True
        elif char in DATE_ANCHOR_SYMBOLS:
            has_date = True
        elif char in TIME_SYMBOLS:
            has_time = True
        elif char in DIGIT_PLACEHOLDERS:
            has_digits = True

    match (has_percent, has_date, has_time):
        case (True, _, _):
            return FormatType.PERCENTAGE
        case (False, True, True):
            return FormatType.DATETIME
        case (False, True, False):
            return FormatType.DATE
        case (False, False, True):
            return FormatType.TIME

    if has_placeholder:
        return FormatType.TEXT
    if has_digits or (pattern and all(char in _NUMBER_CHARS for char in pattern)):
        return FormatType.NUMBER
    return FormatType.CUSTOM
