"""Word boundaries for telling field letters from literal text.

A word is a maximal run of letters and apostrophes. Its letters are date or
time fields only when every letter of the word is a field symbol: "yyyy" and
"HH" are fields, while "Amount", "Qty" and "Customer's" are literal text even
though they contain 'm', 'y' or 's'.

Python 3.13+. Zero external dependencies.
"""

from formatpattern.constants import DATE_SYMBOLS, QUOTE, TIME_SYMBOLS

__all__ = ["is_field_word", "is_word_char", "word_end"]

_FIELD_SYMBOLS = DATE_SYMBOLS | TIME_SYMBOLS


def is_word_char(char: str) -> bool:
    """True for letters (any script) and the apostrophe."""
    return char.isalpha() or char == QUOTE


def word_end(text: str, start: int) -> int:
    """Offset just past the word starting at start."""
    end = start
    while end < len(text) and is_word_char(text[end]):
        end += 1
    return end


def is_field_word(word: str) -> bool:
    """True if every letter of word is a date/time field symbol.

    Example:
        >>> is_field_word("yyyy"), is_field_word("'HH"), is_field_word("Amount")
        (True, True, False)
    """
    return all(char in _FIELD_SYMBOLS for char in word if char != QUOTE)
