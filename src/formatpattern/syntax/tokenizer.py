"""Pattern tokenizer.

Single left-to-right scan driven by character classes. Tokenization is total:
every finite input, including the empty string and malformed brace sequences,
yields a token sequence whose texts concatenate back to the input. Judging
well-formedness is the validator's job.

Python 3.13+. Zero external dependencies.
"""

from formatpattern.constants import (
    CURRENCY_SIGNS,
    DATE_SYMBOLS,
    DIGIT_PLACEHOLDERS,
    SEPARATORS,
    TIME_SYMBOLS,
)
from formatpattern.enums import TokenKind

from .cursor import Cursor
from .tokens import Token
from .words import is_field_word, is_word_char, word_end

__all__ = ["tokenize"]


def tokenize(pattern: str) -> tuple[Token, ...]:
    """Break a pattern into positioned tokens.

    Rules:
        - Runs of '#'/'0' become one NUMBER_COMPONENT
        - ',' '.' ';' '-' '/' ':' and space are single SEPARATOR tokens
        - '¤' '$' '€' '£' '¥' are single CURRENCY_SYMBOL tokens
        - Runs of one letter among y M d E become a DATE_COMPONENT,
          among H h m s TIME_COMPONENT, provided every letter of the
          surrounding word is a field symbol; letters of other words
          ("Amount", "Qty") are single LITERAL tokens
        - '{' / '}' are BRACE_OPEN / BRACE_CLOSE; text between braces is
          one TEXT_PLACEHOLDER per run
        - Any other character, '%' included, is a single LITERAL

    Args:
        pattern: Format pattern text

    Returns:
        Tokens in left-to-right order

    Example:
        >>> [t.text for t in tokenize("#,##0.00")]
        ['#', ',', '##0', '.', '00']
        >>> [t.position for t in tokenize("abc")]
        [0, 1, 2]
    """
    tokens: list[Token] = []
    cursor = Cursor(pattern, 0)
    depth = 0
    literal_end = 0  # end of the current non-field word

    while not cursor.is_eof:
        start = cursor.pos
        char = cursor.current

        if depth == 0 and start >= literal_end and is_word_char(char):
            end = word_end(pattern, start)
            if not is_field_word(pattern[start:end]):
                literal_end = end

        if depth > 0 and char not in "{}":
            cursor = cursor.skip_while(lambda c: c not in "{}")
            kind = TokenKind.TEXT_PLACEHOLDER
        elif char == "{":
            depth += 1
            cursor = cursor.advance()
            kind = TokenKind.BRACE_OPEN
        elif char == "}":
            depth = max(depth - 1, 0)
            cursor = cursor.advance()
            kind = TokenKind.BRACE_CLOSE
        elif char in DIGIT_PLACEHOLDERS:
            cursor = cursor.skip_while(lambda c: c in DIGIT_PLACEHOLDERS)
            kind = TokenKind.NUMBER_COMPONENT
        elif char in CURRENCY_SIGNS:
            cursor = cursor.advance()
            kind = TokenKind.CURRENCY_SYMBOL
        elif char in SEPARATORS:
            cursor = cursor.advance()
            kind = TokenKind.SEPARATOR
        elif start < literal_end:
            cursor = cursor.advance()
            kind = TokenKind.LITERAL
        elif char in DATE_SYMBOLS:
            cursor = cursor.skip_while(lambda c, field=char: c == field)
            kind = TokenKind.DATE_COMPONENT
        elif char in TIME_SYMBOLS:
            cursor = cursor.skip_while(lambda c, field=char: c == field)
            kind = TokenKind.TIME_COMPONENT
        else:
            cursor = cursor.advance()
            kind = TokenKind.LITERAL

        tokens.append(Token(kind, cursor.slice_from(start), start))

    return tuple(tokens)
