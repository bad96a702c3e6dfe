"""Translation of token sequences into Babel patterns.

Babel understands CLDR number and date patterns, which are close to but not
the same as ours: our literal letters, decimal points in affixes and literal
currency signs need quoting before Babel sees them. The functions here build
Babel pattern text from tokens; they never touch runtime values.

Python 3.13+. Zero external dependencies.
"""

from formatpattern.constants import (
    GENERIC_CURRENCY_SIGN,
    LITERAL_CURRENCY_CODES,
    PERCENT_SIGN,
    QUOTE,
)
from formatpattern.enums import TokenKind
from formatpattern.syntax import Placeholder, Token, parse_placeholder, split_sections

__all__ = [
    "implied_currency",
    "number_pattern_text",
    "percent_scale",
    "temporal_pattern_text",
    "text_segments",
]

_FIELD_KINDS = frozenset({TokenKind.DATE_COMPONENT, TokenKind.TIME_COMPONENT})
_NUMBER_SEPARATORS = frozenset({",", "."})


def number_pattern_text(tokens: tuple[Token, ...], *, generic_currency: bool) -> str:
    """Build a Babel number pattern from number-family tokens.

    Args:
        tokens: Tokens of a validated number, currency or percentage pattern
        generic_currency: Render literal signs ('$', '€', ...) as '¤' so Babel
            substitutes the requested currency; otherwise keep them verbatim

    Example:
        >>> number_pattern_text(tokenize("EUR #,##0.00"), generic_currency=False)
        "'EUR '#,##0.00"
    """
    sections = [
        _number_section_text(section, generic_currency=generic_currency)
        for section in split_sections(tokens)
    ]
    # "#,##0;" has an empty negative section; Babel would then drop the minus sign
    if len(sections) > 1 and not sections[-1]:
        sections.pop()
    return ";".join(sections)


def _number_section_text(section: tuple[Token, ...], *, generic_currency: bool) -> str:
    digit_indexes = [
        index for index, token in enumerate(section) if token.kind is TokenKind.NUMBER_COMPONENT
    ]
    first = digit_indexes[0] if digit_indexes else len(section)
    last = digit_indexes[-1] if digit_indexes else -1

    parts: list[str] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            parts.append(_quote_number_literal("".join(literal)))
            literal.clear()

    for index, token in enumerate(section):
        in_body = first <= index <= last
        if in_body and (
            token.kind is TokenKind.NUMBER_COMPONENT or token.text in _NUMBER_SEPARATORS
        ):
            flush()
            parts.append(token.text)
        elif token.kind is TokenKind.CURRENCY_SYMBOL and (
            generic_currency or token.text == GENERIC_CURRENCY_SIGN
        ):
            flush()
            parts.append(GENERIC_CURRENCY_SIGN)
        elif token.text == PERCENT_SIGN:
            flush()
            parts.append(PERCENT_SIGN)
        else:
            literal.append(token.text)
    flush()
    return "".join(parts)


def _quote_number_literal(text: str) -> str:
    """Quote affix text for Babel, writing each apostrophe as ''."""
    return "''".join(f"{QUOTE}{piece}{QUOTE}" if piece else "" for piece in text.split(QUOTE))


def percent_scale(tokens: tuple[Token, ...]) -> int:
    """Power of ten Babel applies to values of this pattern (2 for percent)."""
    return 2 if any(token.text == PERCENT_SIGN for token in tokens) else 0


def implied_currency(tokens: tuple[Token, ...], default: str) -> str:
    """ISO code implied by the first literal currency sign, else default."""
    for token in tokens:
        if token.kind is TokenKind.CURRENCY_SYMBOL and token.text in LITERAL_CURRENCY_CODES:
            return LITERAL_CURRENCY_CODES[token.text]
    return default


def temporal_pattern_text(tokens: tuple[Token, ...]) -> str:
    """Build a CLDR date/time pattern, quoting runs of literal text with letters.

    Example:
        >>> temporal_pattern_text(tokenize("dd.MM.yyyy at HH:mm"))
        "dd.MM.yyyy' at 'HH:mm"
    """
    parts: list[str] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            parts.append(_quote_temporal_literal("".join(literal)))
            literal.clear()

    for token in tokens:
        if token.kind in _FIELD_KINDS:
            flush()
            parts.append(token.text)
        else:
            literal.append(token.text)
    flush()
    return "".join(parts)


def _quote_temporal_literal(text: str) -> str:
    if any((char.isascii() and char.isalpha()) or char == QUOTE for char in text):
        return QUOTE + text.replace(QUOTE, QUOTE * 2) + QUOTE
    return text


def text_segments(tokens: tuple[Token, ...]) -> tuple[str | Placeholder, ...]:
    """Split text-pattern tokens into literal strings and placeholders.

    Braces are dropped, and so is a '%' that directly precedes '{'. An empty
    '{}' becomes a placeholder with an empty name, which renders the value.

    Example:
        >>> text_segments(tokenize("Total: %{value|upper}"))
        ('Total: ', Placeholder(name='value', transforms=(Transform(name='upper', argument=None),)))
    """
    segments: list[str | Placeholder] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            segments.append("".join(literal))
            literal.clear()

    for current, following in zip(tokens, (*tokens[1:], None), strict=True):
        match current.kind:
            case TokenKind.BRACE_OPEN:
                if following is not None and following.kind is TokenKind.BRACE_CLOSE:
                    flush()
                    segments.append(Placeholder(""))
            case TokenKind.BRACE_CLOSE:
                pass
            case TokenKind.TEXT_PLACEHOLDER:
                flush()
                segments.append(parse_placeholder(current.text))
            case _ if (
                current.text == PERCENT_SIGN
                and following is not None
                and following.kind is TokenKind.BRACE_OPEN
            ):
                pass
            case _:
                literal.append(current.text)
    flush()
    return tuple(segments)
