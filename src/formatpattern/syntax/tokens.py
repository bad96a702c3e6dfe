"""Token type produced by the tokenizer.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from formatpattern.enums import TokenKind

__all__ = ["Token", "split_sections"]


@dataclass(frozen=True, slots=True)
class Token:
    """Classified, positioned substring of a pattern.

    Attributes:
        kind: Token classification
        text: Exact pattern characters covered by the token
        position: 0-based code-point offset of the first character
    """

    kind: TokenKind
    text: str
    position: int

    @property
    def end(self) -> int:
        """Offset one past the last character (exclusive)."""
        return self.position + len(self.text)


def split_sections(tokens: tuple[Token, ...]) -> Iterator[tuple[Token, ...]]:
    """Split number tokens at ';' into positive and negative sub-patterns.

    Example:
        >>> [len(s) for s in split_sections(tokenize("#,##0;(#,##0)"))]
        [3, 5]
    """
    section: list[Token] = []
    for token in tokens:
        if token.kind is TokenKind.SEPARATOR and token.text == ";":
            yield tuple(section)
            section = []
        else:
            section.append(token)
    yield tuple(section)
