"""Immutable cursor for single-pass pattern scanning.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
"""

from collections.abc import Callable
from dataclasses import dataclass

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("##0", 0)
        >>> cursor.current
        '#'
        >>> cursor.skip_while(lambda c: c == "#").pos
        2
        >>> cursor.pos  # Original unchanged (immutability)
        0
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def skip_while(self, predicate: Callable[[str], bool]) -> "Cursor":
        """Return cursor past the longest run of characters matching predicate."""
        end = self.pos
        source = self.source
        while end < len(source) and predicate(source[end]):
            end += 1
        return Cursor(source, end)

    def slice_from(self, start: int) -> str:
        """Extract source text between start and the current position."""
        return self.source[start : self.pos]
