"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every pattern
and formatting error.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern syntax errors (tokenizer/validator findings)
        2000-2999: Pattern semantic errors (type and strict-mode checks)
        3000-3999: Formatting errors (runtime values rejected by a formatter)
    """

    # Pattern syntax errors (1000-1999)
    EMPTY_PATTERN = 1001
    UNBALANCED_BRACES = 1002
    INVALID_SYNTAX = 1003

    # Pattern semantic errors (2000-2999)
    TYPE_MISMATCH = 2001
    STRICT_VIOLATION = 2002
    UNKNOWN_TRANSFORM = 2003  # warning outside strict mode

    # Formatting errors (3000-3999)
    INVALID_VALUE = 3001
    FORMATTING_FAILED = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Every diagnostic produced by the validator carries all four user-facing
    fields: a message, the 0-based code-point position of the problem, a
    snippet of the pattern around that position, and at least one suggestion.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        position: 0-based code-point offset in the pattern
        context: Pattern substring around position (never empty)
        suggestions: Ordered fix suggestions (never empty)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    position: int = 0
    context: str = ""
    suggestions: tuple[str, ...] = ()
    severity: Literal["error", "warning"] = "error"

    def __post_init__(self) -> None:
        """Validate Diagnostic invariants.

        Raises:
            ValueError: If position is negative.
        """
        if self.position < 0:
            msg = f"Diagnostic.position must be >= 0, got {self.position}"
            raise ValueError(msg)

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNBALANCED_BRACES]: Unbalanced braces: '{' at position 0 is never closed
              --> position 0
               | {missing_close
               | ^
              = help: Add a matching '}' for every '{'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
