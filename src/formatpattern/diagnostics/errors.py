"""Exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information. They are
returned in error tuples by parse(), validate() and compiled formatters
rather than raised, so one bad pattern or cell value never aborts a report.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["FormattingError", "PatternError", "PatternParseError"]


class PatternError(Exception):
    """Base exception for all formatpattern errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PatternError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def message(self) -> str:
        """Plain error message without diagnostic decoration."""
        if self.diagnostic is not None:
            return self.diagnostic.message
        return str(self)

    @property
    def code(self) -> DiagnosticCode | None:
        """Diagnostic code, if the error carries a diagnostic."""
        return self.diagnostic.code if self.diagnostic is not None else None


class PatternParseError(PatternError):
    """Malformed or inconsistent format pattern.

    Always carries a Diagnostic with position, context and suggestions.

    Example:
        >>> spec, errors = parse("{missing_close")
        >>> errors[0].message
        "Unbalanced braces: '{' at position 0 is never closed"
        >>> errors[0].position
        0
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize PatternParseError.

        Args:
            diagnostic: Validator diagnostic describing the failure
        """
        super().__init__(diagnostic)
        self._diagnostic = diagnostic

    @property
    def position(self) -> int:
        """0-based code-point offset of the problem."""
        return self._diagnostic.position

    @property
    def context(self) -> str:
        """Pattern snippet around the problem."""
        return self._diagnostic.context

    @property
    def suggestions(self) -> tuple[str, ...]:
        """Ordered fix suggestions (never empty)."""
        return self._diagnostic.suggestions


class FormattingError(PatternError):
    """Raised when a compiled formatter cannot render a value.

    The error carries a fallback_value that should be used in the output
    when the formatting fails. This ensures:
    - Error is collected and visible to callers
    - Output still contains usable content
    - Debugging information preserved in error message

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value
