"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Suggestions come from a per-code lookup table, extended with one suggestion
derived from the offending text so output stays deterministic.

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

from formatpattern.constants import CONTEXT_RADIUS, EMPTY_CONTEXT
from formatpattern.enums import FormatType

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate", "context_snippet"]


_GENERIC_SUGGESTION = "Use pattern_info() to see the supported pattern syntax"

_SUGGESTIONS: MappingProxyType[DiagnosticCode, tuple[str, ...]] = MappingProxyType(
    {
        DiagnosticCode.EMPTY_PATTERN: (
            "Provide a non-empty pattern such as '#,##0.00' or 'yyyy-MM-dd'",
        ),
        DiagnosticCode.UNBALANCED_BRACES: (
            "Check for unmatched braces: every '{' needs a matching '}'",
            "Ensure all opening symbols have corresponding closing symbols",
        ),
        DiagnosticCode.INVALID_SYNTAX: (
            "Check the pattern syntax documentation",
        ),
        DiagnosticCode.TYPE_MISMATCH: (
            "Remove the type option to let the pattern type be detected",
        ),
        DiagnosticCode.STRICT_VIOLATION: (
            "Disable strict mode or rewrite the pattern using one format family",
        ),
        DiagnosticCode.UNKNOWN_TRANSFORM: (
            "Supported transforms: upper, lower, capitalize, trim, truncate:N",
        ),
        DiagnosticCode.INVALID_VALUE: (
            "Choose a pattern matching the value's type",
        ),
        DiagnosticCode.FORMATTING_FAILED: (
            "Check the locale and currency options",
        ),
    }
)


def context_snippet(pattern: str, position: int, radius: int = CONTEXT_RADIUS) -> str:
    """Extract the pattern substring centered on position.

    Args:
        pattern: Full pattern text
        position: 0-based code-point offset of the error
        radius: Characters to include on each side

    Returns:
        Substring clipped to the pattern bounds, or EMPTY_CONTEXT for an
        empty pattern

    Example:
        >>> context_snippet("#,##0.00.00", 8, radius=3)
        '.00.00'
    """
    if not pattern:
        return EMPTY_CONTEXT
    position = min(max(position, 0), len(pattern) - 1)
    start = max(position - radius, 0)
    end = min(position + radius + 1, len(pattern))
    return pattern[start:end]


def _suggestions(code: DiagnosticCode, dynamic: str | None = None) -> tuple[str, ...]:
    canned = _SUGGESTIONS.get(code, ())
    if dynamic is not None:
        canned = (*canned, dynamic)
    return canned or (_GENERIC_SUGGESTION,)


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def empty_pattern() -> Diagnostic:
        """Pattern has no characters.

        Returns:
            Diagnostic for EMPTY_PATTERN
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_PATTERN,
            message="Parse failed: empty pattern",
            position=0,
            context=EMPTY_CONTEXT,
            suggestions=_suggestions(DiagnosticCode.EMPTY_PATTERN),
        )

    @staticmethod
    def unclosed_brace(pattern: str, position: int) -> Diagnostic:
        """Opening brace without a matching closing brace.

        Args:
            pattern: Full pattern text
            position: Offset of the first unmatched '{'

        Returns:
            Diagnostic for UNBALANCED_BRACES
        """
        msg = f"Unbalanced braces: '{{' at position {position} is never closed"
        return Diagnostic(
            code=DiagnosticCode.UNBALANCED_BRACES,
            message=msg,
            position=position,
            context=context_snippet(pattern, position),
            suggestions=_suggestions(
                DiagnosticCode.UNBALANCED_BRACES,
                "Append '}' to close the brace opened here",
            ),
        )

    @staticmethod
    def unopened_brace(pattern: str, position: int) -> Diagnostic:
        """Closing brace without a preceding opening brace.

        Args:
            pattern: Full pattern text
            position: Offset of the unmatched '}'

        Returns:
            Diagnostic for UNBALANCED_BRACES
        """
        msg = f"Unbalanced braces: '}}' at position {position} has no matching '{{'"
        return Diagnostic(
            code=DiagnosticCode.UNBALANCED_BRACES,
            message=msg,
            position=position,
            context=context_snippet(pattern, position),
            suggestions=_suggestions(
                DiagnosticCode.UNBALANCED_BRACES,
                "Remove the stray '}' or insert '{' before it",
            ),
        )

    @staticmethod
    def nested_braces(pattern: str, position: int) -> Diagnostic:
        """Brace opened inside another placeholder.

        Args:
            pattern: Full pattern text
            position: Offset of the nested '{'

        Returns:
            Diagnostic for INVALID_SYNTAX
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_SYNTAX,
            message="Invalid pattern syntax: nested braces not allowed",
            position=position,
            context=context_snippet(pattern, position),
            suggestions=_suggestions(
                DiagnosticCode.INVALID_SYNTAX,
                "Use a single level of braces, e.g. '{value}' instead of '{{value}}'",
            ),
        )

    @staticmethod
    def repeated_symbol(pattern: str, position: int, run: str) -> Diagnostic:
        """Structural symbol repeated beyond any meaningful count.

        Args:
            pattern: Full pattern text
            position: Offset of the run
            run: The repeated characters

        Returns:
            Diagnostic for INVALID_SYNTAX
        """
        msg = f"Invalid pattern syntax: repeated '{run[0]}' ({len(run)} times)"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SYNTAX,
            message=msg,
            position=position,
            context=context_snippet(pattern, position),
            suggestions=_suggestions(
                DiagnosticCode.INVALID_SYNTAX,
                f"Use '{run[0]}' once at this position",
            ),
        )

    @staticmethod
    def extra_decimal_separator(pattern: str, position: int) -> Diagnostic:
        """Second decimal separator inside one number section.

        Args:
            pattern: Full pattern text
            position: Offset of the extra '.'

        Returns:
            Diagnostic for INVALID_SYNTAX
        """
        msg = f"Invalid pattern syntax: extra decimal separator at position {position}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SYNTAX,
            message=msg,
            position=position,
            context=context_snippet(pattern, position),
            suggestions=_suggestions(
                DiagnosticCode.INVALID_SYNTAX,
                "Keep a single '.' per section, e.g. '#,##0.00'",
            ),
        )

    @staticmethod
    def missing_digits(pattern: str, type_name: str) -> Diagnostic:
        """Number-family pattern without any digit placeholder.

        Args:
            pattern: Full pattern text
            type_name: Detected format type

        Returns:
            Diagnostic for INVALID_SYNTAX
        """
        msg = f"Invalid pattern syntax: {type_name} pattern has no digit placeholder"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SYNTAX,
            message=msg,
            position=0,
            context=context_snippet(pattern, 0),
            suggestions=_suggestions(
                DiagnosticCode.INVALID_SYNTAX,
                "Add '#' or '0' placeholders, e.g. '#,##0.00'",
            ),
        )

    @staticmethod
    def type_mismatch(pattern: str, expected: str, detected: str) -> Diagnostic:
        """Caller-asserted type differs from the detected type.

        Args:
            pattern: Full pattern text
            expected: Type requested by the caller
            detected: Type detected from the pattern

        Returns:
            Diagnostic for TYPE_MISMATCH
        """
        msg = f"Pattern type mismatch: expected {expected}, detected {detected}"
        return Diagnostic(
            code=DiagnosticCode.TYPE_MISMATCH,
            message=msg,
            position=0,
            context=context_snippet(pattern, 0),
            suggestions=_suggestions(
                DiagnosticCode.TYPE_MISMATCH,
                f"Use a {expected} pattern or pass type='{detected}'",
            ),
        )

    @staticmethod
    def unknown_type(pattern: str, requested: object) -> Diagnostic:
        """Caller-asserted type names no format family.

        Args:
            pattern: Full pattern text
            requested: Type option as passed by the caller

        Returns:
            Diagnostic for TYPE_MISMATCH
        """
        return Diagnostic(
            code=DiagnosticCode.TYPE_MISMATCH,
            message=f"Pattern type mismatch: unknown type '{requested}'",
            position=0,
            context=context_snippet(pattern, 0),
            suggestions=_suggestions(
                DiagnosticCode.TYPE_MISMATCH,
                f"Use one of: {', '.join(FormatType)}",
            ),
        )

    @staticmethod
    def strict_violation(pattern: str, position: int, reason: str, fix: str) -> Diagnostic:
        """Pattern accepted normally but rejected by strict mode.

        Args:
            pattern: Full pattern text
            position: Offset of the offending token
            reason: What strict mode rejects
            fix: Concrete rewrite hint

        Returns:
            Diagnostic for STRICT_VIOLATION
        """
        return Diagnostic(
            code=DiagnosticCode.STRICT_VIOLATION,
            message=f"Strict mode: {reason}",
            position=position,
            context=context_snippet(pattern, position),
            suggestions=_suggestions(DiagnosticCode.STRICT_VIOLATION, fix),
        )

    @staticmethod
    def unknown_transform(
        pattern: str, position: int, transform: str, *, strict: bool
    ) -> Diagnostic:
        """Text placeholder names a transform that does not exist.

        Args:
            pattern: Full pattern text
            position: Offset of the placeholder
            transform: Transform name as written
            strict: Error in strict mode, warning otherwise

        Returns:
            Diagnostic for UNKNOWN_TRANSFORM
        """
        msg = f"Unknown text transform '{transform}'"
        if strict:
            msg = f"Strict mode: {msg}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_TRANSFORM,
            message=msg,
            position=position,
            context=context_snippet(pattern, position),
            suggestions=_suggestions(DiagnosticCode.UNKNOWN_TRANSFORM),
            severity="error" if strict else "warning",
        )

    @staticmethod
    def invalid_value(value: object, type_name: str, accepted: str) -> Diagnostic:
        """Runtime value incompatible with the compiled format type.

        Args:
            value: The value passed to the formatter
            type_name: Format type of the compiled pattern
            accepted: Human-readable list of accepted value types

        Returns:
            Diagnostic for INVALID_VALUE
        """
        received = type(value).__name__
        msg = f"Invalid value for {type_name} format: expected {accepted}, got {received}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_VALUE,
            message=msg,
            context=repr(value)[: CONTEXT_RADIUS * 2] or EMPTY_CONTEXT,
            suggestions=_suggestions(
                DiagnosticCode.INVALID_VALUE,
                f"Convert the {received} value to {accepted} before formatting",
            ),
        )

    @staticmethod
    def formatting_failed(value: object, type_name: str, reason: str) -> Diagnostic:
        """Babel rejected an otherwise well-typed value.

        Args:
            value: The value passed to the formatter
            type_name: Format type of the compiled pattern
            reason: Underlying error text

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"{type_name.capitalize()} formatting failed for '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            context=repr(value)[: CONTEXT_RADIUS * 2] or EMPTY_CONTEXT,
            suggestions=_suggestions(DiagnosticCode.FORMATTING_FAILED),
        )

    @staticmethod
    def extra_section_separator(pattern: str, position: int) -> Diagnostic:
        """Third ';' section in a number pattern.

        Args:
            pattern: Full pattern text
            position: Offset of the second ';'

        Returns:
            Diagnostic for INVALID_SYNTAX
        """
        msg = f"Invalid pattern syntax: extra section separator at position {position}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SYNTAX,
            message=msg,
            position=position,
            context=context_snippet(pattern, position),
            suggestions=_suggestions(
                DiagnosticCode.INVALID_SYNTAX,
                "Use at most one ';', e.g. '#,##0.00;(#,##0.00)'",
            ),
        )

    @staticmethod
    def unsupported_pattern(pattern: str, type_name: str, reason: str) -> Diagnostic:
        """Babel rejected the compiled form of a validated pattern.

        Args:
            pattern: Full pattern text
            type_name: Detected format type
            reason: Underlying error text

        Returns:
            Diagnostic for INVALID_SYNTAX
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_SYNTAX,
            message=f"Invalid pattern syntax: {type_name} pattern not supported ({reason})",
            position=0,
            context=context_snippet(pattern, 0),
            suggestions=_suggestions(DiagnosticCode.INVALID_SYNTAX),
        )
