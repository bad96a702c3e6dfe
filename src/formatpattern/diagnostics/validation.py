"""Validation result for format pattern checks.

Consolidates validator feedback:
- Errors: Structural problems that prevent compilation
- Warnings: Tolerated oddities (e.g. unknown text transforms outside strict mode)

Python 3.13+.
"""

from dataclasses import dataclass

from .codes import Diagnostic

__all__ = ["ValidationResult"]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable result of validating one pattern.

    The validator stops at the first error, so ``errors`` holds at most one
    diagnostic; warnings accumulate.

    Attributes:
        errors: Diagnostics that make the pattern invalid
        warnings: Informational diagnostics that do not affect validity

    Example:
        >>> result = validate("#,##0.00")
        >>> result.is_valid
        True

        >>> result = validate("{missing_close")
        >>> result.is_valid
        False
        >>> result.errors[0].code
        <DiagnosticCode.UNBALANCED_BRACES: 1002>
    """

    errors: tuple[Diagnostic, ...]
    warnings: tuple[Diagnostic, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True if no errors were found. Warnings do not affect validity."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Number of errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Number of warnings."""
        return len(self.warnings)

    @staticmethod
    def valid(warnings: tuple[Diagnostic, ...] = ()) -> "ValidationResult":
        """Create a passing result, optionally carrying warnings."""
        return ValidationResult(errors=(), warnings=warnings)

    @staticmethod
    def invalid(
        error: Diagnostic, warnings: tuple[Diagnostic, ...] = ()
    ) -> "ValidationResult":
        """Create a failing result for a single error."""
        return ValidationResult(errors=(error,), warnings=warnings)
