"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from formatpattern.constants import CONTEXT_RADIUS, EMPTY_CONTEXT

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import ValidationResult

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Formats Diagnostic objects into human-readable or machine-readable
    output for help surfaces, logs and editor tooling.

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> print(formatter.format(ErrorTemplate.nested_braces("a{{b}}", 2)))
        error[INVALID_SYNTAX]: Invalid pattern syntax: nested braces not allowed
          --> position 2
           | a{{b}}
           |   ^
          = help: Check the pattern syntax documentation
          = help: Use a single level of braces, e.g. '{value}' instead of '{{value}}'

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.empty_pattern()))
        EMPTY_PATTERN: Parse failed: empty pattern
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_validation_result(self, result: "ValidationResult") -> str:
        """Format a ValidationResult with a summary line and all findings.

        Args:
            result: ValidationResult to format

        Returns:
            Formatted string with summary and details
        """
        if result.is_valid:
            parts = ["Validation passed"]
        else:
            parts = [
                f"Validation failed: {result.error_count} error(s), "
                f"{result.warning_count} warning(s)"
            ]

        for diagnostic in (*result.errors, *result.warnings):
            parts.append(self.format(diagnostic))

        return "\n".join(parts)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style with a caret under the position."""
        severity = diagnostic.severity

        if self.color:
            if severity == "error":
                severity_str = f"\033[1;31m{severity}\033[0m"  # Bold red
            else:
                severity_str = f"\033[1;33m{severity}\033[0m"  # Bold yellow
        else:
            severity_str = severity

        parts = [f"{severity_str}[{diagnostic.code.name}]: {diagnostic.message}"]
        if diagnostic.code.value < 3000:
            parts.append(f"  --> position {diagnostic.position}")

        if diagnostic.context:
            parts.append(f"   | {diagnostic.context}")
            caret = self._caret_offset(diagnostic)
            if caret is not None:
                parts.append(f"   | {' ' * caret}^")

        parts.extend(f"  = help: {suggestion}" for suggestion in diagnostic.suggestions)

        return "\n".join(parts)

    @staticmethod
    def _caret_offset(diagnostic: Diagnostic) -> int | None:
        """Column of the error inside the context snippet, if it can be located.

        Formatting diagnostics (3000+) describe values, not pattern offsets.
        """
        if diagnostic.context == EMPTY_CONTEXT or diagnostic.code.value >= 3000:
            return None
        offset = min(diagnostic.position, CONTEXT_RADIUS)
        if offset >= len(diagnostic.context):
            return None
        return offset

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format."""
        return f"{diagnostic.code.name}: {diagnostic.message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON."""
        data: dict[str, str | int | list[str]] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
            "position": diagnostic.position,
            "context": diagnostic.context,
            "suggestions": list(diagnostic.suggestions),
        }
        return json.dumps(data, ensure_ascii=False)
