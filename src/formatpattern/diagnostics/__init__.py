"""Diagnostic system for format pattern errors.

Provides structured error diagnostics with codes, positions, context
snippets and suggestions. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import FormattingError, PatternError, PatternParseError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate, context_snippet
from .validation import ValidationResult

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormattingError",
    "OutputFormat",
    "PatternError",
    "PatternParseError",
    "ValidationResult",
    "context_snippet",
]
