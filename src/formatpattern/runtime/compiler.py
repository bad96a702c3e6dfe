"""Compilation of validated patterns into reusable format specifications.

The compiler receives a pattern that has already been detected, tokenized
and validated. It picks the formatter builder for the type, lets the builder
resolve its Babel pattern, and wraps the resulting closure together with
the pattern, type and metadata in an immutable CompiledFormatSpec.

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from formatpattern.diagnostics import Diagnostic, ErrorTemplate, PatternParseError
from formatpattern.enums import NUMBER_FAMILY, TEMPORAL_FAMILY, FormatType
from formatpattern.syntax import Token

from .formatters import (
    FormatResult,
    Formatter,
    build_custom_formatter,
    build_number_formatter,
    build_temporal_formatter,
    build_text_formatter,
)
from .options import FormatOptions

__all__ = ["CompileResult", "CompiledFormatSpec", "SpecMetadata", "compile_pattern"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SpecMetadata:
    """Compile-time facts recorded on a CompiledFormatSpec.

    Attributes:
        options: Parse options the spec was compiled with
        tokens: Token sequence of the pattern
        warnings: Validation warnings (e.g. unknown text transforms)
    """

    options: FormatOptions
    tokens: tuple[Token, ...]
    warnings: tuple[Diagnostic, ...] = ()


@dataclass(frozen=True, slots=True)
class CompiledFormatSpec:
    """Immutable, reusable pairing of a pattern with its formatter.

    Safe to share across threads: the formatter closes over immutable data
    only. Equality compares pattern, type and metadata; the formatter closure
    is excluded.

    Example:
        >>> spec, errors = parse("#,##0.00")
        >>> spec.type
        <FormatType.NUMBER: 'number'>
        >>> spec.format(1234.56)
        ('1,234.56', ())
    """

    pattern: str
    type: FormatType
    formatter: Formatter = field(compare=False, repr=False)
    metadata: SpecMetadata

    def format(self, value: Any, options: Mapping[str, Any] | None = None) -> FormatResult:
        """Format a value. Shorthand for ``spec.formatter(value, options)``.

        Args:
            value: Runtime value to render
            options: Call options (locale, currency, fields); unknown keys ignored

        Returns:
            Tuple of (text, errors); text is a fallback when errors is non-empty
        """
        return self.formatter(value, options)


type CompileResult = tuple[CompiledFormatSpec | None, tuple[PatternParseError, ...]]


def _build_formatter(
    format_type: FormatType, tokens: tuple[Token, ...], options: FormatOptions
) -> Formatter:
    if format_type in NUMBER_FAMILY:
        return build_number_formatter(tokens, format_type, options)
    if format_type in TEMPORAL_FAMILY:
        return build_temporal_formatter(tokens, format_type, options)
    if format_type is FormatType.TEXT:
        return build_text_formatter(tokens)
    return build_custom_formatter()


def compile_pattern(
    pattern: str,
    format_type: FormatType,
    tokens: tuple[Token, ...],
    options: FormatOptions,
    warnings: tuple[Diagnostic, ...] = (),
) -> CompileResult:
    """Compile a validated pattern.

    Args:
        pattern: Pattern text, stored unchanged on the spec
        format_type: Detected type
        tokens: tokenize(pattern)
        options: Effective parse options
        warnings: Validation warnings to record in metadata

    Returns:
        Tuple of (spec, errors). Babel rejecting the assembled pattern yields
        (None, (PatternParseError,)).
    """
    try:
        formatter = _build_formatter(format_type, tokens, options)
    except ValueError as e:
        logger.debug("Babel rejected %s pattern %r: %s", format_type.value, pattern, e)
        diagnostic = ErrorTemplate.unsupported_pattern(pattern, format_type.value, str(e))
        return None, (PatternParseError(diagnostic),)

    spec = CompiledFormatSpec(
        pattern=pattern,
        type=format_type,
        formatter=formatter,
        metadata=SpecMetadata(
            options=options.for_metadata(), tokens=tokens, warnings=warnings
        ),
    )
    logger.debug("Compiled %s pattern %r", format_type.value, pattern)
    return spec, ()
