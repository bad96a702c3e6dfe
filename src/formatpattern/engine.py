"""Pattern parsing entry points.

parse() runs the full pipeline: cache lookup, type detection, tokenization,
validation and compilation. validate() stops after validation. Neither
raises for malformed patterns; problems are returned as error tuples.

Python 3.13+.
"""

import logging
from collections.abc import Mapping
from typing import Any

from .diagnostics import Diagnostic, ErrorTemplate, PatternParseError, ValidationResult
from .runtime import CompileResult, FormatOptions, PatternCache
from .runtime.compiler import compile_pattern
from .syntax import detect_type, tokenize, validate_pattern

__all__ = ["clear_cache", "get_default_cache", "parse", "validate"]

logger = logging.getLogger(__name__)

_default_cache = PatternCache()


def get_default_cache() -> PatternCache:
    """Process-wide cache used when parse() is called with cache=True."""
    return _default_cache


def clear_cache() -> None:
    """Clear the process-wide pattern cache."""
    _default_cache.clear()


def _select_cache(options: FormatOptions) -> PatternCache | None:
    if options.validate_only:
        return None
    match options.cache:
        case PatternCache() as cache:
            return cache
        case True:
            return _default_cache
        case _:
            return None


def _resolve_options(
    pattern: str, options: Mapping[str, Any] | FormatOptions | None, overrides: dict[str, Any]
) -> FormatOptions | Diagnostic:
    """Fold options into FormatOptions, or a diagnostic for an unknown type name."""
    try:
        return FormatOptions.from_mapping(options, **overrides)
    except ValueError:
        if "type" in overrides or not isinstance(options, Mapping):
            requested = overrides.get("type")
        else:
            requested = options.get("type")
        logger.debug("Unknown type option %r for pattern %r", requested, pattern)
        return ErrorTemplate.unknown_type(pattern, requested)


def parse(
    pattern: str,
    options: Mapping[str, Any] | FormatOptions | None = None,
    /,
    **kwargs: Any,
) -> CompileResult:
    """Parse and compile a format pattern.

    Args:
        pattern: Format pattern text
        options: Options mapping or FormatOptions; unknown keys are ignored
        **kwargs: Options as keywords, overriding the mapping
            (type, locale, currency, cache, validate_only, strict)

    Returns:
        Tuple of (spec, errors). On failure spec is None and errors holds one
        PatternParseError. With validate_only=True a valid pattern returns
        (None, ()). An unknown type option fails with TYPE_MISMATCH.

    Example:
        >>> spec, errors = parse("#,##0.00")
        >>> spec.format(1234.56)
        ('1,234.56', ())

        >>> spec, errors = parse("{missing_close")
        >>> spec is None, errors[0].code
        (True, <DiagnosticCode.UNBALANCED_BRACES: 1002>)
    """
    format_options = _resolve_options(pattern, options, kwargs)
    if isinstance(format_options, Diagnostic):
        return None, (PatternParseError(format_options),)
    cache = _select_cache(format_options)

    if cache is not None:
        cached = cache.get(pattern, format_options)
        if cached is not None:
            logger.debug("Cache hit for pattern %r", pattern)
            return cached, ()

    detected = detect_type(pattern)
    tokens = tokenize(pattern)
    result = validate_pattern(
        pattern,
        detected,
        tokens=tokens,
        expected=format_options.type,
        strict=format_options.strict,
    )
    if not result.is_valid:
        logger.debug("Rejected pattern %r: %s", pattern, result.errors[0].message)
        return None, tuple(PatternParseError(error) for error in result.errors)

    if format_options.validate_only:
        return None, ()

    spec, errors = compile_pattern(
        pattern, detected, tokens, format_options, warnings=result.warnings
    )
    if spec is not None and cache is not None:
        cache.put(pattern, format_options, spec)
    return spec, errors


def validate(
    pattern: str,
    options: Mapping[str, Any] | FormatOptions | None = None,
    /,
    **kwargs: Any,
) -> ValidationResult:
    """Validate a pattern without compiling it.

    Args:
        pattern: Format pattern text
        options: Options mapping or FormatOptions; only type and strict apply
        **kwargs: Options as keywords, overriding the mapping

    Returns:
        ValidationResult with at most one error and any warnings

    Example:
        >>> validate("").errors[0].message
        'Parse failed: empty pattern'
    """
    format_options = _resolve_options(pattern, options, kwargs)
    if isinstance(format_options, Diagnostic):
        return ValidationResult.invalid(format_options)
    return validate_pattern(
        pattern,
        detect_type(pattern),
        expected=format_options.type,
        strict=format_options.strict,
    )

