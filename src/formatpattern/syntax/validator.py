"""Structural validation of format patterns.

Checks run in a fixed order and stop at the first error:

1. Empty pattern
2. Brace balance
3. Nonsensical structure (nested braces; in number families repeated symbol
   runs, extra decimal separators and missing digits)
4. Caller-asserted type against the detected type
5. Strict-mode restrictions

Strict checks run only after every non-strict check has passed, so strict
mode can reject more patterns but never fewer. Unknown text transforms are
warnings outside strict mode and errors inside it.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from itertools import groupby

from formatpattern.constants import GENERIC_CURRENCY_SIGN, MAX_CURRENCY_RUN, PERCENT_SIGN
from formatpattern.diagnostics import Diagnostic, ErrorTemplate, ValidationResult
from formatpattern.enums import NUMBER_FAMILY, TEMPORAL_FAMILY, FormatType, TokenKind

from .placeholders import parse_placeholder
from .tokenizer import tokenize
from .tokens import Token, split_sections

__all__ = ["validate_pattern"]

_FIELD_KINDS = frozenset({TokenKind.DATE_COMPONENT, TokenKind.TIME_COMPONENT})


def validate_pattern(
    pattern: str,
    detected: FormatType,
    *,
    tokens: tuple[Token, ...] | None = None,
    expected: FormatType | None = None,
    strict: bool = False,
) -> ValidationResult:
    """Validate a pattern against its detected type.

    Args:
        pattern: Format pattern text
        detected: Type returned by detect_type(pattern)
        tokens: Pre-computed tokenize(pattern) result (computed when omitted)
        expected: Caller-asserted type, checked against detected
        strict: Apply strict-mode restrictions

    Returns:
        ValidationResult with at most one error and any transform warnings
    """
    if not pattern:
        return ValidationResult.invalid(ErrorTemplate.empty_pattern())
    if tokens is None:
        tokens = tokenize(pattern)

    error = (
        _check_braces(pattern, tokens)
        or _check_syntax(pattern, tokens, detected)
        or _check_type(pattern, detected, expected)
    )
    if error is not None:
        return ValidationResult.invalid(error)

    notes = _check_transforms(pattern, tokens, strict) if detected is FormatType.TEXT else ()

    if strict:
        error = _check_strict(pattern, tokens, detected)
        if error is None and notes:
            error = notes[0]
        if error is not None:
            return ValidationResult.invalid(error)
        return ValidationResult.valid()

    return ValidationResult.valid(warnings=notes)


def _check_braces(pattern: str, tokens: tuple[Token, ...]) -> Diagnostic | None:
    """Report the first brace that never finds a partner."""
    open_positions: list[int] = []
    for token in tokens:
        if token.kind is TokenKind.BRACE_OPEN:
            open_positions.append(token.position)
        elif token.kind is TokenKind.BRACE_CLOSE:
            if not open_positions:
                return ErrorTemplate.unopened_brace(pattern, token.position)
            open_positions.pop()
    if open_positions:
        return ErrorTemplate.unclosed_brace(pattern, open_positions[0])
    return None


def _check_syntax(
    pattern: str, tokens: tuple[Token, ...], detected: FormatType
) -> Diagnostic | None:
    depth = 0
    for token in tokens:
        match token.kind:
            case TokenKind.BRACE_OPEN:
                if depth > 0:
                    return ErrorTemplate.nested_braces(pattern, token.position)
                depth += 1
            case TokenKind.BRACE_CLOSE:
                depth -= 1

    if detected in NUMBER_FAMILY:
        return _check_number_syntax(pattern, tokens, detected)
    return None


def _check_number_syntax(
    pattern: str, tokens: tuple[Token, ...], detected: FormatType
) -> Diagnostic | None:
    for position, run in _symbol_runs(tokens, PERCENT_SIGN):
        if len(run) > 1:
            return ErrorTemplate.repeated_symbol(pattern, position, run)
    for position, run in _symbol_runs(tokens, GENERIC_CURRENCY_SIGN):
        if len(run) > MAX_CURRENCY_RUN:
            return ErrorTemplate.repeated_symbol(pattern, position, run)

    sections = tuple(split_sections(tokens))
    if len(sections) > 2:
        second = [t for t in tokens if t.kind is TokenKind.SEPARATOR and t.text == ";"][1]
        return ErrorTemplate.extra_section_separator(pattern, second.position)

    for section in sections:
        digit_indexes = [
            index
            for index, token in enumerate(section)
            if token.kind is TokenKind.NUMBER_COMPONENT
        ]
        if not digit_indexes:
            continue
        # Only separators between the first and last digit run are decimal marks;
        # a '.' in a prefix or suffix ("Rs. ¤#,##0") is literal text.
        body = section[digit_indexes[0] : digit_indexes[-1] + 1]
        decimals = [
            token for token in body if token.kind is TokenKind.SEPARATOR and token.text == "."
        ]
        if len(decimals) > 1:
            return ErrorTemplate.extra_decimal_separator(pattern, decimals[1].position)

    if not any(token.kind is TokenKind.NUMBER_COMPONENT for token in tokens):
        return ErrorTemplate.missing_digits(pattern, detected.value)
    return None


def _check_type(
    pattern: str, detected: FormatType, expected: FormatType | None
) -> Diagnostic | None:
    if expected is None or expected is detected:
        return None
    return ErrorTemplate.type_mismatch(pattern, expected.value, detected.value)


def _check_transforms(
    pattern: str, tokens: tuple[Token, ...], strict: bool
) -> tuple[Diagnostic, ...]:
    diagnostics = []
    for token in tokens:
        if token.kind is not TokenKind.TEXT_PLACEHOLDER:
            continue
        for transform in parse_placeholder(token.text).transforms:
            if not transform.is_known:
                diagnostics.append(
                    ErrorTemplate.unknown_transform(
                        pattern, token.position, transform.source, strict=strict
                    )
                )
    return tuple(diagnostics)


def _check_strict(
    pattern: str, tokens: tuple[Token, ...], detected: FormatType
) -> Diagnostic | None:
    if detected is FormatType.CUSTOM:
        return ErrorTemplate.strict_violation(
            pattern,
            0,
            "pattern matches no format family",
            "Use a number, currency, percentage, date, time or text pattern",
        )

    if detected in NUMBER_FAMILY:
        for token in tokens:
            if token.kind in _FIELD_KINDS:
                return ErrorTemplate.strict_violation(
                    pattern,
                    token.position,
                    f"date/time symbol '{token.text}' in a {detected.value} pattern",
                    f"Remove the date/time field '{token.text}'",
                )

    elif detected in TEMPORAL_FAMILY:
        for token in tokens:
            if token.kind is TokenKind.NUMBER_COMPONENT:
                return ErrorTemplate.strict_violation(
                    pattern,
                    token.position,
                    f"digit placeholder '{token.text}' in a {detected.value} pattern",
                    "Use date/time fields such as 'yyyy', 'MM' or 'HH'",
                )
            if token.kind is TokenKind.LITERAL and token.text.isalpha():
                return ErrorTemplate.strict_violation(
                    pattern,
                    token.position,
                    f"letter '{token.text}' in a {detected.value} pattern",
                    f"Remove the literal letter '{token.text}'",
                )

    elif detected is FormatType.TEXT:
        for current, following in zip(tokens, tokens[1:], strict=False):
            if (
                current.kind is TokenKind.BRACE_OPEN
                and following.kind is TokenKind.BRACE_CLOSE
            ):
                return ErrorTemplate.strict_violation(
                    pattern,
                    current.position,
                    "empty placeholder '{}'",
                    "Name the placeholder, e.g. '{value}'",
                )

    return None


def _symbol_runs(tokens: tuple[Token, ...], symbol: str) -> Iterator[tuple[int, str]]:
    """Yield (position, text) for each run of consecutive single-symbol tokens."""
    for is_symbol, group in groupby(tokens, key=lambda token: token.text == symbol):
        if is_symbol:
            run = list(group)
            yield run[0].position, "".join(token.text for token in run)

