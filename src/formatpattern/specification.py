"""Named format specifications with conditional rules.

A FormatSpecification bundles a default pattern with ordered conditions.
When formatting, the first condition the value satisfies supplies the
pattern and options; otherwise the default applies. A specification without
any pattern falls back to the default pattern for the value's kind.

    amount = (
        FormatSpecification("amount", pattern="#,##0.00")
        .with_condition(">", 1000, "#,##0", color="green")
        .with_condition("<", 0, "#,##0.00;(#,##0.00)", color="red")
    )
    amount.format(-12.5)  # ('(12.50)', ())

Python 3.13+.
"""

import operator
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from .diagnostics import PatternError
from .engine import parse
from .registry import default_pattern
from .runtime.formatters import display_text
from .runtime.value_kinds import classify_value, default_format_type

__all__ = ["Condition", "ConditionOperator", "FormatSpecification"]


class ConditionOperator(StrEnum):
    """Comparison applied between a value and a condition threshold."""

    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="
    EQ = "=="
    NE = "!="


_COMPARATORS: MappingProxyType[ConditionOperator, Callable[[Any, Any], Any]] = MappingProxyType(
    {
        ConditionOperator.GT: operator.gt,
        ConditionOperator.GE: operator.ge,
        ConditionOperator.LT: operator.lt,
        ConditionOperator.LE: operator.le,
        ConditionOperator.EQ: operator.eq,
        ConditionOperator.NE: operator.ne,
    }
)


def _frozen(options: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(options))


@dataclass(frozen=True, slots=True)
class Condition:
    """One conditional rule.

    Attributes:
        operator: Comparison to apply
        threshold: Right-hand side of the comparison
        pattern: Pattern used when the condition matches (None keeps the default)
        options: Options merged over the specification's options on match
    """

    operator: ConditionOperator
    threshold: Any
    pattern: str | None = None
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Coerce operator strings and freeze options."""
        object.__setattr__(self, "operator", ConditionOperator(self.operator))
        object.__setattr__(self, "options", _frozen(self.options))

    def matches(self, value: Any) -> bool:
        """Evaluate the condition. Values that cannot be compared never match."""
        try:
            return bool(_COMPARATORS[self.operator](value, self.threshold))
        except TypeError:
            return False


@dataclass(frozen=True, slots=True)
class FormatSpecification:
    """Immutable, named format specification.

    Builder methods return new instances; the original is never modified.

    Attributes:
        name: Identifier of the specification
        pattern: Default pattern (None selects the value kind's default)
        conditions: Ordered conditional rules; first match wins
        options: Parse options (type, locale, currency, strict, ...);
            unrecognized keys are kept for callers but ignored by parsing
    """

    name: str
    pattern: str | None = None
    conditions: tuple[Condition, ...] = ()
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze conditions and options."""
        object.__setattr__(self, "conditions", tuple(self.conditions))
        object.__setattr__(self, "options", _frozen(self.options))

    def with_condition(
        self,
        op: ConditionOperator | str,
        threshold: Any,
        pattern: str | None = None,
        **options: Any,
    ) -> "FormatSpecification":
        """Return a copy with one more condition appended.

        Raises:
            ValueError: If op is not a known comparison operator
        """
        condition = Condition(ConditionOperator(op), threshold, pattern, options)
        return replace(self, conditions=(*self.conditions, condition))

    def with_default_pattern(self, pattern: str) -> "FormatSpecification":
        """Return a copy using pattern when no condition matches."""
        return replace(self, pattern=pattern)

    def compile(self) -> tuple[PatternError, ...]:
        """Parse every pattern of the specification, warming the cache.

        Returns:
            Errors for patterns that fail to parse (empty when all are valid)
        """
        errors: list[PatternError] = []
        if self.pattern is not None:
            errors.extend(parse(self.pattern, self.options)[1])
        for condition in self.conditions:
            if condition.pattern is not None:
                errors.extend(parse(condition.pattern, self._merged(condition))[1])
        return tuple(errors)

    def effective_format(self, value: Any) -> tuple[str | None, Mapping[str, Any]]:
        """Pattern and options that apply to value.

        Returns:
            Tuple of (pattern, options) from the first matching condition,
            else the specification's own
        """
        for condition in self.conditions:
            if condition.matches(value):
                pattern = condition.pattern if condition.pattern is not None else self.pattern
                return pattern, self._merged(condition)
        return self.pattern, self.options

    def format(
        self, value: Any, call_options: Mapping[str, Any] | None = None
    ) -> tuple[str, tuple[PatternError, ...]]:
        """Format value with the effective pattern.

        Returns:
            Tuple of (text, errors). A pattern that fails to parse yields the
            value's plain text with the parse errors.
        """
        pattern, options = self.effective_format(value)
        if pattern is None:
            kind = classify_value(value)
            pattern = default_pattern(default_format_type(kind)) if kind is not None else None
        if pattern is None:
            return display_text(value), ()

        spec, errors = parse(pattern, options)
        if spec is None:
            return display_text(value), errors
        return spec.format(value, call_options)

    def _merged(self, condition: Condition) -> Mapping[str, Any]:
        return _frozen({**self.options, **condition.options})
