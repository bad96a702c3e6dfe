"""Hypothesis strategies for formatpattern property-based testing.

Strategies are organized by domain:

- patterns: Patterns of every format family, chaos patterns, runtime values

Usage:
    from tests.strategies import number_patterns, finite_numbers
    from tests.strategies.patterns import pattern_chaos
"""

from .patterns import (
    CURRENCY_MARKERS,
    SAFE_LETTERS,
    STRUCTURAL_ALPHABET,
    affix_literals,
    calendar_values,
    cell_values,
    currency_patterns,
    date_patterns,
    datetime_patterns,
    finite_numbers,
    number_bodies,
    number_patterns,
    optional_labels,
    pattern_chaos,
    percentage_patterns,
    placeholder_names,
    text_patterns,
    time_patterns,
    valid_patterns,
    word_labels,
)

__all__ = [
    "CURRENCY_MARKERS",
    "SAFE_LETTERS",
    "STRUCTURAL_ALPHABET",
    "affix_literals",
    "calendar_values",
    "cell_values",
    "currency_patterns",
    "date_patterns",
    "datetime_patterns",
    "finite_numbers",
    "number_bodies",
    "number_patterns",
    "optional_labels",
    "pattern_chaos",
    "percentage_patterns",
    "placeholder_names",
    "text_patterns",
    "time_patterns",
    "valid_patterns",
    "word_labels",
]
