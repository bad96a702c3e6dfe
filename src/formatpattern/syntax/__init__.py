"""Pattern syntax: tokenizer, type detector and structural validator.

Python 3.13+. Zero external dependencies.
"""

from .detector import detect_type
from .placeholders import Placeholder, Transform, parse_placeholder
from .tokenizer import tokenize
from .tokens import Token, split_sections
from .validator import validate_pattern

__all__ = [
    "Placeholder",
    "Token",
    "Transform",
    "detect_type",
    "parse_placeholder",
    "split_sections",
    "tokenize",
    "validate_pattern",
]
