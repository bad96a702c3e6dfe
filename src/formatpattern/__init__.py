"""formatpattern - format-pattern engine for report cells.

Classifies, tokenizes, validates and compiles human-authored patterns such
as "#,##0.00", "¤#,##0.00", "yyyy-MM-dd" or "%{value|upper}" into reusable
formatters backed by Babel's CLDR data.

Public API:
    parse - Detect, tokenize, validate and compile a pattern
    validate - Validate a pattern without compiling it
    detect_type - Classify a pattern into its FormatType
    tokenize - Split a pattern into positioned tokens
    pattern_info - Documentation for every format family
    FormatSpecification - Named pattern with conditional rules

Errors are returned, not raised: parse() yields (spec, errors) and every
compiled formatter yields (text, errors) with a fallback text on failure.

Submodules:
    formatpattern.syntax - Tokenizer, type detector and validator
    formatpattern.runtime - Compiler, formatters, locale context and cache
    formatpattern.diagnostics - Diagnostic codes, errors and formatting
"""

from .diagnostics import FormattingError, PatternError, PatternParseError, ValidationResult
from .engine import clear_cache, get_default_cache, parse, validate
from .enums import FormatType, TokenKind, ValueKind
from .registry import PatternInfo, pattern_info
from .runtime import CacheConfig, CompiledFormatSpec, FormatOptions, PatternCache
from .specification import Condition, ConditionOperator, FormatSpecification
from .syntax import Token, detect_type, tokenize

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    # This should never happen on Python 3.13+ (importlib.metadata is stdlib since 3.8)
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("formatpattern")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CacheConfig",
    "CompiledFormatSpec",
    "Condition",
    "ConditionOperator",
    "FormatOptions",
    "FormatSpecification",
    "FormatType",
    "FormattingError",
    "PatternCache",
    "PatternError",
    "PatternInfo",
    "PatternParseError",
    "Token",
    "TokenKind",
    "ValidationResult",
    "ValueKind",
    "__version__",
    "clear_cache",
    "detect_type",
    "get_default_cache",
    "parse",
    "pattern_info",
    "tokenize",
    "validate",
]
