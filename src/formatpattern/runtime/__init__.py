"""Runtime: compiler, formatters, locale handling and the pattern cache.

Python 3.13+. Uses Babel for i18n.
"""

from .cache import PatternCache
from .cache_config import CacheConfig
from .compiler import CompiledFormatSpec, CompileResult, SpecMetadata, compile_pattern
from .formatters import FormatResult, Formatter
from .locale_context import LocaleContext
from .options import CallOptions, FormatOptions
from .value_kinds import classify_value, default_format_type

__all__ = [
    "CacheConfig",
    "CallOptions",
    "CompileResult",
    "CompiledFormatSpec",
    "FormatOptions",
    "FormatResult",
    "Formatter",
    "LocaleContext",
    "PatternCache",
    "SpecMetadata",
    "classify_value",
    "compile_pattern",
    "default_format_type",
]
