"""Cache configuration for the compiled pattern cache.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from formatpattern.constants import DEFAULT_CACHE_SIZE, MAX_CACHED_PATTERN_LENGTH

__all__ = ["CacheConfig"]


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """Immutable configuration for PatternCache.

    All fields have sensible defaults; constructing ``CacheConfig()`` with
    no arguments produces a usable configuration.

    Attributes:
        size: Maximum cache entries (default: 1000).
        max_pattern_length: Longest pattern stored in the cache
            (default: 1000). Longer patterns are compiled but not cached.

    Example:
        >>> cache = PatternCache.from_config(CacheConfig(size=200))
        >>> cache.maxsize
        200
    """

    size: int = DEFAULT_CACHE_SIZE
    max_pattern_length: int = MAX_CACHED_PATTERN_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If size or max_pattern_length is not positive.
        """
        if self.size <= 0:
            msg = "size must be positive"
            raise ValueError(msg)
        if self.max_pattern_length <= 0:
            msg = "max_pattern_length must be positive"
            raise ValueError(msg)
