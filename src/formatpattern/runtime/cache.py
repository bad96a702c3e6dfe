"""Thread-safe LRU cache for compiled format specifications.

Reports format thousands of cells with a handful of patterns; caching
avoids re-running detection, validation and compilation per cell.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - LRU eviction via OrderedDict
    - Immutable cache keys (tuples of hashable types)
    - Only complete CompiledFormatSpec values are stored

Cache Key Structure:
    (pattern, type, locale, currency, strict)
    - pattern: str (exact input, never normalized)
    - type: FormatType | None (caller-asserted type)
    - locale: str | None (normalized POSIX code)
    - currency: str | None (upper-case ISO 4217 code)
    - strict: bool

Thread Safety:
    All operations protected by RLock. Concurrent misses for the same key
    may both compile; the last writer wins and both values are complete.

Python 3.13+.
"""

from __future__ import annotations

from collections import OrderedDict
from threading import RLock
from typing import TYPE_CHECKING

from formatpattern.constants import DEFAULT_CACHE_SIZE, MAX_CACHED_PATTERN_LENGTH
from formatpattern.enums import FormatType

from .cache_config import CacheConfig

if TYPE_CHECKING:
    from .compiler import CompiledFormatSpec
    from .options import FormatOptions

__all__ = ["PatternCache"]

# Internal type alias for cache keys (prefixed with _ per naming convention)
type _CacheKey = tuple[str, FormatType | None, str | None, str | None, bool]


class PatternCache:
    """Thread-safe LRU cache for parse() results.

    Uses OrderedDict for LRU eviction and RLock for thread safety.
    Transparent to caller - returns None on cache miss. Failed parses are
    never stored.

    Attributes:
        maxsize: Maximum number of cache entries
        hits: Number of cache hits (for metrics)
        misses: Number of cache misses (for metrics)
    """

    __slots__ = ("_cache", "_hits", "_lock", "_max_pattern_length", "_maxsize", "_misses")

    def __init__(
        self,
        maxsize: int = DEFAULT_CACHE_SIZE,
        *,
        max_pattern_length: int = MAX_CACHED_PATTERN_LENGTH,
    ) -> None:
        """Initialize pattern cache.

        Args:
            maxsize: Maximum number of entries (default: 1000)
            max_pattern_length: Longest pattern stored (default: 1000)
        """
        if maxsize <= 0:
            msg = "maxsize must be positive"
            raise ValueError(msg)

        self._cache: OrderedDict[_CacheKey, CompiledFormatSpec] = OrderedDict()
        self._maxsize = maxsize
        self._max_pattern_length = max_pattern_length
        self._lock = RLock()  # Reentrant lock for safety
        self._hits = 0
        self._misses = 0

    @classmethod
    def from_config(cls, config: CacheConfig) -> PatternCache:
        """Create a cache sized by a CacheConfig."""
        return cls(config.size, max_pattern_length=config.max_pattern_length)

    def get(self, pattern: str, options: FormatOptions) -> CompiledFormatSpec | None:
        """Get cached spec if exists.

        Thread-safe. Returns None on cache miss.

        Args:
            pattern: Pattern text
            options: Effective parse options

        Returns:
            Cached CompiledFormatSpec or None
        """
        key = self._make_key(pattern, options)

        with self._lock:
            if key in self._cache:
                # Move to end (mark as recently used)
                self._cache.move_to_end(key)
                self._hits += 1
                return self._cache[key]

            self._misses += 1
            return None

    def put(self, pattern: str, options: FormatOptions, spec: CompiledFormatSpec) -> bool:
        """Store spec in cache.

        Thread-safe. Evicts LRU entry if cache is full.

        Args:
            pattern: Pattern text
            options: Effective parse options
            spec: Compiled spec to cache

        Returns:
            True if stored, False if the pattern exceeds max_pattern_length
        """
        if len(pattern) > self._max_pattern_length:
            return False

        key = self._make_key(pattern, options)

        with self._lock:
            # Update existing or add new
            if key in self._cache:
                self._cache.move_to_end(key)
            # Evict LRU if cache is full
            elif len(self._cache) >= self._maxsize:
                self._cache.popitem(last=False)  # Remove first (oldest)

            self._cache[key] = spec
        return True

    def clear(self) -> None:
        """Clear all cached entries and reset metrics.

        Thread-safe.
        """
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Thread-safe. Returns current metrics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached entries
            - maxsize (int): Maximum cache capacity
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0

            return {
                "size": len(self._cache),
                "maxsize": self._maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
            }

    @staticmethod
    def _make_key(pattern: str, options: FormatOptions) -> _CacheKey:
        """Create immutable cache key from the options that affect compilation."""
        return (pattern, options.type, options.locale, options.currency, options.strict)

    def __len__(self) -> int:
        """Get current cache size.

        Thread-safe.
        """
        with self._lock:
            return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Maximum cache size."""
        return self._maxsize

    @property
    def hits(self) -> int:
        """Number of cache hits.

        Thread-safe.
        """
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses.

        Thread-safe.
        """
        with self._lock:
            return self._misses
