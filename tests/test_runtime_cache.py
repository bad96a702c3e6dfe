"""Tests for PatternCache and CacheConfig.

Validates LRU behavior, statistics, size limits and thread safety.
"""

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from formatpattern import CacheConfig, FormatOptions, PatternCache, parse
from formatpattern.constants import DEFAULT_CACHE_SIZE, MAX_CACHED_PATTERN_LENGTH
from formatpattern.runtime import CompiledFormatSpec

_OPTIONS = FormatOptions()


def _compiled(pattern: str) -> CompiledFormatSpec:
    spec, errors = parse(pattern, cache=False)
    assert spec is not None, errors
    return spec


class TestCacheConfig:
    """CacheConfig construction and validation."""

    def test_defaults(self) -> None:
        """Defaults come from constants."""
        config = CacheConfig()

        assert config.size == DEFAULT_CACHE_SIZE
        assert config.max_pattern_length == MAX_CACHED_PATTERN_LENGTH

    @pytest.mark.parametrize("field", ["size", "max_pattern_length"])
    def test_rejects_non_positive(self, field: str) -> None:
        """Zero limits are configuration errors."""
        with pytest.raises(ValueError, match=f"{field} must be positive"):
            CacheConfig(**{field: 0})

    def test_from_config(self) -> None:
        """PatternCache honors the configured size."""
        assert PatternCache.from_config(CacheConfig(size=200)).maxsize == 200


class TestPatternCacheBasics:
    """get/put/clear and statistics."""

    def test_rejects_non_positive_maxsize(self) -> None:
        """maxsize must be positive."""
        with pytest.raises(ValueError, match="maxsize must be positive"):
            PatternCache(maxsize=0)

    def test_miss_then_hit(self) -> None:
        """Stored specs are returned for the same key."""
        cache = PatternCache()
        spec = _compiled("0.00")

        assert cache.get("0.00", _OPTIONS) is None
        assert cache.put("0.00", _OPTIONS, spec)
        assert cache.get("0.00", _OPTIONS) is spec
        assert (cache.hits, cache.misses) == (1, 1)

    def test_key_includes_options(self) -> None:
        """Locale, currency, type and strict are part of the key."""
        cache = PatternCache()
        cache.put("0.00", _OPTIONS, _compiled("0.00"))

        for options in (
            FormatOptions(locale="de_DE"),
            FormatOptions(currency="EUR"),
            FormatOptions(type="number"),
            FormatOptions(strict=True),
        ):
            assert cache.get("0.00", options) is None

    def test_cache_flag_not_part_of_key(self) -> None:
        """Per-call cache controls do not split entries."""
        cache = PatternCache()
        spec = _compiled("0.00")
        cache.put("0.00", FormatOptions(cache=True), spec)

        assert cache.get("0.00", FormatOptions(cache=cache)) is spec

    def test_lru_eviction(self) -> None:
        """The least recently used entry is evicted first."""
        cache = PatternCache(maxsize=2)
        cache.put("0", _OPTIONS, _compiled("0"))
        cache.put("0.0", _OPTIONS, _compiled("0.0"))
        cache.get("0", _OPTIONS)
        cache.put("0.00", _OPTIONS, _compiled("0.00"))

        assert cache.get("0.0", _OPTIONS) is None
        assert cache.get("0", _OPTIONS) is not None
        assert len(cache) == 2

    def test_long_patterns_not_stored(self) -> None:
        """Patterns above max_pattern_length are skipped."""
        cache = PatternCache(max_pattern_length=3)

        assert not cache.put("0.00", _OPTIONS, _compiled("0.00"))
        assert len(cache) == 0

    def test_long_patterns_still_parse(self) -> None:
        """parse() compiles patterns the cache refuses to store."""
        cache = PatternCache(max_pattern_length=3)
        spec, errors = parse("#,##0.00", cache=cache)

        assert errors == ()
        assert spec is not None
        assert len(cache) == 0

    def test_stats(self) -> None:
        """get_stats reports size, capacity and hit rate."""
        cache = PatternCache(maxsize=10)
        cache.put("0", _OPTIONS, _compiled("0"))
        cache.get("0", _OPTIONS)
        cache.get("1", _OPTIONS)

        assert cache.get_stats() == {
            "size": 1,
            "maxsize": 10,
            "hits": 1,
            "misses": 1,
            "hit_rate": 50.0,
        }

    def test_clear_resets_entries_and_metrics(self) -> None:
        """clear() empties the cache and zeroes counters."""
        cache = PatternCache()
        cache.put("0", _OPTIONS, _compiled("0"))
        cache.get("0", _OPTIONS)
        cache.clear()

        assert len(cache) == 0
        assert cache.get_stats()["hits"] == 0
        assert cache.get_stats()["hit_rate"] == 0.0


class TestCacheProperties:
    """Property-based cache checks."""

    @given(
        patterns=st.lists(st.sampled_from(["0", "0.0", "0.00", "#,##0", "0%"]), max_size=30),
        maxsize=st.integers(min_value=1, max_value=4),
    )
    def test_size_never_exceeds_maxsize(self, patterns: list[str], maxsize: int) -> None:
        """The cache stays within its bound for any access sequence."""
        cache = PatternCache(maxsize=maxsize)
        for pattern in patterns:
            parse(pattern, cache=cache)
        event(f"filled={len(cache) == maxsize}")

        assert len(cache) <= maxsize
        assert cache.hits + cache.misses == len(patterns)

    @given(value=st.floats(allow_nan=False, allow_infinity=False, min_value=-1e9, max_value=1e9))
    def test_cache_transparency(self, value: float) -> None:
        """Cached and uncached specs format identically."""
        cached, _ = parse("#,##0.00", cache=PatternCache())
        uncached, _ = parse("#,##0.00", cache=False)

        assert cached is not None
        assert uncached is not None
        assert cached.format(value) == uncached.format(value)


class TestCacheConcurrency:
    """Thread safety of the shared cache."""

    def test_concurrent_parses(self) -> None:
        """Concurrent parses of one pattern all yield complete, equal specs."""
        cache = PatternCache()

        def parse_and_format(value: float) -> str:
            spec, _ = parse("#,##0.00", cache=cache)
            assert spec is not None
            text, _ = spec.format(value)
            return text

        with ThreadPoolExecutor(max_workers=10) as executor:
            futures = [executor.submit(parse_and_format, 1234.5) for _ in range(100)]
            results = [future.result() for future in as_completed(futures)]

        assert all(result == "1,234.50" for result in results)
        assert len(cache) == 1
        assert cache.hits + cache.misses == 100

    def test_concurrent_mixed_patterns(self) -> None:
        """Different patterns from many threads stay within bounds."""
        cache = PatternCache(maxsize=3)
        patterns = ["0", "0.0", "0.00", "#,##0", "0%", "¤0.00"]

        def parse_pattern(index: int) -> None:
            spec, errors = parse(patterns[index % len(patterns)], cache=cache)
            assert spec is not None, errors

        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = [executor.submit(parse_pattern, i) for i in range(200)]
            for future in as_completed(futures):
                future.result()

        assert len(cache) <= 3

    def test_concurrent_clear(self) -> None:
        """Clearing while other threads parse raises nothing."""
        cache = PatternCache()
        errors: list[Exception] = []

        def parse_and_clear() -> None:
            try:
                for _ in range(20):
                    parse("#,##0", cache=cache)
                    cache.clear()
            except Exception as e:  # pylint: disable=broad-exception-caught
                errors.append(e)

        threads = [threading.Thread(target=parse_and_clear) for _ in range(5)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
