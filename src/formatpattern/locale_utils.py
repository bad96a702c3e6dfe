"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from formatpattern.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    All locale handling normalizes at the system boundary using this function,
    so "en-US" and "en_US" share cache entries.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> tuple[Locale, bool]:
    """Get a Babel Locale object with caching and graceful fallback.

    Parses the locale code once and caches the result. Unknown or malformed
    codes log a warning and resolve to DEFAULT_LOCALE.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Tuple of (Babel Locale, True if the fallback locale was used)

    Example:
        >>> locale, is_fallback = get_babel_locale("en-US")
        >>> locale.territory
        'US'
        >>> get_babel_locale("xx_INVALID")[1]
        True
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale, UnknownLocaleError  # noqa: PLC0415

    try:
        return Locale.parse(normalize_locale(locale_code)), False
    except UnknownLocaleError as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
        )
    except (ValueError, TypeError) as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
        )
    return Locale.parse(DEFAULT_LOCALE), True
