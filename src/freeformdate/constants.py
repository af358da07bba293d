"""Shared constants for freeformdate.

This module provides centralized configuration constants used across the
patterns and parsing packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: Word table fallback
- Time defaults: Values substituted for missing date parts
- Cache limits: Memory bounds for caching subsystems

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    # Time defaults
    "DEFAULT_FAKE_TIME",
    "TWO_DIGIT_YEAR_PIVOT",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_PATTERN_CACHE_SIZE",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Word table used when a requested locale cannot be resolved.
DEFAULT_LOCALE: str = "en"

# ============================================================================
# TIME DEFAULTS
# ============================================================================

# Time of day (hour, minute, second) substituted when the matched template
# carries no hour token. The odd seconds value makes faked times easy to spot.
DEFAULT_FAKE_TIME: tuple[int, int, int] = (7, 30, 59)

# Two-digit years below the pivot land in 2000-2069, the rest in 1970-1999.
# Same window as Unix mktime, so the epoch year reads as 1970.
TWO_DIGIT_YEAR_PIVOT: int = 70

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached locale word tables per LocaleWordCache.
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum memoized compiled patterns (template x locale).
# A full library sweep touches a few thousand concrete templates per locale.
MAX_PATTERN_CACHE_SIZE: int = 8192
