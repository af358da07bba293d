"""Locale utilities for BCP-47 / POSIX locale identifiers.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "locale_candidates",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a locale identifier to the POSIX form Babel expects.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    setlocale()-style identifiers may also carry an encoding or modifier
    suffix (de_DE.UTF-8, sr_RS@latin) which Babel does not understand.

    Args:
        locale_code: Locale identifier (e.g., "en-US", "pt_BR.UTF-8")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8")
        'de_DE'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    code = locale_code.strip().split(".")[0].split("@")[0]
    return code.replace("-", "_")


def locale_candidates(selector: str | Sequence[str]) -> tuple[str, ...]:
    """Flatten a locale selector into an ordered tuple of normalized codes.

    A selector is either a single locale code or a sequence of candidate
    codes tried in order (first resolvable wins). Empty entries are dropped.

    Example:
        >>> locale_candidates("hr-HR")
        ('hr_HR',)
        >>> locale_candidates(["xx", "de_DE.UTF-8", ""])
        ('xx', 'de_DE')
    """
    if isinstance(selector, str):
        selector = (selector,)
    normalized = (normalize_locale(code) for code in selector)
    return tuple(code for code in normalized if code)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
