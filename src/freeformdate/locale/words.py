"""Locale word tables: month and weekday names per locale.

A word table holds four ordered name lists. Position is the value:
weekdays are Sunday-first (index 0 = Sunday), months January-first.

Tables come from a loader callable keyed by locale code. The default loader
reads CLDR data through Babel; tests and callers with their own data can
inject any callable returning LocaleWords.

Caching:
    LocaleWordCache is an explicit object the caller constructs and passes
    to DateParser. There is no module-level table. Population is idempotent:
    two threads racing on the same locale may both load it, but only one
    table is stored and both receive the stored instance.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from threading import RLock

from babel import UnknownLocaleError
from babel import dates as babel_dates

from freeformdate.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from freeformdate.enums import ConversionKind
from freeformdate.locale_utils import get_babel_locale, locale_candidates, normalize_locale

__all__ = [
    "LocaleWordCache",
    "LocaleWords",
    "WordLoader",
    "load_babel_words",
]

logger = logging.getLogger(__name__)

# Babel numbers weekdays Monday=0 .. Sunday=6; tables here are Sunday-first.
_SUNDAY_FIRST: tuple[int, ...] = (6, 0, 1, 2, 3, 4, 5)


@dataclass(frozen=True, slots=True)
class LocaleWords:
    """Month and weekday names for one locale.

    Attributes:
        locale_code: Normalized locale the table was loaded for
        days: 7 full weekday names, Sunday first
        days3: 7 abbreviated weekday names, Sunday first
        months: 12 full month names, January first
        months3: 12 abbreviated month names, January first
    """

    locale_code: str
    days: tuple[str, ...]
    days3: tuple[str, ...]
    months: tuple[str, ...]
    months3: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate list lengths.

        Raises:
            ValueError: If a weekday list does not have 7 entries or a month
                list does not have 12 entries.
        """
        for name, expected in (("days", 7), ("days3", 7), ("months", 12), ("months3", 12)):
            words = getattr(self, name)
            if len(words) != expected:
                msg = f"LocaleWords.{name} needs {expected} entries, got {len(words)}"
                raise ValueError(msg)

    def words_for(self, kind: ConversionKind) -> tuple[str, ...]:
        """Return the name list a conversion looks words up in."""
        match kind:
            case ConversionKind.FULL_MONTH_NAME:
                return self.months
            case ConversionKind.SHORT_MONTH_NAME:
                return self.months3
            case ConversionKind.FULL_DAY_NAME:
                return self.days
            case ConversionKind.SHORT_DAY_NAME:
                return self.days3


type WordLoader = Callable[[str], LocaleWords]


def load_babel_words(locale_code: str) -> LocaleWords:
    """Load a word table from Babel's CLDR data.

    Uses the format context ("wide" and "abbreviated" widths), which is the
    form names take inside running dates.

    Args:
        locale_code: Locale identifier (BCP-47 or POSIX)

    Returns:
        LocaleWords for the locale

    Raises:
        babel.core.UnknownLocaleError: If the locale is not recognized
        ValueError: If the locale format is invalid

    Example:
        >>> words = load_babel_words("de_DE")
        >>> words.months[2]
        'März'
        >>> words.days[0]
        'Sonntag'
    """
    locale = get_babel_locale(locale_code)
    days = babel_dates.get_day_names("wide", locale=locale)
    days3 = babel_dates.get_day_names("abbreviated", locale=locale)
    months = babel_dates.get_month_names("wide", locale=locale)
    months3 = babel_dates.get_month_names("abbreviated", locale=locale)
    return LocaleWords(
        locale_code=normalize_locale(locale_code),
        days=tuple(str(days[i]) for i in _SUNDAY_FIRST),
        days3=tuple(str(days3[i]) for i in _SUNDAY_FIRST),
        months=tuple(str(months[i]) for i in range(1, 13)),
        months3=tuple(str(months3[i]) for i in range(1, 13)),
    )


class LocaleWordCache:
    """Thread-safe LRU cache of word tables keyed by normalized locale code.

    Unknown locales are remembered as failures so the loader is not retried
    for them; resolve() then falls back to the fallback locale's table.

    Example:
        >>> cache = LocaleWordCache()
        >>> cache.resolve(["xx_XX", "fr_FR"]).locale_code
        'fr_FR'
        >>> cache.resolve("xx_XX").locale_code  # Falls back, warning logged
        'en'
    """

    def __init__(
        self,
        loader: WordLoader = load_babel_words,
        *,
        fallback_locale: str = DEFAULT_LOCALE,
        max_size: int = MAX_LOCALE_CACHE_SIZE,
    ) -> None:
        """Create an empty cache.

        Args:
            loader: Callable returning LocaleWords for a locale code; raises
                LookupError (UnknownLocaleError) or ValueError for unknown codes
            fallback_locale: Locale whose table is used when nothing resolves
            max_size: Maximum number of cached entries

        Raises:
            ValueError: If max_size is not positive
        """
        if max_size <= 0:
            msg = "max_size must be positive"
            raise ValueError(msg)
        self._loader = loader
        self._fallback_locale = normalize_locale(fallback_locale)
        self._max_size = max_size
        self._tables: OrderedDict[str, LocaleWords | None] = OrderedDict()
        self._lock = RLock()

    @property
    def fallback_locale(self) -> str:
        """Locale whose table is used when a selector cannot be resolved."""
        return self._fallback_locale

    def lookup(self, locale_code: str) -> LocaleWords | None:
        """Return the table for one locale, loading it on first use.

        Args:
            locale_code: Locale identifier

        Returns:
            LocaleWords, or None if the loader does not know the locale
        """
        key = normalize_locale(locale_code)
        with self._lock:
            if key in self._tables:
                self._tables.move_to_end(key)
                return self._tables[key]

        # Load outside the lock; the loader may be slow (CLDR file access)
        try:
            words: LocaleWords | None = self._loader(key)
        except (UnknownLocaleError, LookupError, ValueError) as e:
            logger.debug("No word table for locale '%s': %s", key, e)
            words = None

        with self._lock:
            if key in self._tables:
                return self._tables[key]
            if len(self._tables) >= self._max_size:
                self._tables.popitem(last=False)
            self._tables[key] = words
            return words

    def resolve(self, selector: str | Sequence[str]) -> LocaleWords:
        """Return the table for the first resolvable locale in the selector.

        Falls back to the fallback locale's table (with a warning) when no
        candidate resolves. Never raises for unknown locales.

        Args:
            selector: Locale code or ordered sequence of candidate codes

        Returns:
            LocaleWords for the first known candidate, or the fallback table

        Raises:
            LookupError: If even the fallback locale has no table
        """
        candidates = locale_candidates(selector)
        for code in candidates:
            words = self.lookup(code)
            if words is not None:
                return words

        logger.warning(
            "Unknown locale %s. Falling back to %s", candidates or "''", self._fallback_locale
        )
        fallback = self.lookup(self._fallback_locale)
        if fallback is None:
            msg = f"Fallback locale '{self._fallback_locale}' has no word table"
            raise LookupError(msg)
        return fallback

    def clear(self) -> None:
        """Drop every cached table. Thread-safe."""
        with self._lock:
            self._tables.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tables)

    def cache_info(self) -> dict[str, int | tuple[str, ...]]:
        """Get cache statistics.

        Returns:
            Dictionary with size, max_size and cached locale codes (LRU order)
        """
        with self._lock:
            return {
                "size": len(self._tables),
                "max_size": self._max_size,
                "locales": tuple(self._tables.keys()),
            }
