"""Parser configuration.

Provides a single frozen dataclass that encapsulates all tunable parser
parameters, so DateParser takes one typed object instead of a long list of
keyword arguments.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo as TzInfo

from freeformdate.constants import DEFAULT_FAKE_TIME, DEFAULT_LOCALE

__all__ = ["ParserConfig"]


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable configuration for DateParser.

    All fields have sensible defaults; constructing ``ParserConfig()`` with
    no arguments produces a usable configuration.

    Attributes:
        default_locale: Locale used when run() gets no locale selector.
        fallback_locale: Word table used when a locale cannot be resolved.
        fake_time: (hour, minute, second) used when the input has no time.
        tzinfo: Zone the parsed wall-clock time is interpreted in.
            None means the process local zone. A UTC offset captured by the
            template always takes precedence.
        strip_input: Match against the input with surrounding whitespace
            removed. ``raw_input`` in results keeps the original text.
        locale_formats: Resolve the locale-preferred ``%c``/``%x`` library
            entries through CLDR patterns instead of skipping them.
        max_attempts: Upper bound on candidate patterns tried per call.
            None means unbounded.

    Example:
        >>> from datetime import UTC
        >>> config = ParserConfig(default_locale="de_DE", tzinfo=UTC)
        >>> parser = DateParser(config)
    """

    default_locale: str = DEFAULT_LOCALE
    fallback_locale: str = DEFAULT_LOCALE
    fake_time: tuple[int, int, int] = DEFAULT_FAKE_TIME
    tzinfo: TzInfo | None = None
    strip_input: bool = True
    locale_formats: bool = False
    max_attempts: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If fake_time is not a valid time of day, a locale
                code is empty, or max_attempts is not positive.
        """
        if not self.default_locale or not self.fallback_locale:
            msg = "locale codes must be non-empty"
            raise ValueError(msg)
        if len(self.fake_time) != 3:
            msg = f"fake_time must be (hour, minute, second), got {self.fake_time!r}"
            raise ValueError(msg)
        hour, minute, second = self.fake_time
        if not (0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59):
            msg = f"fake_time out of range: {self.fake_time!r}"
            raise ValueError(msg)
        if self.max_attempts is not None and self.max_attempts <= 0:
            msg = "max_attempts must be positive"
            raise ValueError(msg)
