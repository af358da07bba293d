"""Enumerations for freeformdate type-safe constants.

Uses StrEnum for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import Enum, IntEnum, StrEnum

__all__ = [
    "ConversionKind",
    "DatePart",
    "MethodUsed",
    "Separator",
]


class DatePart(StrEnum):
    """Logical date part a capture group contributes to.

    StrEnum provides automatic string conversion: str(DatePart.YEAR) == "year"
    """

    WEEKDAY = "weekday"
    """Day of the week (0 = Sunday)"""

    DAY = "day"
    """Day of the month"""

    MONTH = "month"
    """Month, 1-based"""

    YEAR = "year"
    """Calendar year"""

    HOUR = "hour"
    """Hour of the day, 12- or 24-hour clock"""

    MINUTE = "minute"
    """Minute"""

    SECOND = "second"
    """Second"""

    MERIDIEM = "meridiem"
    """am/pm marker"""

    ORDINAL = "ordinal"
    """Ordinal suffix after the day (st, nd, rd, th)"""

    OFFSET = "offset"
    """UTC offset (+0200, Z, GMT)"""


class ConversionKind(StrEnum):
    """Locale word lookup applied to a textual capture."""

    FULL_MONTH_NAME = "months"
    SHORT_MONTH_NAME = "months3"
    FULL_DAY_NAME = "days"
    SHORT_DAY_NAME = "days3"


class Separator(Enum):
    """Separator markers of the extended template syntax.

    Values are documentation only; regex fragments live in
    freeformdate.patterns.library.SEPARATOR_REGEX.
    """

    DATE = "date separator: one of . , / -"
    TIME = "time separator: one of . : -"
    DAY = "day-name separator: optional comma or period"
    JOINER = "date/time joiner: up to two arbitrary characters"
    PADDED_JOINER = "date/time joiner with optional whitespace on both sides"
    OPTIONAL_DATE = "optional date separator"


class MethodUsed(IntEnum):
    """Search-plan stage that produced a result.

    Numeric values are stable and safe to persist.
    """

    TEMPLATE_HINT = 1
    """Caller hint given as a template, compiled to regex"""

    REGEX_HINT = 2
    """Caller hint given as regex plus field map"""

    RECENT_PATTERN = 97
    """Replay of the most recently successful template"""

    LOCALE_FORMAT = 98
    """Locale-preferred CLDR format, matched without synonym expansion"""

    LIBRARY_REGEX = 99
    """Template library sweep with synonym expansion"""
