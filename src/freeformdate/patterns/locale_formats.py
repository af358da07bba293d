"""Locale-preferred formats: CLDR patterns converted to library templates.

The %c (preferred date and time stamp) and %x (preferred date) library
entries do not describe one template. They stand for whatever a locale
prefers, which CLDR records as date_formats / time_formats /
datetime_formats patterns. This module converts those patterns into the
extended strftime syntax used by the library so they compile like any
other template.

Converted templates are matched as written; synonym expansion does not
apply to them.

Thread-safe. Results are cached per (locale, entry).

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

from functools import cache

from babel import UnknownLocaleError

from freeformdate.locale_utils import get_babel_locale, normalize_locale
from freeformdate.patterns.library import LOCALE_DATE, LOCALE_STAMP

__all__ = [
    "CLDR_TOKEN_MAP",
    "cldr_to_template",
    "locale_templates",
    "tokenize_cldr_pattern",
]

# CLDR styles, most explicit first (full carries the weekday name).
_FORMAT_STYLES: tuple[str, ...] = ("full", "long", "medium", "short")

# ==============================================================================
# CLDR PATTERN -> TEMPLATE TOKENS
# ==============================================================================
# ruff: noqa: ERA001 - Documentation table is not commented-out code
#
#   CLDR     | Meaning                | Template
#   ---------|------------------------|---------
#   y/yyyy   | full year              | %Y
#   yy       | 2-digit year           | %y
#   M/MM     | numeric month          | %m
#   MMM      | short month name       | %b
#   MMMM     | full month name        | %B
#   d        | day, 1-2 digits        | %e
#   dd       | day, 2 digits          | %d
#   E/EEE    | short weekday          | %a
#   EEEE     | full weekday           | %A
#   H/HH     | hour 0-23              | %H
#   h        | hour 1-12              | %l
#   hh       | hour 01-12             | %I
#   m/mm     | minute                 | %M
#   s/ss     | second                 | %S
#   a        | am/pm marker           | %p
#   Z/x/X    | UTC offset             | %z
#
# Era (G) and timezone names (z, v, V, O) map to None and are dropped;
# letters missing from the table are dropped as well.
# ==============================================================================

CLDR_TOKEN_MAP: dict[str, str | None] = {
    # Year
    "yyyy": "%Y",
    "yy": "%y",
    "y": "%Y",
    # Month (format and stand-alone context)
    "MMMM": "%B",
    "MMM": "%b",
    "MM": "%m",
    "M": "%m",
    "LLLL": "%B",
    "LLL": "%b",
    "LL": "%m",
    "L": "%m",
    # Day
    "dd": "%d",
    "d": "%e",
    # Weekday (format and stand-alone context)
    "EEEE": "%A",
    "EEE": "%a",
    "EE": "%a",
    "E": "%a",
    "cccc": "%A",
    "ccc": "%a",
    # Era
    "GGGG": None,
    "GGG": None,
    "GG": None,
    "G": None,
    # Hour
    "HH": "%H",
    "H": "%H",
    "hh": "%I",
    "h": "%l",
    # Minute and second
    "mm": "%M",
    "m": "%M",
    "ss": "%S",
    "s": "%S",
    # AM/PM
    "a": "%p",
    # UTC offsets
    "ZZZZZ": "%z",
    "ZZZ": "%z",
    "ZZ": "%z",
    "Z": "%z",
    "xxx": "%z",
    "xx": "%z",
    "x": "%z",
    "XXX": "%z",
    "XX": "%z",
    "X": "%z",
    # Timezone names
    "zzzz": None,
    "zzz": None,
    "zz": None,
    "z": None,
    "vvvv": None,
    "v": None,
    "VVVV": None,
    "VV": None,
    "OOOO": None,
    "O": None,
}


def tokenize_cldr_pattern(pattern: str) -> list[str]:
    """Tokenize a CLDR date pattern into pattern letters and literals.

    CLDR quote escaping rules:
    - Single quotes delimit literal text: 'at' produces "at"
    - Two consecutive single quotes '' produce a literal single quote
    - '' inside quoted text also produces a literal single quote

    Examples:
        "h 'o''clock' a" -> ["h", " ", "o'clock", " ", "a"]
        "d.MM.yyyy" -> ["d", ".", "MM", ".", "yyyy"]

    Args:
        pattern: CLDR date pattern

    Returns:
        List of tokens
    """
    tokens: list[str] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                tokens.append("'")
                i += 2
                continue

            i += 1
            literal_chars: list[str] = []
            while i < n:
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal_chars.append("'")
                        i += 2
                    else:
                        i += 1
                        break
                else:
                    literal_chars.append(pattern[i])
                    i += 1

            if literal_chars:
                tokens.append("".join(literal_chars))
            continue

        if char.isascii() and char.isalpha():
            j = i + 1
            while j < n and pattern[j] == char:
                j += 1
            tokens.append(pattern[i:j])
            i = j
            continue

        tokens.append(char)
        i += 1

    return tokens


def _literal(text: str) -> str:
    """Template spelling of literal text: spaces normalized, % escaped."""
    return "".join(" " if ch.isspace() else ch for ch in text).replace("%", "%%")


def cldr_to_template(pattern: str) -> str:
    """Convert a CLDR date pattern into the library's template syntax.

    Unsupported pattern letters are dropped without their neighbours, so
    a dropped timezone name may leave a trailing literal space; surrounding
    whitespace is stripped from the result.

    Args:
        pattern: CLDR date, time or combined pattern

    Returns:
        Template string

    Example:
        >>> cldr_to_template("EEEE, MMMM d, y")
        '%A, %B %e, %Y'
        >>> cldr_to_template("dd.MM.yy HH:mm")
        '%d.%m.%y %H:%M'
    """
    parts: list[str] = []
    for token in tokenize_cldr_pattern(pattern):
        if token[0].isascii() and token[0].isalpha() and token == token[0] * len(token):
            mapped = CLDR_TOKEN_MAP.get(token)
            if mapped is not None:
                parts.append(mapped)
            continue
        parts.append(_literal(token))
    return "".join(parts).strip()


def _combine(datetime_pattern: str, date_pattern: str, time_pattern: str) -> str:
    # CLDR dateTimeFormat: {1} is the date, {0} the time
    return datetime_pattern.replace("{1}", date_pattern).replace("{0}", time_pattern)


@cache
def locale_templates(locale_code: str, entry: str) -> tuple[str, ...]:
    """Templates a delegated library entry stands for in one locale.

    Args:
        locale_code: Locale identifier (BCP-47 or POSIX)
        entry: LOCALE_STAMP (%c) or LOCALE_DATE (%x)

    Returns:
        Distinct templates, most explicit style first. Empty tuple if the
        locale is unknown or the entry is not a delegated one.

    Example:
        >>> locale_templates("en_US", "%x")[-1]
        '%m/%e/%y'
    """
    if entry not in (LOCALE_STAMP, LOCALE_DATE):
        return ()
    try:
        locale = get_babel_locale(normalize_locale(locale_code))
    except (UnknownLocaleError, ValueError):
        return ()

    patterns: list[str] = []
    for style in _FORMAT_STYLES:
        try:
            date_pattern = locale.date_formats[style].pattern
            if entry == LOCALE_DATE:
                patterns.append(date_pattern)
                continue
            time_pattern = locale.time_formats[style].pattern
            datetime_pattern = str(locale.datetime_formats[style])
        except (AttributeError, KeyError):
            continue
        patterns.append(_combine(datetime_pattern, date_pattern, time_pattern))

    templates = (cldr_to_template(pattern) for pattern in patterns)
    return tuple(dict.fromkeys(t for t in templates if t))
