"""Template library: the ordered list of date-format templates.

Templates use an extended strftime syntax. Besides the usual %-tokens
(%A %a %d %e %B %b %h %m %Y %y %H %I %l %M %S %p %P, plus %O for ordinal
suffixes and %z for UTC offsets) they contain separator markers:

    Marker        Meaning                          Regex
    ------------  -------------------------------  -----------------
    .  or  %1     date separator                   [.,/-]
    :  or  %2     time separator                   [.:-]
    ,  or  %3     day-name separator               [,.]?
    %4            date/time joiner ("on", "at")    .{0,2}
    " %4 "        joiner with whitespace padding   \\s*.{0,2}\\s*
    %5            optional date separator          [.,/-]?

Order matters: most reliable / standard formats first, most generic last.
The sweep stops at the first template that consumes the whole input, so a
generic template placed too early would shadow specific ones.

The first three entries are special. %c and %x stand for the locale's
preferred stamp and date; they are delegated to CLDR data and skipped by
the regex sweep unless ParserConfig.locale_formats is set. The RFC 2822
entry is a plain template matched like any other.
"""

from __future__ import annotations

from types import MappingProxyType

from freeformdate.enums import Separator

__all__ = [
    "DATE_TEMPLATES",
    "DELEGATED_TEMPLATES",
    "LOCALE_DATE",
    "LOCALE_STAMP",
    "PADDED_JOINER",
    "SEPARATOR_MARKERS",
    "SEPARATOR_REGEX",
    "WHITESPACE_REGEX",
    "sweep_templates",
]

LOCALE_STAMP = "%c"
LOCALE_DATE = "%x"

# ruff: noqa: ERA001 - Example inputs are documentation, not commented-out code
DATE_TEMPLATES: tuple[str, ...] = (
    LOCALE_STAMP,                       # locale preferred date and time stamp
    "%a. %d %b %Y %H:%M:%S %z",         # RFC 2822: Thu, 07 May 2009 20:00:00 +0000
    LOCALE_DATE,                        # locale preferred date
    "%A, %m %d%3 %Y%5 %4 %H:%M",        # Thursday, May 7, 2009 on 20:00
    "%A, %m %d%3 %Y%5",                 # Thursday, May 7, 2009
    "%Y-%m-%d",                         # 2009-05-07
    "%Y-%m-%d %H:%M",                   # 2009-05-07 20:00
    "%m %d%3 %Y%5 %4 %H:%M",            # May 7, 2009 on 20:00
    "%m %d%3 %Y%5",                     # May 7, 2009
    "%d. %m%5 %Y%5 %4 %H:%M",           # 7. may 2009. 20:00
    "%d.%m.%Y. %H:%Mh",                 # 7.5.2009. 20:00h
    "%A, %m %d, %Y %4 %H:%M",           # Saturday, May 7, 2016 at 19:00
    "%A, %d. %m%5 %4 %H:%M",            # Saturday, 7. may on 19:00
    "%A, %d. %m%5 %Y",                  # Saturday, 7. may 2009.
    "%A, %d. %4 %H:%M",                 # Saturday, 7. on 19:00
    "%d%5 %m%5 %Y",                     # 7. may 2009
    "%d%5 %m%5 %4 %H:%M",               # 7. may on 19:00
    "%d%5 %m%5 %4 %Hh",                 # 7. may on 19h
    "%d%5 %4 %H:%M",                    # 7. on 19:00
    "%d%5 %H:%M",                       # 7. 19:00
    "%d%5 %m%5 %Hh",                    # 7. may 19h
    "%d%5 %4 %Hh",                      # 7. on 19h
    "%d%5 %Hh",                         # 7. 19h
    "%A, %d. %m",                       # Saturday, 7. may
    "%d%5 %m%5",                        # 7. may
    "%A, %d%5",                         # Saturday, 7.
    "%m-%d-%Y",                         # 05-21-2009
    "%m/%d/%Y",                         # 05/21/2009
    "%d.%m.%Y. %Hh",                    # 01.12.2009. 19h
    "%m. %d.",                          # may 7.
    "%m/%d",                            # 05/21
)

DELEGATED_TEMPLATES: frozenset[str] = frozenset({LOCALE_STAMP, LOCALE_DATE})

# Marker spelling -> separator kind. " %4 " is matched before the plain
# space rule so the padding does not turn into whitespace groups.
PADDED_JOINER = " %4 "
SEPARATOR_MARKERS: MappingProxyType[str, Separator] = MappingProxyType(
    {
        ".": Separator.DATE,
        "%1": Separator.DATE,
        ":": Separator.TIME,
        "%2": Separator.TIME,
        ",": Separator.DAY,
        "%3": Separator.DAY,
        "%4": Separator.JOINER,
        PADDED_JOINER: Separator.PADDED_JOINER,
        "%5": Separator.OPTIONAL_DATE,
    }
)

SEPARATOR_REGEX: MappingProxyType[Separator, str] = MappingProxyType(
    {
        Separator.DATE: r"[.,/-]",
        Separator.TIME: r"[.:-]",
        Separator.DAY: r"[,.]?",
        Separator.JOINER: r".{0,2}",
        Separator.PADDED_JOINER: r"\s*.{0,2}\s*",
        Separator.OPTIONAL_DATE: r"[.,/-]?",
    }
)

# Flexible whitespace: plain whitespace (incl. U+00A0) and the HTML
# spellings of a non-breaking space that survive scraping. Capturing, so
# it takes one group index.
WHITESPACE_REGEX = r"(\s|&nbsp;|&#160;|&#x00A0;)*"


def sweep_templates(*, include_delegated: bool = False) -> tuple[str, ...]:
    """Templates visited by the library sweep, in priority order.

    Args:
        include_delegated: Keep the %c/%x entries (locale formats enabled)

    Returns:
        Ordered tuple of templates
    """
    if include_delegated:
        return DATE_TEMPLATES
    return tuple(t for t in DATE_TEMPLATES if t not in DELEGATED_TEMPLATES)
