"""Token-to-regex compiler: concrete template -> regex + field map.

TOKEN TABLE:

    Token  | Part      | Regex                         | Example
    -------|-----------|-------------------------------|---------
    %A     | weekday   | locale full weekday names     | Thursday
    %a     | weekday   | locale short weekday names    | Thu
    %d     | day       | (0[1-9]|[12]\\d|3[01])         | 07
    %e     | day       | (3[01]|[12]\\d|0?[1-9])        | 7
    %B     | month     | locale full month names       | May
    %b %h  | month     | locale short month names      | Jan
    %m     | month     | (1[0-2]|0?[1-9])              | 5, 05
    %Y     | year      | (\\d{4})                       | 2009
    %y     | year      | (\\d{2})                       | 09
    %H     | hour      | (2[0-4]|[01]?\\d)              | 20
    %I     | hour      | (1[0-2]|0?[1-9])              | 08
    %l     | hour      | (1[0-2]|[1-9])                | 8
    %M     | minute    | ([0-5]\\d)                     | 00
    %S     | second    | ([0-5]\\d)                     | 59
    %p %P  | meridiem  | (am|pm|a\\.m\\.|p\\.m\\.)          | PM
    %O     | ordinal   | (st|nd|rd|th)                 | 7th
    %z     | offset    | ([+-]\\d{2}:?\\d{2}|Z|UTC|GMT)  | +0200

Every fragment opens exactly one capture group (inner alternations are
non-capturing), except the full-month alternation when month aliases add
their own groups. A run of spaces becomes one capturing flexible-whitespace
group. One counter numbers all of them left to right.

Unknown %-tokens are emitted as escaped literal text; compilation never
fails on template content.

Compiled patterns are case-insensitive and memoized per
(template, word table, aliases).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType

from freeformdate.constants import MAX_PATTERN_CACHE_SIZE
from freeformdate.enums import ConversionKind, DatePart
from freeformdate.locale.words import LocaleWords
from freeformdate.patterns.fields import (
    DirectCapture,
    FieldMap,
    FieldRule,
    MonthAliases,
    NamedConversion,
)
from freeformdate.patterns.library import (
    PADDED_JOINER,
    SEPARATOR_MARKERS,
    SEPARATOR_REGEX,
    WHITESPACE_REGEX,
)

__all__ = [
    "HOUR_TOKEN_RE",
    "TOKEN_TABLE",
    "CompiledPattern",
    "TokenSpec",
    "compile_template",
]


@dataclass(frozen=True, slots=True)
class TokenSpec:
    """What one %-token matches and which date part it feeds.

    Attributes:
        part: Date part the capture contributes to
        regex: Fixed regex fragment; None for locale word tokens
        conversion: Locale word list for word tokens
    """

    part: DatePart
    regex: str | None = None
    conversion: ConversionKind | None = None


TOKEN_TABLE: MappingProxyType[str, TokenSpec] = MappingProxyType(
    {
        # Weekday
        "%A": TokenSpec(DatePart.WEEKDAY, conversion=ConversionKind.FULL_DAY_NAME),
        "%a": TokenSpec(DatePart.WEEKDAY, conversion=ConversionKind.SHORT_DAY_NAME),
        # Day of month
        "%d": TokenSpec(DatePart.DAY, r"(0[1-9]|[12]\d|3[01])"),
        "%e": TokenSpec(DatePart.DAY, r"(3[01]|[12]\d|0?[1-9])"),
        # Month
        "%B": TokenSpec(DatePart.MONTH, conversion=ConversionKind.FULL_MONTH_NAME),
        "%b": TokenSpec(DatePart.MONTH, conversion=ConversionKind.SHORT_MONTH_NAME),
        "%h": TokenSpec(DatePart.MONTH, conversion=ConversionKind.SHORT_MONTH_NAME),
        "%m": TokenSpec(DatePart.MONTH, r"(1[0-2]|0?[1-9])"),
        # Year
        "%Y": TokenSpec(DatePart.YEAR, r"(\d{4})"),
        "%y": TokenSpec(DatePart.YEAR, r"(\d{2})"),
        # Time
        "%H": TokenSpec(DatePart.HOUR, r"(2[0-4]|[01]?\d)"),
        "%I": TokenSpec(DatePart.HOUR, r"(1[0-2]|0?[1-9])"),
        "%l": TokenSpec(DatePart.HOUR, r"(1[0-2]|[1-9])"),
        "%M": TokenSpec(DatePart.MINUTE, r"([0-5]\d)"),
        "%S": TokenSpec(DatePart.SECOND, r"([0-5]\d)"),
        # am/pm
        "%p": TokenSpec(DatePart.MERIDIEM, r"(am|pm|a\.m\.|p\.m\.)"),
        "%P": TokenSpec(DatePart.MERIDIEM, r"(am|pm|a\.m\.|p\.m\.)"),
        # Ordinal suffix and UTC offset
        "%O": TokenSpec(DatePart.ORDINAL, r"(st|nd|rd|th)"),
        "%z": TokenSpec(DatePart.OFFSET, r"([+-]\d{2}:?\d{2}|Z|UTC|GMT)"),
    }
)

# Tokens that put an hour into the result; templates without one get the
# faked time of day.
HOUR_TOKEN_RE = re.compile(r"%[HIlrRTXcs]")


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Regex derived from one concrete template.

    Attributes:
        template: Concrete template the regex was built from
        regex: Compiled, case-insensitive regular expression
        field_map: Date part -> field rule
    """

    template: str
    regex: re.Pattern[str]
    field_map: FieldMap

    @property
    def has_time(self) -> bool:
        """True if the template carries an hour token."""
        return HOUR_TOKEN_RE.search(self.template) is not None


def _word_alternation(words: tuple[str, ...]) -> str:
    # Longest first so a name that prefixes another cannot cut it short
    ordered = sorted({w for w in words if w}, key=len, reverse=True)
    return "|".join(re.escape(word) for word in ordered)


def _word_fragment(
    kind: ConversionKind, words: LocaleWords, aliases: MonthAliases
) -> tuple[str, int]:
    """Regex fragment and group count for a locale word token."""
    alternation = _word_alternation(words.words_for(kind))
    if kind is ConversionKind.FULL_MONTH_NAME and aliases:
        alternation = "|".join((alternation, *aliases.names))
        return f"({alternation})", 1 + aliases.groups
    return f"({alternation})", 1


def _translate(
    template: str, words: LocaleWords, aliases: MonthAliases
) -> tuple[str, dict[DatePart, FieldRule]]:
    """Walk the template once, emitting regex text and recording field rules."""
    out: list[str] = []
    fields: dict[DatePart, FieldRule] = {}
    group = 0
    in_space = False
    i = 0
    n = len(template)

    while i < n:
        if template.startswith(PADDED_JOINER, i):
            out.append(SEPARATOR_REGEX[SEPARATOR_MARKERS[PADDED_JOINER]])
            in_space = False
            i += len(PADDED_JOINER)
            continue

        char = template[i]

        if char == " ":
            if not in_space:
                out.append(WHITESPACE_REGEX)
                group += 1
                in_space = True
            i += 1
            continue
        in_space = False

        if char == "%" and i + 1 < n:
            marker = template[i : i + 2]
            i += 2
            if marker in SEPARATOR_MARKERS:
                out.append(SEPARATOR_REGEX[SEPARATOR_MARKERS[marker]])
            elif marker == "%%":
                out.append("%")
            elif (spec := TOKEN_TABLE.get(marker)) is not None:
                if spec.conversion is not None:
                    fragment, width = _word_fragment(spec.conversion, words, aliases)
                    fields[spec.part] = NamedConversion(group + 1, spec.conversion)
                else:
                    fragment, width = spec.regex or "()", 1
                    fields[spec.part] = DirectCapture(group + 1)
                out.append(fragment)
                group += width
            else:
                out.append(re.escape(marker))
            continue

        if char in SEPARATOR_MARKERS:
            out.append(SEPARATOR_REGEX[SEPARATOR_MARKERS[char]])
        else:
            out.append(re.escape(char))
        i += 1

    return "".join(out), fields


@lru_cache(maxsize=MAX_PATTERN_CACHE_SIZE)
def compile_template(
    template: str, words: LocaleWords, aliases: MonthAliases = MonthAliases()
) -> CompiledPattern:
    """Compile a concrete template against a locale word table.

    Args:
        template: Concrete template (no further synonym expansion applied)
        words: Locale word table supplying month/weekday alternations
        aliases: Extra full-month spellings

    Returns:
        CompiledPattern with a case-insensitive regex and its field map

    Raises:
        re.error: Only if month alias fragments are not valid regex

    Example:
        >>> pattern = compile_template("%Y-%m-%d", load_babel_words("en"))
        >>> pattern.regex.match("2009-05-07").groups()
        ('2009', '05', '07')
        >>> pattern.field_map[DatePart.MONTH]
        DirectCapture(index=2)
    """
    source, fields = _translate(template, words, aliases)
    return CompiledPattern(
        template=template,
        regex=re.compile(source, re.IGNORECASE),
        field_map=MappingProxyType(fields),
    )
