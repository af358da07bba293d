"""Matcher: apply one compiled pattern to the input and score the result.

A match is scored by its leftover, the input with the first (leftmost)
match removed. An empty leftover is a full match. A non-empty leftover is
still a usable partial result; the search keeps the one with the shortest
leftover.

Candidates whose captures are out of range (month 13, minute 61, a word
that is in no locale list) are rejected and reported the same way as a
regex that does not match at all.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from freeformdate.enums import ConversionKind, DatePart
from freeformdate.locale.words import LocaleWords
from freeformdate.patterns.fields import (
    DirectCapture,
    FieldMap,
    FieldRule,
    LookupTable,
    MonthAliases,
    NamedConversion,
    find_word,
)

__all__ = [
    "FIELD_RANGES",
    "TEXT_PARTS",
    "MatchOutcome",
    "match_pattern",
]

logger = logging.getLogger(__name__)

# Inclusive bounds for numeric date parts. Year has none; the assembler
# handles negative and two-digit years.
FIELD_RANGES: Mapping[DatePart, tuple[int, int]] = MappingProxyType(
    {
        DatePart.WEEKDAY: (0, 6),
        DatePart.DAY: (1, 31),
        DatePart.MONTH: (1, 12),
        DatePart.HOUR: (0, 24),
        DatePart.MINUTE: (0, 59),
        DatePart.SECOND: (0, 59),
    }
)

# Parts kept as text; everything else resolves to an int.
TEXT_PARTS: frozenset[DatePart] = frozenset(
    {DatePart.MERIDIEM, DatePart.ORDINAL, DatePart.OFFSET}
)


@dataclass(frozen=True, slots=True)
class MatchOutcome:
    """Result of applying one pattern to the input.

    Attributes:
        fields: Resolved numeric value per date part
        captures: Raw captured text per date part
        unparsed: Input with the matched span removed
    """

    fields: Mapping[DatePart, int]
    captures: Mapping[DatePart, str]
    unparsed: str

    @property
    def is_full(self) -> bool:
        """True when the pattern consumed the whole input."""
        return self.unparsed == ""


def _resolve(
    part: DatePart,
    rule: FieldRule,
    captured: str,
    words: LocaleWords,
    aliases: MonthAliases,
) -> int | None:
    """Numeric value of one capture, or None if it cannot be resolved."""
    match rule:
        case DirectCapture():
            try:
                return int(captured.strip())
            except ValueError:
                return None
        case LookupTable(words=table, start=start):
            position = find_word(captured, table)
            return None if position is None else start + position
        case NamedConversion(kind=kind):
            names = words.words_for(kind)
            if kind is ConversionKind.FULL_MONTH_NAME:
                position = find_word(captured, names, aliases.names)
            else:
                position = find_word(captured, names)
            if position is None:
                return None
            if part is DatePart.WEEKDAY:
                return position
            # Alias positions continue after the twelve names
            return position % 12 + 1


def _in_range(fields: Mapping[DatePart, int], captures: Mapping[DatePart, str]) -> bool:
    for part, (low, high) in FIELD_RANGES.items():
        value = fields.get(part)
        if value is not None and not low <= value <= high:
            return False
    # 12-hour clock
    hour = fields.get(DatePart.HOUR)
    if DatePart.MERIDIEM in captures and hour is not None:
        return 1 <= hour <= 12
    return True


def match_pattern(
    text: str,
    regex: re.Pattern[str],
    field_map: FieldMap,
    words: LocaleWords,
    aliases: MonthAliases = MonthAliases(),
) -> MatchOutcome | None:
    """Apply a pattern to the input and resolve its field map.

    Args:
        text: Input text
        regex: Compiled pattern
        field_map: Date part -> field rule for the pattern's groups
        words: Locale word table for NamedConversion rules
        aliases: Extra full-month spellings

    Returns:
        MatchOutcome, or None if the pattern does not match or a capture
        is out of range

    Example:
        >>> words = load_babel_words("en")
        >>> pattern = compile_template("%m/%d/%Y", words)
        >>> outcome = match_pattern("05/21/2009 xyz", pattern.regex, pattern.field_map, words)
        >>> outcome.fields[DatePart.DAY], outcome.unparsed
        (21, ' xyz')
    """
    found = regex.search(text)
    if found is None:
        return None

    fields: dict[DatePart, int] = {}
    captures: dict[DatePart, str] = {}
    for part, rule in field_map.items():
        captured = found.group(rule.index)
        # Optional group that did not take part in the match
        if not captured:
            continue
        captures[part] = captured
        if part in TEXT_PARTS:
            continue
        value = _resolve(part, rule, captured, words, aliases)
        if value is None:
            logger.debug("Rejected %r: cannot resolve %s from %r", regex.pattern, part, captured)
            return None
        fields[part] = value

    if not _in_range(fields, captures):
        logger.debug("Rejected %r: capture out of range %s", regex.pattern, fields)
        return None

    return MatchOutcome(
        fields=MappingProxyType(fields),
        captures=MappingProxyType(captures),
        unparsed=text[: found.start()] + text[found.end() :],
    )
