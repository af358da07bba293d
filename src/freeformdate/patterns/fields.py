"""Field rules: how a capture group becomes a date-part value.

A compiled pattern carries a field map from DatePart to one of three rule
shapes, a closed variant resolved with structural pattern matching:

    DirectCapture(index)            numeric text in group ``index``
    LookupTable(index, words)       position of the captured word in ``words``
    NamedConversion(index, kind)    position in the locale word list ``kind``

Callers writing their own regex hints usually pass plain integers, which
as_field_rule() turns into DirectCapture.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from freeformdate.enums import ConversionKind, DatePart

__all__ = [
    "DirectCapture",
    "FieldMap",
    "FieldRule",
    "LookupTable",
    "MonthAliases",
    "NamedConversion",
    "as_field_map",
    "as_field_rule",
    "find_word",
]


@dataclass(frozen=True, slots=True)
class DirectCapture:
    """Numeric value read straight from capture group ``index``."""

    index: int


@dataclass(frozen=True, slots=True)
class LookupTable:
    """Captured word looked up in a caller-supplied list.

    Attributes:
        index: Capture group holding the word
        words: Candidate words; the match position gives the value
        start: Value of the first entry (1 for months, 0 for weekdays)
    """

    index: int
    words: tuple[str, ...]
    start: int = 1


@dataclass(frozen=True, slots=True)
class NamedConversion:
    """Captured word looked up in the active locale's word table."""

    index: int
    kind: ConversionKind


type FieldRule = DirectCapture | LookupTable | NamedConversion
type FieldMap = Mapping[DatePart, FieldRule]


@dataclass(frozen=True, slots=True)
class MonthAliases:
    """Alternate full month spellings (genitive forms, old spellings, ...).

    Names are regex fragments appended to the full-month alternation, so
    they may contain groups; ``groups`` is how many capture groups the
    joined fragments add. Alias at position ``i`` means month ``i % 12 + 1``.
    """

    names: tuple[str, ...] = ()
    groups: int = 0

    def __post_init__(self) -> None:
        """Validate the fragments and the group count.

        Raises:
            ValueError: If a fragment is not valid regex, or groups is negative
                or differs from the groups the fragments actually open
        """
        if self.groups < 0:
            msg = "MonthAliases.groups must be >= 0"
            raise ValueError(msg)
        try:
            opened = re.compile("|".join(self.names)).groups if self.names else 0
        except re.error as e:
            msg = f"month alias is not a valid regex fragment: {e}"
            raise ValueError(msg) from e
        if opened != self.groups:
            msg = f"month aliases open {opened} groups, {self.groups} declared"
            raise ValueError(msg)

    def __bool__(self) -> bool:
        return bool(self.names)


def as_field_rule(value: FieldRule | int) -> FieldRule:
    """Normalize a field map value; plain ints become DirectCapture.

    Raises:
        TypeError: If value is neither an int nor a FieldRule
    """
    match value:
        case DirectCapture() | LookupTable() | NamedConversion():
            return value
        case bool():
            msg = "field rule cannot be a bool"
            raise TypeError(msg)
        case int():
            return DirectCapture(value)
        case _:
            msg = f"field rule must be int or FieldRule, got {type(value).__name__}"
            raise TypeError(msg)


def as_field_map(mapping: Mapping[DatePart | str, FieldRule | int]) -> FieldMap:
    """Normalize a caller field map: string keys to DatePart, ints to DirectCapture.

    Raises:
        ValueError: If a key is not a DatePart name
        TypeError: If a value is not an int or FieldRule
    """
    return MappingProxyType(
        {DatePart(key): as_field_rule(rule) for key, rule in mapping.items()}
    )


def find_word(
    captured: str, words: tuple[str, ...], aliases: tuple[str, ...] = ()
) -> int | None:
    """Position of a captured word in a word list, case-insensitively.

    Exact matches win; otherwise the first entry containing the captured
    text is used, so "Sept" still finds "September". Alias entries are
    regex fragments and match when the captured text fully matches them.
    Alias positions continue after ``words``.

    Args:
        captured: Text from the capture group
        words: Primary word list (locale names)
        aliases: Additional regex fragments

    Returns:
        0-based position, or None when nothing matches
    """
    needle = captured.casefold().strip()
    if not needle:
        return None
    folded = [word.casefold() for word in words]
    for position, word in enumerate(folded):
        if word == needle:
            return position
    for position, word in enumerate(folded):
        if needle in word:
            return position
    for offset, alias in enumerate(aliases):
        if re.fullmatch(alias, captured.strip(), re.IGNORECASE):
            return len(words) + offset
    return None
