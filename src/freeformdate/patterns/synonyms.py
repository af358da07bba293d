"""Date-part synonym table.

Each logical date part maps to the token spellings treated as equivalent
when expanding a template. A template written with %m also tries %B, %h and
%b; one written with %H also tries the 12-hour forms.

Order within a group IS important: more specific tokens come first (%Y
before %y, %d%O before %d) so the first concrete template to match is the
most precise reading. Group registration order (dict order) fixes the digit
order of the expansion index; see SynonymExpansion.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType

from freeformdate.enums import DatePart

__all__ = ["DATEPART_SYNONYMS", "SynonymTable", "synonym_regex"]

type SynonymTable = Mapping[DatePart, tuple[str, ...]]

DATEPART_SYNONYMS: SynonymTable = MappingProxyType(
    {
        DatePart.WEEKDAY: ("%A", "%a"),
        DatePart.DAY: ("%d%O", "%e%O", "%d", "%e"),
        DatePart.MONTH: ("%B", "%h", "%b", "%m"),
        DatePart.YEAR: ("%Y", "%y"),
        DatePart.HOUR: ("%I %p", "%I %P", "%l %p", "%l %P", "%H"),
        DatePart.MINUTE: ("%M %p", "%M %P", "%M"),
        DatePart.SECOND: ("%S",),
    }
)


@lru_cache(maxsize=256)
def synonym_regex(tokens: tuple[str, ...]) -> re.Pattern[str]:
    """Regex matching any spelling of one synonym group inside a template.

    Longer spellings are tried first so "%d%O" is replaced as a unit
    rather than leaving a stray "%O" behind.
    """
    ordered = sorted(tokens, key=len, reverse=True)
    return re.compile("|".join(re.escape(token) for token in ordered))
