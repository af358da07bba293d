"""Free-form date parsing: matcher, result assembler and search engine.

- parse_freeform() NEVER raises - errors are returned in tuple
- DateParser.run() returns ParseResult | None
- Partial matches are results (non-empty ``unparsed``), not errors

Public API:
    Engine:
        DateParser - Search plan over hints, recent pattern and library
        RecentPatternSlot - One-slot cache of the last winning template
        RegexHint, TemplateHint - Caller-supplied patterns
        parse_freeform - Returns tuple[ParseResult | None, tuple[DateParseError, ...]]

    Results:
        ParseResult - Normalized UTC timestamp plus match metadata
        MatchOutcome - Fields and leftover of a single pattern match

    Type Guards:
        is_parse_result - TypeIs guard for ParseResult (not None)
        is_full_match - TypeIs guard for ParseResult with nothing left over

Example:
    >>> from freeformdate.parsing import parse_freeform, is_full_match
    >>> result, errors = parse_freeform("Thursday, May 7, 2009 on 20:00", "en_US")
    >>> if is_full_match(result):
    ...     stamp = result.gmt_ts

Python 3.13+. Uses Babel CLDR data for locale word tables.
"""

from .assembler import ParseResult, ResolvedDate, build_result, resolve_date
from .guards import is_full_match, is_parse_result
from .matcher import MatchOutcome, match_pattern
from .parser import (
    DateParser,
    Hint,
    LocaleSelector,
    RecentPatternSlot,
    RegexHint,
    TemplateHint,
    library_candidate_count,
    parse_freeform,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Engine
    "DateParser",
    "Hint",
    "LocaleSelector",
    "RecentPatternSlot",
    "RegexHint",
    "TemplateHint",
    "library_candidate_count",
    "parse_freeform",
    # Results
    "MatchOutcome",
    "ParseResult",
    "ResolvedDate",
    "build_result",
    "match_pattern",
    "resolve_date",
    # Type guards
    "is_full_match",
    "is_parse_result",
]
