"""Result assembler: turn resolved date parts into a UTC timestamp.

Missing parts are filled in before the timestamp is built:

    Part     Absent (or unusable)              Default
    -------  --------------------------------  ------------------------
    time     template has no hour token        ParserConfig.fake_time
    year     absent or negative                current year
    year     captured with one or two digits   pivot at 70 (mktime rules)
    month    absent                            current month
    day      absent                            current day
    second   absent                            0

Months are 1-based on every path. A 12-hour clock value with an am/pm
marker becomes 24-hour; hour 24 rolls over to midnight of the next day.
The wall-clock time is interpreted in the captured UTC offset if the
template had one, else in ParserConfig.tzinfo, else in the process local
zone.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta, timezone, tzinfo
from types import MappingProxyType

from freeformdate.config import ParserConfig
from freeformdate.constants import TWO_DIGIT_YEAR_PIVOT
from freeformdate.enums import DatePart, MethodUsed
from freeformdate.parsing.matcher import MatchOutcome
from freeformdate.patterns.fields import FieldMap

__all__ = [
    "ParseResult",
    "ResolvedDate",
    "build_result",
    "expand_year",
    "parse_utc_offset",
    "resolve_date",
]

_OFFSET_RE = re.compile(r"([+-])(\d{2}):?(\d{2})")
_UTC_NAMES = frozenset({"z", "utc", "gmt"})


@dataclass(frozen=True, slots=True)
class ResolvedDate:
    """Date parts after defaults, with the instant they denote.

    Attributes:
        fields: Final numeric value per date part (weekday only if captured)
        moment: Aware datetime in UTC
        time_faked: True if the time of day came from the fake time
    """

    fields: Mapping[DatePart, int]
    moment: datetime
    time_faked: bool


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of one parser call.

    Attributes:
        gmt: UTC timestamp as "YYYY-MM-DD HH:MM:SS"
        gmt_ts: UTC epoch seconds
        time_faked: True if the input carried no time of day
        raw_input: Input exactly as the caller passed it
        unparsed: Text the winning pattern did not consume ("" = full match)
        method_used: Search stage that produced the result
        pattern_used: Template (or regex source for regex hints) that won
        pattern_used_autoregex: True if the regex was derived from a template
        field_map: Date part -> field rule of the winning pattern
        captures: Raw captured text per date part
        parsed: Resolved numeric value per date part, defaults included
        tries: Candidate patterns attempted during the call
        locale_code: Locale whose word table was used
        regex: Source of the winning regular expression
    """

    gmt: str
    gmt_ts: int
    time_faked: bool
    raw_input: str
    unparsed: str
    method_used: MethodUsed
    pattern_used: str
    pattern_used_autoregex: bool
    field_map: FieldMap
    captures: Mapping[DatePart, str]
    parsed: Mapping[DatePart, int]
    tries: int
    locale_code: str
    regex: str

    @property
    def is_full_match(self) -> bool:
        """True when the whole input was consumed."""
        return self.unparsed == ""

    @property
    def utc(self) -> datetime:
        """The parsed instant as an aware UTC datetime."""
        return datetime.fromtimestamp(self.gmt_ts, UTC)


def expand_year(value: int, digits: int) -> int:
    """Apply the two-digit year pivot.

    Args:
        value: Captured year
        digits: Number of digits captured

    Returns:
        Four-digit year

    Example:
        >>> expand_year(9, 2)
        2009
        >>> expand_year(87, 2)
        1987
        >>> expand_year(87, 4)
        87
    """
    if digits > 2:
        return value
    return value + (2000 if value < TWO_DIGIT_YEAR_PIVOT else 1900)


def parse_utc_offset(text: str) -> timezone | None:
    """Convert a captured UTC offset ("+0200", "-05:30", "Z", "GMT").

    Returns:
        Fixed-offset timezone, or None if the text is not a usable offset
    """
    text = text.strip()
    if text.casefold() in _UTC_NAMES:
        return UTC
    found = _OFFSET_RE.fullmatch(text)
    if found is None:
        return None
    sign, hours, minutes = found.groups()
    if int(hours) > 23 or int(minutes) > 59:
        return None
    delta = timedelta(hours=int(hours), minutes=int(minutes))
    return timezone(-delta if sign == "-" else delta)


def _to_24_hour(hour: int, meridiem: str) -> int:
    is_pm = meridiem.casefold().startswith("p")
    if hour == 12:
        return 12 if is_pm else 0
    return hour + 12 if is_pm else hour


def resolve_date(
    outcome: MatchOutcome,
    *,
    has_time: bool,
    config: ParserConfig,
    today: date,
) -> ResolvedDate | None:
    """Fill in defaults and build the instant a match denotes.

    Args:
        outcome: Matcher result
        has_time: Whether the winning pattern carries an hour
        config: Parser configuration (fake time, zone)
        today: Current date in the parsing zone, source of defaults

    Returns:
        ResolvedDate, or None if the parts do not form a real date
        (30 February, year 0, unusable UTC offset)
    """
    fields = outcome.fields
    captures = outcome.captures

    year = fields.get(DatePart.YEAR)
    if year is None or year < 0:
        year = today.year
    else:
        year = expand_year(year, len(captures[DatePart.YEAR].strip()))
    month = fields.get(DatePart.MONTH, today.month)
    day = fields.get(DatePart.DAY, today.day)

    if has_time:
        hour = fields.get(DatePart.HOUR, 0)
        minute = fields.get(DatePart.MINUTE, 0)
        second = fields.get(DatePart.SECOND, 0)
        if (meridiem := captures.get(DatePart.MERIDIEM)) is not None:
            hour = _to_24_hour(hour, meridiem)
    else:
        hour, minute, second = config.fake_time

    zone: tzinfo | None = config.tzinfo
    if (offset := captures.get(DatePart.OFFSET)) is not None:
        zone = parse_utc_offset(offset)
        if zone is None:
            return None

    rollover = hour == 24
    try:
        wall = datetime(year, month, day, 0 if rollover else hour, minute, second)
        if rollover:
            wall += timedelta(days=1)
        local = wall.astimezone() if zone is None else wall.replace(tzinfo=zone)
        moment = local.astimezone(UTC)
    except (ValueError, OverflowError, OSError):
        return None

    resolved = {
        DatePart.YEAR: year,
        DatePart.MONTH: month,
        DatePart.DAY: day,
        DatePart.HOUR: hour,
        DatePart.MINUTE: minute,
        DatePart.SECOND: second,
    }
    if DatePart.WEEKDAY in fields:
        resolved[DatePart.WEEKDAY] = fields[DatePart.WEEKDAY]
    return ResolvedDate(
        fields=MappingProxyType(resolved),
        moment=moment,
        time_faked=not has_time,
    )


def build_result(
    raw_input: str,
    outcome: MatchOutcome,
    resolved: ResolvedDate,
    *,
    method_used: MethodUsed,
    pattern_used: str,
    autoregex: bool,
    field_map: FieldMap,
    regex: str,
    tries: int,
    locale_code: str,
) -> ParseResult:
    """Assemble the ParseResult for the winning candidate."""
    return ParseResult(
        gmt=resolved.moment.replace(tzinfo=None).isoformat(sep=" ", timespec="seconds"),
        gmt_ts=int(resolved.moment.timestamp()),
        time_faked=resolved.time_faked,
        raw_input=raw_input,
        unparsed=outcome.unparsed,
        method_used=method_used,
        pattern_used=pattern_used,
        pattern_used_autoregex=autoregex,
        field_map=field_map,
        captures=outcome.captures,
        parsed=resolved.fields,
        tries=tries,
        locale_code=locale_code,
        regex=regex,
    )
