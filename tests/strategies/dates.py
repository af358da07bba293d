"""Hypothesis strategies for dates rendered the way web pages write them.

Each rendering is known to be read back unambiguously by the template
library: day-first numeric forms use a day/month order the library tries
before the US order, and month names come from the same CLDR tables the
parser loads.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from freeformdate.locale import LocaleWords, load_babel_words


@dataclass(frozen=True, slots=True)
class Rendered:
    """A date/time value and one textual rendering of it."""

    text: str
    locale: str
    value: datetime
    has_time: bool


def _iso_date(v: datetime, _w: LocaleWords) -> str:
    return f"{v.year:04d}-{v.month:02d}-{v.day:02d}"


def _iso_minutes(v: datetime, _w: LocaleWords) -> str:
    return f"{v.year:04d}-{v.month:02d}-{v.day:02d} {v.hour:02d}:{v.minute:02d}"


def _month_name(v: datetime, w: LocaleWords) -> str:
    return f"{w.months[v.month - 1]} {v.day}, {v.year}"


def _weekday_at(v: datetime, w: LocaleWords) -> str:
    weekday = w.days[(v.weekday() + 1) % 7]
    return f"{weekday}, {w.months[v.month - 1]} {v.day}, {v.year} at {v.hour:02d}:{v.minute:02d}"


def _dotted(v: datetime, _w: LocaleWords) -> str:
    return f"{v.day:02d}.{v.month:02d}.{v.year:04d}"


def _day_month_name(v: datetime, w: LocaleWords) -> str:
    return f"{v.day}. {w.months[v.month - 1]} {v.year}"


# name -> (locale, render, carries a time)
RENDERINGS: dict[str, tuple[str, Callable[[datetime, LocaleWords], str], bool]] = {
    "iso_date": ("en", _iso_date, False),
    "iso_minutes": ("en", _iso_minutes, True),
    "month_name": ("en", _month_name, False),
    "weekday_at": ("en", _weekday_at, True),
    "dotted": ("en", _dotted, False),
    "day_month_name_de": ("de", _day_month_name, False),
    "day_month_name_hr": ("hr", _day_month_name, False),
}

reasonable_datetimes = st.datetimes(
    min_value=datetime(1970, 1, 1),
    max_value=datetime(2037, 12, 31, 23, 59, 59),
).map(lambda v: v.replace(second=0, microsecond=0, tzinfo=UTC))


@composite
def rendered_dates(draw: st.DrawFn) -> Rendered:
    """Generate a datetime rendered in one of RENDERINGS.

    Events emitted:
    - rendering={name}
    """
    name = draw(st.sampled_from(sorted(RENDERINGS)))
    event(f"rendering={name}")
    locale, render, has_time = RENDERINGS[name]
    value = draw(reasonable_datetimes)
    return Rendered(
        text=render(value, load_babel_words(locale)),
        locale=locale,
        value=value,
        has_time=has_time,
    )


@composite
def date_by_boundary(draw: st.DrawFn) -> date:
    """Generate a date with event emission for boundary category.

    Events emitted:
    - date_boundary={month_end|year_end|leap_feb|normal}
    """
    boundary = draw(st.sampled_from(["month_end", "year_end", "leap_feb", "normal"]))
    event(f"date_boundary={boundary}")

    match boundary:
        case "month_end":
            year = draw(st.integers(min_value=1970, max_value=2037))
            month = draw(st.integers(min_value=1, max_value=12))
            following = date(year + month // 12, month % 12 + 1, 1)
            return date.fromordinal(following.toordinal() - 1)
        case "year_end":
            return date(draw(st.integers(min_value=1970, max_value=2037)), 12, 31)
        case "leap_feb":
            return date(draw(st.sampled_from([2000, 2004, 2008, 2012, 2016, 2020])), 2, 29)
        case _:
            return draw(st.dates(min_value=date(1970, 1, 1), max_value=date(2037, 12, 31)))
