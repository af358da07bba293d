"""Property-based tests for DateParser.

Renders generated datetimes the way web pages write them and checks that
the parser reads them back. The fuzz-marked tests throw arbitrary text at
the full library sweep.

Python 3.13+.
"""

from datetime import UTC, date

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from freeformdate import DateParser, ParserConfig, parse_freeform
from freeformdate.locale import LocaleWordCache
from freeformdate.parsing import RecentPatternSlot
from tests.helpers.clock import fixed_clock
from tests.strategies import Rendered, date_by_boundary, rendered_dates

_CONFIG = ParserConfig(tzinfo=UTC)
_WORDS = LocaleWordCache()


def _fresh_parser() -> DateParser:
    # Shared word tables; a private slot so examples cannot replay each other
    return DateParser(_CONFIG, word_cache=_WORDS, recent=RecentPatternSlot(), clock=fixed_clock)


class TestRoundTrip:
    """Rendered dates parse back to the value they came from."""

    @given(rendered=rendered_dates())
    @settings(deadline=None)
    def test_rendering_round_trip(self, rendered: Rendered) -> None:
        """Every supported rendering is a full match with the original value."""
        result = _fresh_parser().run(rendered.text, locale=rendered.locale)
        assert result is not None, rendered.text
        assert result.is_full_match, (rendered.text, result.unparsed)
        if rendered.has_time:
            event("outcome=exact_time")
            assert result.utc == rendered.value
            assert not result.time_faked
        else:
            event("outcome=faked_time")
            assert result.utc.date() == rendered.value.date()
            assert result.time_faked

    @given(rendered=rendered_dates())
    @settings(deadline=None)
    def test_recent_pattern_round_trip(self, rendered: Rendered) -> None:
        """Replaying the winning template gives the same instant."""
        parser = _fresh_parser()
        first = parser.run(rendered.text, locale=rendered.locale)
        second = parser.run(rendered.text, locale=rendered.locale)
        assert first is not None
        assert second is not None
        assert second.gmt_ts == first.gmt_ts
        assert second.tries <= first.tries

    @given(day=date_by_boundary())
    @settings(deadline=None)
    def test_iso_boundary_dates(self, day: date) -> None:
        """Month ends, year ends and leap days survive the calendar check."""
        result = _fresh_parser().run(day.isoformat())
        assert result is not None
        assert result.utc.date() == day
        assert result.pattern_used == "%Y-%m-%d"


class TestNeverRaises:
    """Arbitrary text never escapes the functional API as an exception."""

    @pytest.mark.fuzz
    @given(text=st.text(max_size=40))
    @settings(deadline=None)
    def test_parse_freeform_arbitrary_text(self, text: str) -> None:
        """parse_freeform returns a (result, errors) pair for any string."""
        result, errors = parse_freeform(text, parser=_fresh_parser())
        event(f"outcome={'none' if result is None else 'result'}")
        assert isinstance(errors, tuple)
        if result is not None:
            assert len(result.unparsed) < len(text.strip())
            assert result.raw_input == text

    @pytest.mark.fuzz
    @given(
        text=st.from_regex(r"[0-9 ./:,-]{1,24}", fullmatch=True),
        locale=st.sampled_from(["en", "de", "hr", "fr", "xx"]),
    )
    @settings(deadline=None)
    def test_numeric_noise(self, text: str, locale: str) -> None:
        """Digit and separator soup resolves to a real instant or nothing."""
        result, _ = parse_freeform(text, locale, parser=_fresh_parser())
        if result is not None:
            event("outcome=result")
            assert result.utc.year >= 1
            assert 0 <= result.parsed["hour"] <= 24
