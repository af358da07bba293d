"""Tests for the template library and separator markers.

Python 3.13+.
"""

import re

from freeformdate.enums import Separator
from freeformdate.parsing import RecentPatternSlot, library_candidate_count
from freeformdate.patterns import (
    DATE_TEMPLATES,
    DELEGATED_TEMPLATES,
    LOCALE_DATE,
    LOCALE_STAMP,
    SynonymExpansion,
    sweep_templates,
)
from freeformdate.patterns.library import SEPARATOR_MARKERS, SEPARATOR_REGEX, WHITESPACE_REGEX


class TestDateTemplates:
    """Test library contents and order."""

    def test_delegated_entries_first(self) -> None:
        """The locale stamp leads; the locale date follows RFC 2822."""
        assert DATE_TEMPLATES[0] == LOCALE_STAMP
        assert DATE_TEMPLATES[2] == LOCALE_DATE
        assert DELEGATED_TEMPLATES == {LOCALE_STAMP, LOCALE_DATE}

    def test_no_duplicates(self) -> None:
        """Each template appears once."""
        assert len(set(DATE_TEMPLATES)) == len(DATE_TEMPLATES)

    def test_iso_before_generic(self) -> None:
        """ISO dates are tried before the day-first and US forms."""
        iso = DATE_TEMPLATES.index("%Y-%m-%d")
        assert iso < DATE_TEMPLATES.index("%d%5 %m%5 %Y")
        assert iso < DATE_TEMPLATES.index("%m/%d/%Y")

    def test_sweep_skips_delegated(self) -> None:
        """The default sweep leaves out %c and %x."""
        templates = sweep_templates()
        assert LOCALE_STAMP not in templates
        assert LOCALE_DATE not in templates
        assert len(templates) == len(DATE_TEMPLATES) - 2

    def test_sweep_with_delegated(self) -> None:
        """With locale formats the sweep is the whole library."""
        assert sweep_templates(include_delegated=True) == DATE_TEMPLATES

    def test_candidate_count(self) -> None:
        """library_candidate_count sums the expansions of the sweep."""
        assert library_candidate_count() == sum(
            len(SynonymExpansion(template)) for template in sweep_templates()
        )
        assert library_candidate_count() > len(sweep_templates())


class TestSeparators:
    """Test separator markers and their regex fragments."""

    def test_every_kind_has_a_regex(self) -> None:
        """Each marker kind maps to a regex fragment."""
        assert set(SEPARATOR_MARKERS.values()) == set(Separator)
        assert set(SEPARATOR_REGEX) == set(Separator)

    def test_fragments_open_no_groups(self) -> None:
        """Separators never shift capture group numbering."""
        for fragment in SEPARATOR_REGEX.values():
            assert re.compile(fragment).groups == 0

    def test_whitespace_is_one_group(self) -> None:
        """Flexible whitespace takes exactly one group index."""
        assert re.compile(WHITESPACE_REGEX).groups == 1


class TestRecentPatternSlot:
    """Test the one-slot recent-pattern cache."""

    def test_empty_by_default(self) -> None:
        """A new slot holds nothing."""
        assert RecentPatternSlot().get() is None

    def test_set_overwrites(self) -> None:
        """Each set replaces the previous template."""
        slot = RecentPatternSlot("%Y")
        slot.set("%Y-%m-%d")
        assert slot.get() == "%Y-%m-%d"

    def test_clear(self) -> None:
        """clear() empties the slot."""
        slot = RecentPatternSlot("%Y")
        slot.clear()
        assert slot.get() is None
