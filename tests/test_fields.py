"""Tests for field rules and caller field map normalization.

Python 3.13+.
"""

import pytest

from freeformdate.enums import ConversionKind, DatePart
from freeformdate.patterns import (
    DirectCapture,
    LookupTable,
    NamedConversion,
    as_field_map,
    as_field_rule,
    find_word,
)


class TestAsFieldRule:
    """Test field rule normalization."""

    def test_int_becomes_direct_capture(self) -> None:
        """Plain integers mean DirectCapture."""
        assert as_field_rule(3) == DirectCapture(3)

    @pytest.mark.parametrize(
        "rule",
        [
            DirectCapture(1),
            LookupTable(2, ("a", "b")),
            NamedConversion(3, ConversionKind.SHORT_DAY_NAME),
        ],
    )
    def test_rules_pass_through(self, rule: DirectCapture | LookupTable | NamedConversion) -> None:
        """Field rules are returned unchanged."""
        assert as_field_rule(rule) is rule

    def test_bool_rejected(self) -> None:
        """bool is not accepted as a group index."""
        with pytest.raises(TypeError, match="bool"):
            as_field_rule(True)

    def test_other_types_rejected(self) -> None:
        """Strings and other objects are rejected."""
        with pytest.raises(TypeError, match="got str"):
            as_field_rule("1")  # type: ignore[arg-type]


class TestAsFieldMap:
    """Test caller field map normalization."""

    def test_string_keys(self) -> None:
        """DatePart values are accepted as keys."""
        field_map = as_field_map({"year": 1, "month": 2, DatePart.DAY: 3})
        assert dict(field_map) == {
            DatePart.YEAR: DirectCapture(1),
            DatePart.MONTH: DirectCapture(2),
            DatePart.DAY: DirectCapture(3),
        }

    def test_unknown_key_rejected(self) -> None:
        """Keys must name a date part."""
        with pytest.raises(ValueError, match="fortnight"):
            as_field_map({"fortnight": 1})

    def test_result_read_only(self) -> None:
        """The normalized map cannot be mutated."""
        field_map = as_field_map({"year": 1})
        with pytest.raises(TypeError):
            field_map[DatePart.DAY] = DirectCapture(2)  # type: ignore[index]


class TestFindWord:
    """Test case-insensitive word lookup."""

    def test_exact_match(self) -> None:
        """Exact matches resolve to their position."""
        assert find_word("MAY", ("April", "May")) == 1

    def test_exact_beats_substring(self) -> None:
        """An exact entry wins over an earlier entry containing the text."""
        assert find_word("may", ("mayday", "may")) == 1

    def test_substring(self) -> None:
        """Abbreviations resolve through the entry containing them."""
        assert find_word("Sept", ("August", "September")) == 1

    def test_alias_positions_follow_words(self) -> None:
        """Alias positions continue after the word list."""
        assert find_word("svibnja", ("a", "b"), ("x", "svibnj(a)?")) == 3

    def test_blank_capture(self) -> None:
        """Whitespace-only captures resolve to nothing."""
        assert find_word("  ", ("a",)) is None

    def test_no_match(self) -> None:
        """Unknown words give None."""
        assert find_word("foo", ("bar",)) is None
