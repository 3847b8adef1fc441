"""Tests for split_by."""

from __future__ import annotations

import pytest

from array_utils.exceptions import ArrayUtilsError, RangeError
from array_utils.tokenize.splitter import split_by


def _comma(character: str) -> bool:
    return character == ","


class TestSplitBy:
    """Tests for predicate-driven splitting."""

    def test_boundary_opens_next_segment(self) -> None:
        assert split_by("a,b,c", 0, False, _comma) == ["a", ",b", ",c"]

    def test_concatenation_reproduces_text(self) -> None:
        text = "alpha,beta,,gamma,"
        assert "".join(split_by(text, 0, False, _comma)) == text

    def test_no_boundaries(self) -> None:
        assert split_by("abc", 0, False, _comma) == ["abc"]

    def test_empty_text(self) -> None:
        assert split_by("", 0, False, _comma) == [""]

    def test_leading_boundary_yields_empty_segment(self) -> None:
        assert split_by(",a", 0, False, _comma) == ["", ",a"]

    def test_trailing_boundary(self) -> None:
        assert split_by("a,", 0, False, _comma) == ["a", ","]

    def test_consecutive_boundaries(self) -> None:
        assert split_by("a,,b", 0, False, _comma) == ["a", ",", ",b"]

    def test_segment_count(self) -> None:
        text = "x,y,z,w"
        assert len(split_by(text, 0, False, _comma)) == text.count(",") + 1

    def test_prefix_kept_as_own_segment(self) -> None:
        """Text before start_with is never scanned, even if it has boundaries."""
        assert split_by("a,b|c,d", 4, False, _comma) == ["a,b|", "c", ",d"]

    def test_prefix_segment_count(self) -> None:
        result = split_by("ab,c,d", 2, False, _comma)
        assert result == ["ab", "", ",c", ",d"]
        assert len(result) == "ab,c,d"[2:].count(",") + 1 + 1

    def test_combine_prefix_with_first_segment(self) -> None:
        assert split_by("xx:abc", 2, True, lambda c: c == ":") == ["xx", ":abc"]

    def test_combine_prefix_equals_prefix_plus_first_scanned(self) -> None:
        plain = split_by("key=a;b", 4, False, lambda c: c == ";")
        combined = split_by("key=a;b", 4, True, lambda c: c == ";")
        assert combined[0] == plain[0] + plain[1]
        assert combined[1:] == plain[2:]
        assert combined == ["key=a", ";b"]

    def test_combine_with_zero_start(self) -> None:
        assert split_by("a,b", 0, True, _comma) == ["a", ",b"]

    def test_start_at_end_of_text(self) -> None:
        assert split_by("abc", 3, False, _comma) == ["abc", ""]
        assert split_by("abc", 3, True, _comma) == ["abc"]

    def test_predicate_sees_single_characters(self) -> None:
        seen: list[str] = []

        def record(character: str) -> bool:
            seen.append(character)
            return False

        split_by("hello", 2, False, record)
        assert seen == ["l", "l", "o"]

    def test_whitespace_tokenizing(self) -> None:
        assert split_by("one two  three", 0, False, str.isspace) == [
            "one",
            " two",
            " ",
            " three",
        ]

    def test_start_beyond_length_raises(self) -> None:
        with pytest.raises(RangeError, match="start_with=4"):
            split_by("abc", 4, False, _comma)

    def test_negative_start_raises(self) -> None:
        with pytest.raises(RangeError):
            split_by("abc", -1, False, _comma)

    def test_range_error_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            split_by("", 1, True, _comma)

    def test_range_error_is_array_utils_error(self) -> None:
        with pytest.raises(ArrayUtilsError):
            split_by("abc", 10, False, _comma)

    def test_non_int_start_raises(self) -> None:
        with pytest.raises(RangeError, match="must be an int"):
            split_by("abc", 1.5, False, _comma)  # type: ignore[arg-type]

    def test_range_checked_before_predicate_runs(self) -> None:
        def explode(character: str) -> bool:
            raise AssertionError("predicate must not run")

        with pytest.raises(RangeError):
            split_by("abc", 5, False, explode)
