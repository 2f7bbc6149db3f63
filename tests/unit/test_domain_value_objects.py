"""Tests for domain value objects (HighlightSpan, Coordinate)."""

import pytest

from geosearch.domain.value_objects.core import Coordinate, HighlightSpan


class TestHighlightSpan:
    """HighlightSpan: UTF-16 (offset, length) checked against a specific string."""

    def test_span_inside_text(self) -> None:
        assert HighlightSpan(0, 8).to_range("Sheridan, IN") == range(0, 8)
        assert HighlightSpan(10, 2).to_range("Sheridan, IN") == range(10, 12)

    def test_from_pair(self) -> None:
        assert HighlightSpan.from_pair((3, 4)) == HighlightSpan(3, 4)

    def test_span_past_end_is_none(self) -> None:
        assert HighlightSpan(0, 9).to_range("Sheridan") is None
        assert HighlightSpan(9, 0).to_range("Sheridan") is None
        assert HighlightSpan(20, 1).to_range("Sheridan") is None

    def test_huge_values_do_not_raise(self) -> None:
        assert HighlightSpan(2**31, 2**31).to_range("Sheridan") is None
        assert HighlightSpan(2**63 - 1, 1).to_range("Sheridan") is None

    def test_negative_values_are_none(self) -> None:
        assert HighlightSpan(0, -1).to_range("Sheridan") is None
        assert HighlightSpan(-1, 2).to_range("Sheridan") is None

    def test_zero_length_span_is_empty_range(self) -> None:
        assert HighlightSpan(3, 0).to_range("Sheridan") == range(3, 3)
        assert HighlightSpan(8, 0).to_range("Sheridan") == range(8, 8)
        assert HighlightSpan(0, 0).to_range("") == range(0, 0)

    def test_offsets_count_utf16_units(self) -> None:
        # The emoji takes two UTF-16 units but one Python index.
        text = "a\U0001F600b"
        assert HighlightSpan(1, 2).to_range(text) == range(1, 2)
        assert HighlightSpan(3, 1).to_range(text) == range(2, 3)

    def test_span_splitting_surrogate_pair_is_none(self) -> None:
        text = "a\U0001F600b"
        assert HighlightSpan(2, 1).to_range(text) is None
        assert HighlightSpan(1, 1).to_range(text) is None

    def test_span_splitting_combining_sequence_is_none(self) -> None:
        text = "Cafe\u0301"
        assert HighlightSpan(0, 4).to_range(text) is None
        assert HighlightSpan(0, 5).to_range(text) == range(0, 5)

    def test_span_splitting_zwj_sequence_is_none(self) -> None:
        text = "\U0001F469\u200d\U0001F4BB dev"
        assert HighlightSpan(0, 2).to_range(text) is None
        assert HighlightSpan(3, 2).to_range(text) is None
        assert HighlightSpan(0, 5).to_range(text) == range(0, 3)

    def test_span_splitting_crlf_is_none(self) -> None:
        text = "a\r\nb"
        assert HighlightSpan(0, 2).to_range(text) is None
        assert HighlightSpan(0, 3).to_range(text) == range(0, 3)

    def test_span_splitting_flag_is_none(self) -> None:
        text = "\U0001F1FA\U0001F1F8 USA"
        assert HighlightSpan(0, 2).to_range(text) is None
        assert HighlightSpan(0, 4).to_range(text) == range(0, 2)

    def test_span_splitting_hangul_jamo_is_none(self) -> None:
        text = "\u1100\u1161\u11a8"
        assert HighlightSpan(0, 1).to_range(text) is None
        assert HighlightSpan(0, 2).to_range(text) is None
        assert HighlightSpan(0, 3).to_range(text) == range(0, 3)

    def test_zwj_before_letter_keeps_letter_boundary(self) -> None:
        text = "a\u200db"
        assert HighlightSpan(2, 1).to_range(text) == range(2, 3)
        assert HighlightSpan(0, 1).to_range(text) is None

    def test_same_span_checked_per_string(self) -> None:
        span = HighlightSpan(0, 10)
        assert span.to_range("Sheridan, IN") == range(0, 10)
        assert span.to_range("Sheridan") is None


class TestCoordinate:
    """Coordinate: latitude in [-90, 90], longitude in [-180, 180]."""

    def test_valid_coordinates(self) -> None:
        Coordinate(40.1350, -86.2205)
        Coordinate(90.0, 180.0)
        Coordinate(-90.0, -180.0)

    def test_latitude_out_of_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="Latitude"):
            Coordinate(90.5, 0.0)
        with pytest.raises(ValueError, match="Latitude"):
            Coordinate(-91.0, 0.0)

    def test_longitude_out_of_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="Longitude"):
            Coordinate(0.0, 180.01)

    def test_exact_equality(self) -> None:
        assert Coordinate(40.1350, -86.2205) == Coordinate(40.1350, -86.2205)
        assert Coordinate(40.1350, -86.2205) != Coordinate(40.13500001, -86.2205)
