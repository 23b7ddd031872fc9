"""Tests for the single-layout token walker."""

import pytest

from anydate.domain.layouts import FieldKind, Layout
from anydate.domain.matching import expand_year, match_layout


class TestExpandYear:
    @pytest.mark.parametrize(
        "value,expected",
        [(0, 2000), (14, 2014), (68, 2068), (69, 1969), (71, 1971), (99, 1999)],
    )
    def test_default_pivot(self, value: int, expected: int) -> None:
        assert expand_year(value) == expected

    def test_custom_pivot(self) -> None:
        assert expand_year(40, pivot=50) == 2040
        assert expand_year(50, pivot=50) == 1950


class TestMatchLayout:
    def test_full_match(self) -> None:
        match = match_layout(Layout.from_pattern("%Y-%m-%d"), "2021-11-10")
        assert match is not None
        assert match.consumed == 10
        assert match.fields == {
            FieldKind.YEAR4: 2021,
            FieldKind.MONTH: 11,
            FieldKind.DAY: 10,
        }

    def test_prefix_match_reports_consumed(self) -> None:
        match = match_layout(Layout.from_pattern("%Y-%m-%d"), "2021-11-10xyz")
        assert match is not None
        assert match.consumed == 10

    def test_single_digit_fields(self) -> None:
        match = match_layout(Layout.from_pattern("%Y-%m-%d"), "2021-1-5")
        assert match is not None
        assert match.get(FieldKind.MONTH) == 1
        assert match.get(FieldKind.DAY) == 5

    def test_separator_mismatch(self) -> None:
        assert match_layout(Layout.from_pattern("%Y-%m-%d"), "2021/11/10") is None

    def test_fixed_width_year_too_short(self) -> None:
        assert match_layout(Layout.from_pattern("%m/%d/%Y"), "08/21/71") is None

    def test_greedy_no_backtracking(self) -> None:
        """The month takes two digits even when that starves the day."""
        assert match_layout(Layout.from_pattern("%Y%m%d"), "202111") is None

    def test_two_digit_year_expanded(self) -> None:
        match = match_layout(Layout.from_pattern("%m/%d/%y"), "4/8/14")
        assert match is not None
        assert match.get(FieldKind.YEAR) == 2014

    def test_two_digit_year_pivot_argument(self) -> None:
        match = match_layout(Layout.from_pattern("%y%m%d"), "401231", year_pivot=30)
        assert match is not None
        assert match.get(FieldKind.YEAR) == 1940

    def test_non_ascii_digits_rejected(self) -> None:
        # Arabic-Indic digits satisfy str.isdigit() but are not accepted
        assert match_layout(Layout.from_pattern("%Y"), "٢٠٢١") is None

    def test_fraction_present(self) -> None:
        match = match_layout(Layout.from_pattern("%H:%M:%S%f"), "03:25:06.5")
        assert match is not None
        assert match.get(FieldKind.FRACTION) == 500_000_000
        assert match.consumed == 10

    def test_fraction_absent(self) -> None:
        match = match_layout(Layout.from_pattern("%H:%M:%S%f"), "03:25:06")
        assert match is not None
        assert FieldKind.FRACTION not in match.fields

    def test_fraction_without_digits_fails_layout(self) -> None:
        assert match_layout(Layout.from_pattern("%H:%M:%S%f"), "03:25:06.") is None

    @pytest.mark.parametrize("marker,expected", [("AM", 0), ("pm", 1), ("Pm", 1)])
    def test_meridiem(self, marker: str, expected: int) -> None:
        match = match_layout(Layout.from_pattern("%H:%M %p"), f"1:00 {marker}")
        assert match is not None
        assert match.get(FieldKind.MERIDIEM) == expected

    def test_bad_meridiem(self) -> None:
        assert match_layout(Layout.from_pattern("%H:%M %p"), "1:00 XM") is None

    def test_missing_field_default(self) -> None:
        match = match_layout(Layout.from_pattern("%H:%M"), "21:14")
        assert match is not None
        assert match.get(FieldKind.SECOND) == 0
