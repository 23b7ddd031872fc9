"""Tests for the time-of-day matcher."""

import pytest

from anydate.domain.layouts import Layout
from anydate.errors import NoMatchingTimeFormat
from anydate.parsers.time import match_time, to_24_hour


class TestMatchTime:
    @pytest.mark.parametrize(
        "text,layout,expected",
        [
            ("03:25:06", "%H:%M:%S%f", (3, 25, 6, 0)),
            ("3:25:06", "%H:%M:%S%f", (3, 25, 6, 0)),
            ("03:25:06.533447000", "%H:%M:%S%f", (3, 25, 6, 533_447_000)),
            ("17:24:37.3186369", "%H:%M:%S%f", (17, 24, 37, 318_636_900)),
            ("21:14", "%H:%M", (21, 14, 0, 0)),
            ("05:24:37 PM", "%H:%M:%S%f %p", (17, 24, 37, 0)),
            ("12:00:00 AM", "%H:%M:%S%f %p", (0, 0, 0, 0)),
            ("01:00 PM", "%H:%M %p", (13, 0, 0, 0)),
            ("12:49 AM", "%H:%M %p", (0, 49, 0, 0)),
            ("10:10:09pm", "%H:%M:%S%f%p", (22, 10, 9, 0)),
            ("10:09am", "%H:%M%p", (10, 9, 0, 0)),
        ],
    )
    def test_catalogue(self, text: str, layout: str, expected: tuple[int, int, int, int]) -> None:
        parts = match_time(text)
        assert parts.layout == layout
        assert (parts.hour, parts.minute, parts.second, parts.nanosecond) == expected

    def test_hour_not_range_checked(self) -> None:
        assert match_time("25:00").hour == 25

    @pytest.mark.parametrize("text", ["0:30 PM", "00:00 AM", "13:00:00 PM", "0:15am"])
    def test_meridiem_hour_outside_clock(self, text: str) -> None:
        with pytest.raises(NoMatchingTimeFormat):
            match_time(text)

    @pytest.mark.parametrize(
        "text",
        ["", "03", "03:2", "03:25:6", "03:25:06.", "03:25:06 XM", "03:25:06 PMx", "T03:25"],
    )
    def test_no_match(self, text: str) -> None:
        with pytest.raises(NoMatchingTimeFormat) as exc_info:
            match_time(text)
        assert exc_info.value.detail == {"segment": text}

    def test_custom_catalogue(self) -> None:
        minutes_only = (Layout.from_pattern("%H:%M"),)
        with pytest.raises(NoMatchingTimeFormat):
            match_time("03:25:06", minutes_only)


class TestTo24Hour:
    @pytest.mark.parametrize(
        "hour,meridiem,expected",
        [(12, 0, 0), (1, 0, 1), (11, 0, 11), (12, 1, 12), (1, 1, 13), (11, 1, 23)],
    )
    def test_conversion(self, hour: int, meridiem: int, expected: int) -> None:
        assert to_24_hour(hour, meridiem) == expected

    @pytest.mark.parametrize("hour", [0, 13, 25])
    def test_rejects_hours_off_the_clock(self, hour: int) -> None:
        with pytest.raises(ValueError, match="12-hour clock"):
            to_24_hour(hour, 1)
