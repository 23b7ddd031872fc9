"""Tests for unix epoch timestamp parsing."""

from datetime import UTC, datetime

import pytest

from anydate.errors import InvalidTimestamp
from anydate.parsers.timestamp import parse_timestamp


class TestParseTimestamp:
    def test_seconds(self) -> None:
        dt = parse_timestamp("1636331169")
        assert dt.timestamp() == 1636331169
        assert dt.tzinfo is UTC

    def test_milliseconds(self) -> None:
        dt = parse_timestamp("1636331272246")
        assert dt == datetime(2021, 11, 8, 0, 27, 52, 246000, tzinfo=UTC)

    def test_microseconds(self) -> None:
        dt = parse_timestamp("1636331272246000")
        assert dt.microsecond == 246000
        assert int(dt.timestamp()) == 1636331272

    def test_nanoseconds_floored(self) -> None:
        dt = parse_timestamp("1636331290175019999")
        assert dt.microsecond == 175019
        assert dt.nanosecond == 175_019_999
        assert int(dt.timestamp()) == 1636331290

    def test_short_is_seconds(self) -> None:
        assert parse_timestamp("0") == datetime(1970, 1, 1, tzinfo=UTC)
        assert parse_timestamp("86400") == datetime(1970, 1, 2, tzinfo=UTC)

    def test_negative(self) -> None:
        assert parse_timestamp("-86400") == datetime(1969, 12, 31, tzinfo=UTC)

    def test_negative_nanoseconds_floor(self) -> None:
        dt = parse_timestamp("-000000000000000001")
        assert dt == datetime(1969, 12, 31, 23, 59, 59, 999999, tzinfo=UTC)
        assert dt.nanosecond == 999_999_999

    def test_sign_counts_toward_width(self) -> None:
        # 14 characters: microseconds, although only 13 digits
        dt = parse_timestamp("-1636331272246")
        assert dt == datetime(1969, 12, 13, 1, 27, 48, 727754, tzinfo=UTC)

    def test_negative_ten_digits_is_milliseconds(self) -> None:
        assert parse_timestamp("-1000000000") == datetime(1969, 12, 20, 10, 13, 20, tzinfo=UTC)

    def test_whitespace_trimmed(self) -> None:
        assert parse_timestamp(" 0 ") == datetime(1970, 1, 1, tzinfo=UTC)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "-",
            "12a4",
            "1.5",
            "2021-11-10",
            "+100",
            "12345678901234567890",
            "-1234567890123456789",
        ],
    )
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidTimestamp):
            parse_timestamp(text)

    def test_widest_values_in_range(self) -> None:
        assert parse_timestamp("9999999999999999999").year == 2286
        assert parse_timestamp("-999999999").year == 1938
        assert parse_timestamp("-999999999999999999").year == 1938
