"""anydate — parse dates and date-times of unknown layout.

Walks a fixed, ordered catalogue of conventional layouts and hands the
decomposed fields to :mod:`datetime` for construction. Date-times come
back as :class:`NanoDateTime`, a ``datetime`` that keeps nanoseconds::

    >>> import anydate
    >>> anydate.parse_date("03/31/2014")
    datetime.date(2014, 3, 31)
    >>> anydate.parse_datetime_utc("2014-04-26 13:13:43.123456789 +0800").nanosecond
    123456789
"""

from __future__ import annotations

from anydate.config.logging import configure_logging
from anydate.domain.nanodatetime import NanoDateTime
from anydate.errors import (
    AnydateError,
    ErrorPayload,
    InvalidCalendarDate,
    InvalidCalendarDateTime,
    InvalidTimestamp,
    MalformedFraction,
    MalformedOffset,
    NoDateTimeSeparator,
    NoMatchingDateFormat,
    NoMatchingTimeFormat,
)
from anydate.parsers.date import parse_date
from anydate.parsers.datetime import (
    DateTimeParts,
    decompose_datetime,
    parse_datetime,
    parse_datetime_utc,
)
from anydate.parsers.timestamp import parse_timestamp

__version__ = "0.3.0"

__all__ = [
    "AnydateError",
    "DateTimeParts",
    "ErrorPayload",
    "InvalidCalendarDate",
    "InvalidCalendarDateTime",
    "InvalidTimestamp",
    "MalformedFraction",
    "MalformedOffset",
    "NanoDateTime",
    "NoDateTimeSeparator",
    "NoMatchingDateFormat",
    "NoMatchingTimeFormat",
    "__version__",
    "configure_logging",
    "decompose_datetime",
    "parse_date",
    "parse_datetime",
    "parse_datetime_utc",
    "parse_timestamp",
]
