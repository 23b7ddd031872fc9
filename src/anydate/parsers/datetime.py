"""Combined date-time decomposition and the ``parse_datetime`` entry points.

Pipeline for ``"2021-11-10T03:25:06.533447000+05:30"``:

1. split at the first space or ``T``:   ``2021-11-10`` | ``03:25:06.533447000+05:30``
2. split the rest at the first ``Z``/``+``/``-``:  ``03:25:06.533447000`` | ``+05:30``
3. date matcher, time matcher, offset decomposer, in that order

The first step to fail raises its own error; no partial result is returned.
"""

from __future__ import annotations

import logging
from datetime import UTC, timezone

from pydantic import BaseModel

from anydate.config.settings import AnydateSettings, get_settings
from anydate.domain.nanodatetime import NanoDateTime
from anydate.domain.offset import Offset, OffsetSign, decompose_offset
from anydate.errors import InvalidCalendarDateTime, NoDateTimeSeparator
from anydate.parsers.date import date_fields, match_date
from anydate.parsers.time import match_time

logger = logging.getLogger(__name__)

DATETIME_SEPARATORS = frozenset(" Tt")
OFFSET_MARKERS = frozenset("Zz+-")


class DateTimeParts(BaseModel):
    """Every field decomposed from a date-time string, before construction.

    ``offset`` is None when the input carried no offset (naive).
    """

    model_config = {"frozen": True}

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int = 0
    nanosecond: int = 0
    offset: Offset | None = None

    @property
    def microsecond(self) -> int:
        """Nanoseconds truncated to the resolution of :class:`datetime.datetime`."""
        return self.nanosecond // 1000


def _first_index(text: str, chars: frozenset[str]) -> int | None:
    return next((i for i, ch in enumerate(text) if ch in chars), None)


def split_datetime(text: str) -> tuple[str, str, str]:
    """Split *text* into ``(date_segment, time_segment, offset_tail)``.

    A single space between the time and the offset is moved into the
    offset tail.

    Raises:
        NoDateTimeSeparator: if the trimmed input has no space or ``T``.
    """
    stripped = text.strip()
    sep = _first_index(stripped, DATETIME_SEPARATORS)
    if sep is None:
        raise NoDateTimeSeparator(
            f"No date/time separator in {stripped!r}",
            input=stripped,
        )
    date_segment, rest = stripped[:sep], stripped[sep + 1 :]

    cut = _first_index(rest, OFFSET_MARKERS)
    if cut is None:
        return date_segment, rest, ""

    time_segment, tail = rest[:cut], rest[cut:]
    if time_segment.endswith(" "):
        time_segment, tail = time_segment[:-1], " " + tail
    return date_segment, time_segment, tail


def decompose_datetime(text: str, *, settings: AnydateSettings | None = None) -> DateTimeParts:
    """Decompose *text* into raw fields without calendar validation.

    Raises:
        NoDateTimeSeparator: no boundary between date and time.
        NoMatchingDateFormat: the date segment matches no layout.
        NoMatchingTimeFormat: the time segment matches no layout.
        MalformedOffset: the offset tail is not a recognized shape.
    """
    date_segment, time_segment, tail = split_datetime(text)
    year, month, day = date_fields(match_date(date_segment, settings=settings))
    time_parts = match_time(time_segment)
    offset = decompose_offset(tail)
    return DateTimeParts(
        year=year,
        month=month,
        day=day,
        hour=time_parts.hour,
        minute=time_parts.minute,
        second=time_parts.second,
        nanosecond=time_parts.nanosecond,
        offset=offset,
    )


def _tzinfo(offset: Offset | None, assume_utc: bool) -> timezone | None:
    if offset is None:
        return UTC if assume_utc else None
    if offset.sign is OffsetSign.UTC:
        return UTC
    return timezone(offset.as_timedelta())


def build_datetime(parts: DateTimeParts, *, assume_utc: bool = False) -> NanoDateTime:
    """Construct a :class:`NanoDateTime` from decomposed *parts*.

    Raises:
        InvalidCalendarDateTime: if :mod:`datetime` rejects any field or
            the offset magnitude.
    """
    try:
        return NanoDateTime(
            parts.year,
            parts.month,
            parts.day,
            parts.hour,
            parts.minute,
            parts.second,
            parts.microsecond,
            tzinfo=_tzinfo(parts.offset, assume_utc),
            nanosecond=parts.nanosecond,
        )
    except ValueError as exc:
        fields = parts.model_dump(exclude={"offset"})
        if parts.offset is not None:
            fields["offset"] = str(parts.offset.as_timedelta())
        raise InvalidCalendarDateTime(
            f"Fields do not form a valid datetime: {exc}",
            **fields,
        ) from exc


def parse_datetime(text: str, *, settings: AnydateSettings | None = None) -> NanoDateTime:
    """Parse a date-time of unknown layout.

    The result is naive when the input has no offset, unless the
    ``assume_utc`` setting is on. All nine fraction digits are kept on
    ``nanosecond``; ``microsecond`` holds them truncated.
    """
    settings = settings or get_settings()
    parts = decompose_datetime(text, settings=settings)
    try:
        return build_datetime(parts, assume_utc=settings.assume_utc)
    except InvalidCalendarDateTime:
        logger.debug("Calendar rejected %r", text)
        raise


def parse_datetime_utc(text: str, *, settings: AnydateSettings | None = None) -> NanoDateTime:
    """Like :func:`parse_datetime`, but always returns an aware UTC datetime.

    Naive results are taken to already be UTC.
    """
    dt = parse_datetime(text, settings=settings)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
