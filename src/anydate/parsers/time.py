"""Time-of-day matching.

The time segment handed to :func:`match_time` never includes the UTC
offset; :mod:`anydate.parsers.datetime` splits that off first.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from anydate.domain.layouts import TIME_LAYOUTS, FieldKind, Layout
from anydate.domain.matching import CandidateMatch, match_layout
from anydate.errors import NoMatchingTimeFormat

logger = logging.getLogger(__name__)


class TimeParts(BaseModel):
    """Decomposed time of day, hour already on the 24-hour clock."""

    model_config = {"frozen": True}

    hour: int
    minute: int
    second: int = 0
    nanosecond: int = 0
    layout: str


CLOCK_HOURS = range(1, 13)


def to_24_hour(hour: int, meridiem: int) -> int:
    """Convert a 12-hour clock value. *meridiem* is 0 for AM, 1 for PM.

    Raises:
        ValueError: if *hour* is not 1-12.

    Examples:
        >>> to_24_hour(12, 0)
        0
        >>> to_24_hour(12, 1)
        12
        >>> to_24_hour(1, 1)
        13
    """
    if hour not in CLOCK_HOURS:
        raise ValueError(f"hour {hour} is not on the 12-hour clock")
    if hour == 12:
        hour = 0
    return hour + 12 * meridiem


def _time_parts(match: CandidateMatch) -> TimeParts | None:
    hour = match.get(FieldKind.HOUR)
    if FieldKind.MERIDIEM in match.fields:
        try:
            hour = to_24_hour(hour, match.fields[FieldKind.MERIDIEM])
        except ValueError:
            return None
    return TimeParts(
        hour=hour,
        minute=match.get(FieldKind.MINUTE),
        second=match.get(FieldKind.SECOND),
        nanosecond=match.get(FieldKind.FRACTION),
        layout=match.layout.name,
    )


def match_time(text: str, layouts: tuple[Layout, ...] = TIME_LAYOUTS) -> TimeParts:
    """Return the time of day from the first layout consuming all of *text*.

    A meridiem layout whose hour is outside 1-12 does not match.

    Raises:
        NoMatchingTimeFormat: if every layout is exhausted.
    """
    for layout in layouts:
        match = match_layout(layout, text)
        if match is None or match.consumed != len(text):
            continue
        parts = _time_parts(match)
        if parts is None:
            logger.debug("Time %r: hour off the 12-hour clock for %s", text, layout.name)
            continue
        logger.debug("Time %r matched layout %s", text, layout.name)
        return parts
    raise NoMatchingTimeFormat(f"No time layout matches {text!r}", segment=text)
