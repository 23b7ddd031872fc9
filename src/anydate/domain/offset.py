"""UTC offset decomposition.

Recognized tails: empty (naive), ``Z``/``z``, ``±HH:MM``, ``±HHMM``, ``±HH``,
optionally preceded by one space. Magnitudes are not range-checked here;
``+25:00`` decomposes and is rejected later by :class:`datetime.timezone`.
"""

from __future__ import annotations

from datetime import timedelta
from enum import StrEnum

from pydantic import BaseModel

from anydate.domain.fraction import ASCII_DIGITS
from anydate.errors import MalformedOffset


class OffsetSign(StrEnum):
    PLUS = "+"
    MINUS = "-"
    UTC = "Z"


class Offset(BaseModel):
    """Decomposed UTC offset."""

    model_config = {"frozen": True}

    sign: OffsetSign
    hours: int = 0
    minutes: int = 0
    consumed: int

    def as_timedelta(self) -> timedelta:
        delta = timedelta(hours=self.hours, minutes=self.minutes)
        return -delta if self.sign is OffsetSign.MINUS else delta


# Digit-grouping shapes after the sign, tried in order. "D" is a digit,
# anything else must match literally.
_SHAPES: tuple[str, ...] = ("DD:DD", "DDDD", "DD")


def _match_shape(body: str, shape: str) -> bool:
    if len(body) < len(shape):
        return False
    for ch, expected in zip(body, shape, strict=False):
        if expected == "D":
            if ch not in ASCII_DIGITS:
                return False
        elif ch != expected:
            return False
    return True


def decompose_offset(tail: str) -> Offset | None:
    """Decompose the text following a time segment into an :class:`Offset`.

    Returns None when *tail* is empty, meaning no offset was given.

    Raises:
        MalformedOffset: if *tail* is non-empty and not exactly one
            recognized offset shape.
    """
    if not tail:
        return None

    lead = 1 if tail.startswith(" ") else 0
    body = tail[lead:]

    if body in ("Z", "z"):
        return Offset(sign=OffsetSign.UTC, consumed=lead + 1)

    if body[:1] not in ("+", "-"):
        raise MalformedOffset(f"Unrecognized offset {tail!r}", offset=tail)

    digits = body[1:]
    for shape in _SHAPES:
        if not _match_shape(digits, shape):
            continue
        consumed = lead + 1 + len(shape)
        if consumed != len(tail):
            raise MalformedOffset(
                f"Unexpected characters after offset in {tail!r}",
                offset=tail,
                remainder=tail[consumed:],
            )
        hours = int(digits[:2])
        minutes = int(digits[-2:]) if len(shape) > 2 else 0
        return Offset(sign=OffsetSign(body[0]), hours=hours, minutes=minutes, consumed=consumed)

    raise MalformedOffset(f"Unrecognized offset {tail!r}", offset=tail)
