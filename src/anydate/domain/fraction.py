"""Fractional-second decomposition.

Fixed nanosecond convention: the first nine digits after the ``.`` are
right-padded with zeros, so ``.5`` is 500000000 ns, never 5 ns. Digits
past the ninth are consumed but ignored.
"""

from __future__ import annotations

from pydantic import BaseModel

from anydate.errors import MalformedFraction

NANOS_DIGITS = 9
ASCII_DIGITS = frozenset("0123456789")


class Fraction(BaseModel):
    """Sub-second value and characters consumed (including the ``.``)."""

    model_config = {"frozen": True}

    nanosecond: int
    consumed: int


def digit_run(text: str, start: int = 0, limit: int | None = None) -> str:
    """Return the run of ASCII digits in *text* beginning at *start*.

    Stops after *limit* digits when given.
    """
    end = start
    stop = len(text) if limit is None else min(len(text), start + limit)
    while end < stop and text[end] in ASCII_DIGITS:
        end += 1
    return text[start:end]


def decompose_fraction(text: str, start: int = 0) -> Fraction:
    """Decompose a ``.NNN...`` fragment of *text* beginning at *start*.

    Raises:
        MalformedFraction: if there is no ``.`` at *start* or no digit after it.
    """
    if text[start : start + 1] != ".":
        raise MalformedFraction("Fraction must start with '.'", fragment=text[start:])
    digits = digit_run(text, start + 1)
    if not digits:
        raise MalformedFraction("No digits after '.'", fragment=text[start:])
    nanosecond = int(digits[:NANOS_DIGITS].ljust(NANOS_DIGITS, "0"))
    return Fraction(nanosecond=nanosecond, consumed=1 + len(digits))
