"""A :class:`datetime.datetime` that keeps nanosecond precision.

``datetime`` stops at microseconds. :class:`NanoDateTime` stores the full
nanosecond-of-second beside it, and ``microsecond`` is always
``nanosecond // 1000``, so it can go anywhere a ``datetime`` is accepted.

Comparison, hashing and arithmetic are inherited and only see the
microsecond. Results of arithmetic drop the sub-microsecond digits.
"""

from __future__ import annotations

import functools
from datetime import datetime, tzinfo
from typing import Any, Self

NANOS_PER_MICRO = 1000


class NanoDateTime(datetime):
    """An aware or naive datetime carrying ``nanosecond`` (0-999999999)."""

    __slots__ = ("_nanosecond",)

    _nanosecond: int

    def __new__(cls, *args: Any, nanosecond: int | None = None, **kwargs: Any) -> Self:
        self = super().__new__(cls, *args, **kwargs)
        if nanosecond is None:
            nanosecond = self.microsecond * NANOS_PER_MICRO
        elif nanosecond // NANOS_PER_MICRO != self.microsecond:
            raise ValueError(
                f"nanosecond {nanosecond} disagrees with microsecond {self.microsecond}"
            )
        self._nanosecond = nanosecond
        return self

    @classmethod
    def from_datetime(cls, value: datetime, nanosecond: int | None = None) -> Self:
        """Wrap *value*, optionally with the sub-microsecond digits it lost."""
        return cls(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
            value.tzinfo,
            fold=value.fold,
            nanosecond=nanosecond,
        )

    @property
    def nanosecond(self) -> int:
        # unset on instances datetime arithmetic builds without __new__
        return getattr(self, "_nanosecond", self.microsecond * NANOS_PER_MICRO)

    def _carry(self, value: datetime) -> Self:
        # keep the sub-microsecond digits across a shift by whole microseconds
        sub_micro = self.nanosecond % NANOS_PER_MICRO
        return type(self).from_datetime(value, value.microsecond * NANOS_PER_MICRO + sub_micro)

    def replace(self, *args: Any, **kwargs: Any) -> Self:  # type: ignore[override]
        """``datetime.replace`` that also accepts ``nanosecond=``.

        Sub-microsecond digits survive unless ``microsecond`` or
        ``nanosecond`` is replaced.
        """
        nanosecond = kwargs.pop("nanosecond", None)
        if nanosecond is not None:
            kwargs["microsecond"] = nanosecond // NANOS_PER_MICRO
        value = datetime.replace(self, *args, **kwargs)
        if nanosecond is not None or "microsecond" in kwargs or len(args) >= 7:
            return type(self).from_datetime(value, nanosecond)
        return self._carry(value)

    def astimezone(self, tz: tzinfo | None = None) -> Self:
        return self._carry(super().astimezone(tz))

    def isoformat(self, sep: str = "T", timespec: str = "auto") -> str:
        """``datetime.isoformat`` plus ``timespec="nanoseconds"``."""
        if timespec != "nanoseconds":
            return super().isoformat(sep, timespec)
        text = super().isoformat(sep, "microseconds")
        # date (10) + sep (1) + HH:MM:SS.ffffff (15)
        cut = 26
        return f"{text[:cut]}{self.nanosecond % NANOS_PER_MICRO:03d}{text[cut:]}"

    def __repr__(self) -> str:
        text = super().__repr__()
        if self.nanosecond % NANOS_PER_MICRO == 0:
            return text
        return f"{text[:-1]}, nanosecond={self.nanosecond})"

    def __reduce_ex__(self, protocol: Any) -> tuple[Any, ...]:
        cls, state = super().__reduce_ex__(protocol)[:2]
        return functools.partial(cls, nanosecond=self.nanosecond), state
