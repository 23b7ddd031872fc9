"""Pydantic field types that parse with anydate.

Usage::

    from pydantic import BaseModel
    from anydate.validators import AnyDateTimeUTC

    class Event(BaseModel):
        at: AnyDateTimeUTC

    Event.model_validate({"at": "2021-11-14 10:00:00 +0100"})

Strings are parsed; ``date``/``datetime`` instances pass through. Parse
failures propagate as a ``ValidationError`` whose message carries the
anydate error code. The ``Optional*`` variants additionally accept None.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator

from anydate.parsers.date import parse_date
from anydate.parsers.datetime import parse_datetime, parse_datetime_utc


def _type_error(value: Any, expected: str) -> ValueError:
    return ValueError(f"expected {expected} string, got {type(value).__name__}")


def _to_date(value: Any) -> date:
    # datetime is a date subclass; keep only the calendar part
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_date(value)
    raise _type_error(value, "a date")


def _to_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return parse_datetime(value)
    raise _type_error(value, "a date-time")


def _to_datetime_utc(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value.replace(tzinfo=UTC) if value.tzinfo is None else value.astimezone(UTC)
    if isinstance(value, str):
        return parse_datetime_utc(value)
    raise _type_error(value, "a date-time")


def _optional(convert: Any) -> Any:
    def validate(value: Any) -> Any:
        return None if value is None else convert(value)

    return validate


AnyDate = Annotated[date, BeforeValidator(_to_date)]
AnyDateTime = Annotated[datetime, BeforeValidator(_to_datetime)]
AnyDateTimeUTC = Annotated[datetime, BeforeValidator(_to_datetime_utc)]

OptionalAnyDate = Annotated[date | None, BeforeValidator(_optional(_to_date))]
OptionalAnyDateTime = Annotated[datetime | None, BeforeValidator(_optional(_to_datetime))]
OptionalAnyDateTimeUTC = Annotated[datetime | None, BeforeValidator(_optional(_to_datetime_utc))]
