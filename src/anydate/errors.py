"""Error taxonomy for anydate.

INVARIANT: every parse failure is raised as an :class:`AnydateError`
subclass. Nothing is retried, defaulted, or promoted to a best guess.
Each error carries a stable ``code`` and a ``detail`` dict with the
offending substring or field values.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, Field


class ErrorPayload(BaseModel):
    """Structured, JSON-serializable view of an :class:`AnydateError`."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class AnydateError(ValueError):
    """Base class for all anydate parse failures."""

    code: ClassVar[str] = "ANYDATE_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(code=self.code, message=self.message, detail=self.detail)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class NoMatchingDateFormat(AnydateError):
    """The date segment matched no layout in the date catalogue."""

    code = "NO_MATCHING_DATE_FORMAT"


class NoMatchingTimeFormat(AnydateError):
    """The time segment matched no layout in the time catalogue."""

    code = "NO_MATCHING_TIME_FORMAT"


class NoDateTimeSeparator(AnydateError):
    """No space or ``T`` boundary between the date and time segments."""

    code = "NO_DATETIME_SEPARATOR"


class MalformedOffset(AnydateError):
    """An offset suffix is present but not ``Z``, ``±HH:MM``, ``±HHMM`` or ``±HH``."""

    code = "MALFORMED_OFFSET"


class MalformedFraction(AnydateError):
    """A ``.`` was not followed by at least one digit."""

    code = "MALFORMED_FRACTION"


class InvalidCalendarDate(AnydateError):
    """Structurally valid date fields rejected by :class:`datetime.date`."""

    code = "INVALID_CALENDAR_DATE"


class InvalidCalendarDateTime(AnydateError):
    """Structurally valid fields rejected by :class:`datetime.datetime`."""

    code = "INVALID_CALENDAR_DATETIME"


class InvalidTimestamp(AnydateError):
    """Input is not a unix timestamp of a supported length, or is out of range."""

    code = "INVALID_TIMESTAMP"
