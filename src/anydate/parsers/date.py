"""Date matching and ``parse_date``."""

from __future__ import annotations

import logging
from datetime import date

from anydate.config.settings import AnydateSettings, get_settings
from anydate.domain.layouts import DATE_LAYOUTS, FieldKind, Layout
from anydate.domain.matching import CandidateMatch, match_layout
from anydate.errors import InvalidCalendarDate, NoMatchingDateFormat

logger = logging.getLogger(__name__)


def match_date(
    text: str,
    layouts: tuple[Layout, ...] = DATE_LAYOUTS,
    *,
    settings: AnydateSettings | None = None,
) -> CandidateMatch:
    """Return the first layout in *layouts* that consumes all of *text*.

    INVARIANT: first match wins. A later layout is never consulted once an
    earlier one matches, even if its field values would be more plausible.

    Raises:
        NoMatchingDateFormat: if every layout is exhausted.
    """
    settings = settings or get_settings()
    for layout in layouts:
        match = match_layout(layout, text, year_pivot=settings.two_digit_year_pivot)
        if match is not None and match.consumed == len(text):
            logger.debug("Date %r matched layout %s", text, layout.name)
            return match
    raise NoMatchingDateFormat(f"No date layout matches {text!r}", segment=text)


def date_fields(match: CandidateMatch) -> tuple[int, int, int]:
    """Return ``(year, month, day)`` from a date match."""
    year = match.fields.get(FieldKind.YEAR4, match.get(FieldKind.YEAR))
    return year, match.get(FieldKind.MONTH), match.get(FieldKind.DAY)


def parse_date(text: str, *, settings: AnydateSettings | None = None) -> date:
    """Parse a date of unknown layout.

    Raises:
        NoMatchingDateFormat: if no layout matches the trimmed input.
        InvalidCalendarDate: if the fields do not form a real date,
            e.g. ``2021-02-30``.
    """
    stripped = text.strip()
    match = match_date(stripped, settings=settings)
    year, month, day = date_fields(match)
    try:
        return date(year, month, day)
    except ValueError as exc:
        logger.debug("Calendar rejected %r: %s", stripped, exc)
        raise InvalidCalendarDate(
            f"{stripped!r} is not a valid calendar date: {exc}",
            year=year,
            month=month,
            day=day,
        ) from exc
