"""Unix epoch timestamps given as digit strings.

The unit is inferred from the length, a leading ``-`` included, so only
the conventional widths are meaningful:

    up to 10 chars    seconds        1636331169
    up to 13 chars    milliseconds   1636331272246
    up to 16 chars    microseconds   1636331272246000
    up to 19 chars    nanoseconds    1636331290175019000
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta

from anydate.domain.fraction import digit_run
from anydate.domain.nanodatetime import NanoDateTime
from anydate.errors import InvalidTimestamp

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# (max width, nanoseconds per unit), checked in order.
TIMESTAMP_UNITS: tuple[tuple[int, int], ...] = (
    (10, 1_000_000_000),
    (13, 1_000_000),
    (16, 1_000),
    (19, 1),
)


def parse_timestamp(text: str) -> NanoDateTime:
    """Parse an epoch timestamp into an aware UTC datetime.

    Nanosecond inputs keep all their digits on ``nanosecond``.

    Raises:
        InvalidTimestamp: if *text* is not an optionally signed run of
            digits at most 19 characters long.
    """
    stripped = text.strip()
    digits = stripped[1:] if stripped.startswith("-") else stripped
    if not digits or digit_run(digits) != digits:
        raise InvalidTimestamp(f"{stripped!r} is not a unix timestamp", input=stripped)

    # the sign counts toward the width
    for max_width, nanos_per_unit in TIMESTAMP_UNITS:
        if len(stripped) <= max_width:
            break
    else:
        raise InvalidTimestamp(
            f"{stripped!r} is wider than a nanosecond timestamp",
            input=stripped,
        )

    # Widest inputs land between 1938 and 2286, inside the datetime range.
    nanos = int(stripped) * nanos_per_unit
    logger.debug("Timestamp %r read with %d ns per unit", stripped, nanos_per_unit)
    value = EPOCH + timedelta(microseconds=nanos // 1000)
    return NanoDateTime.from_datetime(value, value.microsecond * 1000 + nanos % 1000)
