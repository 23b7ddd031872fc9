"""Apply a single :class:`Layout` to a string.

Numeric fields are read greedily up to their maximum width. There is no
backtracking: once a field has taken its digits, a later mismatch fails
the whole layout and the caller moves on to the next catalogue entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from anydate.domain.fraction import decompose_fraction, digit_run
from anydate.domain.layouts import FIELD_WIDTHS, FieldKind, Layout
from anydate.errors import MalformedFraction

DEFAULT_YEAR_PIVOT = 69

MERIDIEM_VALUES: dict[str, int] = {"AM": 0, "PM": 1}


@dataclass(frozen=True)
class CandidateMatch:
    """Field values extracted by one layout and the characters it consumed.

    ``fields`` holds decoded integers keyed by kind: two-digit years are
    already expanded, ``FRACTION`` is in nanoseconds, and ``MERIDIEM`` is
    0 for AM and 1 for PM.
    """

    layout: Layout
    consumed: int
    fields: dict[FieldKind, int] = field(default_factory=dict)

    def get(self, kind: FieldKind, default: int = 0) -> int:
        return self.fields.get(kind, default)


def expand_year(value: int, pivot: int = DEFAULT_YEAR_PIVOT) -> int:
    """Expand a one-or-two-digit year: below *pivot* is 20xx, otherwise 19xx.

    Examples:
        >>> expand_year(14)
        2014
        >>> expand_year(71)
        1971
    """
    return 2000 + value if value < pivot else 1900 + value


def match_layout(
    layout: Layout,
    text: str,
    *,
    year_pivot: int = DEFAULT_YEAR_PIVOT,
) -> CandidateMatch | None:
    """Match *layout* against the start of *text*.

    Returns a :class:`CandidateMatch` for the matched prefix, or None if
    the layout does not align. Callers decide whether trailing characters
    are acceptable by comparing ``consumed`` with the segment length.
    """
    pos = 0
    values: dict[FieldKind, int] = {}
    for token in layout.tokens:
        if not isinstance(token, FieldKind):
            if not text.startswith(token, pos):
                return None
            pos += len(token)
        elif token is FieldKind.FRACTION:
            # Optional: absent unless the next character is '.'
            if text[pos : pos + 1] != ".":
                continue
            try:
                fraction = decompose_fraction(text, pos)
            except MalformedFraction:
                return None
            values[token] = fraction.nanosecond
            pos += fraction.consumed
        elif token is FieldKind.MERIDIEM:
            marker = text[pos : pos + 2].upper()
            if marker not in MERIDIEM_VALUES:
                return None
            values[token] = MERIDIEM_VALUES[marker]
            pos += 2
        else:
            min_width, max_width = FIELD_WIDTHS[token]
            digits = digit_run(text, pos, max_width)
            if len(digits) < min_width:
                return None
            value = int(digits)
            if token is FieldKind.YEAR:
                value = expand_year(value, year_pivot)
            values[token] = value
            pos += len(digits)
    return CandidateMatch(layout=layout, consumed=pos, fields=values)
