"""Layouts and the date/time catalogues.

A layout is a declarative token sequence: numeric fields of a fixed
digit-width range interleaved with single-character literal separators.

INVARIANT: catalogue order is precedence. The matchers try layouts in
tuple order and the first full match wins, so inserting, removing, or
reordering entries changes observable parse results.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class FieldKind(StrEnum):
    """Field codes usable in a layout pattern."""

    YEAR4 = "%Y"
    YEAR = "%y"
    MONTH = "%m"
    DAY = "%d"
    HOUR = "%H"
    MINUTE = "%M"
    SECOND = "%S"
    FRACTION = "%f"
    MERIDIEM = "%p"


# (min digits, max digits) for numeric fields. FRACTION and MERIDIEM are
# not fixed-width and are handled by the matcher directly.
FIELD_WIDTHS: dict[FieldKind, tuple[int, int]] = {
    FieldKind.YEAR4: (4, 4),
    FieldKind.YEAR: (1, 2),
    FieldKind.MONTH: (1, 2),
    FieldKind.DAY: (1, 2),
    FieldKind.HOUR: (1, 2),
    FieldKind.MINUTE: (2, 2),
    FieldKind.SECOND: (2, 2),
}

Token = FieldKind | str


@dataclass(frozen=True)
class Layout:
    """One accepted textual shape, e.g. ``%Y-%m-%d``."""

    name: str
    tokens: tuple[Token, ...]

    @classmethod
    def from_pattern(cls, pattern: str) -> Layout:
        """Compile a compact pattern into a token sequence.

        ``%`` followed by a field code becomes a :class:`FieldKind`; every
        other character is a literal separator.

        Examples:
            >>> Layout.from_pattern("%Y-%m-%d").tokens
            (<FieldKind.YEAR4: '%Y'>, '-', <FieldKind.MONTH: '%m'>, '-', <FieldKind.DAY: '%d'>)
        """
        tokens: list[Token] = []
        i = 0
        while i < len(pattern):
            ch = pattern[i]
            if ch == "%":
                code = pattern[i : i + 2]
                try:
                    tokens.append(FieldKind(code))
                except ValueError:
                    msg = f"Unknown field code {code!r} in layout {pattern!r}"
                    raise ValueError(msg) from None
                i += 2
            else:
                tokens.append(ch)
                i += 1
        return cls(name=pattern, tokens=tuple(tokens))

    @property
    def fields(self) -> tuple[FieldKind, ...]:
        return tuple(t for t in self.tokens if isinstance(t, FieldKind))


DATE_LAYOUTS: tuple[Layout, ...] = tuple(
    Layout.from_pattern(p)
    for p in (
        "%Y-%m-%d",
        "%Y/%m/%d",
        "%Y.%m.%d",
        "%m/%d/%Y",
        "%m/%d/%y",
        "%m.%d.%Y",
        "%m.%d.%y",
        "%m-%d-%Y",
        "%Y年%m月%d日",
        "%Y%m%d",
        "%y%m%d",
    )
)

TIME_LAYOUTS: tuple[Layout, ...] = tuple(
    Layout.from_pattern(p)
    for p in (
        "%H:%M:%S%f",
        "%H:%M",
        "%H:%M:%S%f %p",
        "%H:%M %p",
        "%H:%M:%S%f%p",
        "%H:%M%p",
    )
)
