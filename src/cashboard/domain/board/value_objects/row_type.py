"""Row and column type tags and the row layout table."""

from __future__ import annotations

from enum import Enum


class ColumnType(str, Enum):
    """Width class of a widget slot inside a row."""

    FULL = "1"  # whole row
    WIDE = "2"  # two thirds
    NARROW = "3"  # one third

    @property
    def grid_span(self) -> int:
        """Number of twelfths of the row width this column occupies."""
        return _GRID_SPANS[self]


_GRID_SPANS: dict[ColumnType, int] = {
    ColumnType.FULL: 12,
    ColumnType.WIDE: 8,
    ColumnType.NARROW: 4,
}


class RowType(str, Enum):
    """Closed set of row shapes a board can contain."""

    SINGLE = "1"
    WIDE_NARROW = "2a"
    NARROW_WIDE = "2b"
    TRIPLE = "3"

    @classmethod
    def parse(cls, tag: RowType | str) -> RowType | None:
        """Return the row type for a tag, or None if the tag is unknown."""
        if isinstance(tag, RowType):
            return tag
        try:
            return cls(str(tag).strip().lower())
        except ValueError:
            return None

    @property
    def column_types(self) -> tuple[ColumnType, ...]:
        return ROW_LAYOUTS[self]

    @property
    def arity(self) -> int:
        return len(ROW_LAYOUTS[self])


# Column types each row type must contain, in order
ROW_LAYOUTS: dict[RowType, tuple[ColumnType, ...]] = {
    RowType.SINGLE: (ColumnType.FULL,),
    RowType.WIDE_NARROW: (ColumnType.WIDE, ColumnType.NARROW),
    RowType.NARROW_WIDE: (ColumnType.NARROW, ColumnType.WIDE),
    RowType.TRIPLE: (ColumnType.NARROW, ColumnType.NARROW, ColumnType.NARROW),
}


def arity(row_type: RowType) -> int:
    """Fixed widget count for a row type."""
    return len(ROW_LAYOUTS[row_type])
