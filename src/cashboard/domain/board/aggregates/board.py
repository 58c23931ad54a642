"""Board aggregate - a user's whole widget dashboard."""

from __future__ import annotations

from dataclasses import dataclass, replace

from cashboard.domain.board.entities import Row, Widget
from cashboard.domain.board.exceptions import RowNotFoundError, WidgetNotFoundError


@dataclass(frozen=True)
class Board:
    """Ordered rows of widgets belonging to one user.

    The board is immutable: every change returns a new board that shares
    all untouched rows and widgets with the previous one.
    """

    id: int | None
    owner_id: int | None
    rows: tuple[Row, ...] = ()

    def __post_init__(self):
        orders = [row.sort_order for row in self.rows]
        if any(a >= b for a, b in zip(orders, orders[1:])):
            msg = f"Row sort orders must be strictly increasing: {orders}"
            raise ValueError(msg)

    @classmethod
    def empty(cls, owner_id: int | None, board_id: int | None = None) -> Board:
        return cls(id=board_id, owner_id=owner_id, rows=())

    def next_row_sort_order(self) -> int:
        if not self.rows:
            return 1
        return max(row.sort_order for row in self.rows) + 1

    def find_row(self, row_id: int) -> Row | None:
        for row in self.rows:
            if row.id is not None and row.id == row_id:
                return row
        return None

    def find_widget(self, widget_id: int) -> Widget | None:
        for row in self.rows:
            widget = row.find_widget(widget_id)
            if widget is not None:
                return widget
        return None

    def row_for_widget(self, widget_id: int) -> Row | None:
        for row in self.rows:
            if row.find_widget(widget_id) is not None:
                return row
        return None

    def with_row(self, row: Row) -> Board:
        """Return a copy with a persisted row appended."""
        if not row.is_persisted:
            msg = "Only rows confirmed by the remote store can join the board"
            raise ValueError(msg)
        if self.find_row(row.id) is not None:  # type: ignore[arg-type]
            msg = f"Row {row.id} is already on the board"
            raise ValueError(msg)
        return replace(self, rows=(*self.rows, row))

    def without_row(self, row_id: int) -> Board:
        """Return a copy with the row identified by ``row_id`` removed."""
        if self.find_row(row_id) is None:
            raise RowNotFoundError(row_id)
        return replace(
            self,
            rows=tuple(row for row in self.rows if row.id != row_id),
        )

    def with_widget(self, updated: Widget) -> Board:
        """Return a copy with exactly one widget replaced, matched by id."""
        if updated.id is None:
            raise WidgetNotFoundError(None)

        rows = list(self.rows)
        for index, row in enumerate(rows):
            if row.find_widget(updated.id) is not None:
                rows[index] = row.with_widget(updated)
                return replace(self, rows=tuple(rows))

        raise WidgetNotFoundError(updated.id)
