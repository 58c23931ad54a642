"""Row entity - a horizontal band of fixed widget capacity."""

from __future__ import annotations

from dataclasses import dataclass, replace

from cashboard.domain.board.entities.widget import Widget
from cashboard.domain.board.exceptions import WidgetNotFoundError
from cashboard.domain.board.value_objects import RowType


@dataclass(frozen=True)
class Row:
    """A row of widgets whose shape is fixed by its row type.

    The widget count and each widget's column type always match the
    layout table entry for ``row_type``. Rows are never reshaped after
    creation; only their widgets' bindings change.
    """

    row_type: RowType
    sort_order: int
    widgets: tuple[Widget, ...]
    id: int | None = None
    board_id: int | None = None

    def __post_init__(self):
        expected = self.row_type.column_types
        if len(self.widgets) != len(expected):
            msg = (
                f"Row type {self.row_type.value} holds {len(expected)} widgets, "
                f"got {len(self.widgets)}"
            )
            raise ValueError(msg)

        actual = tuple(widget.column_type for widget in self.widgets)
        if actual != expected:
            msg = (
                f"Row type {self.row_type.value} requires columns "
                f"{[c.value for c in expected]}, got {[c.value for c in actual]}"
            )
            raise ValueError(msg)

        orders = [widget.sort_order for widget in self.widgets]
        if any(a >= b for a, b in zip(orders, orders[1:])):
            msg = f"Widget sort orders must be strictly increasing: {orders}"
            raise ValueError(msg)

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @property
    def bound_widgets(self) -> tuple[Widget, ...]:
        return tuple(widget for widget in self.widgets if widget.is_bound)

    @property
    def has_bound_widgets(self) -> bool:
        return any(widget.is_bound for widget in self.widgets)

    def find_widget(self, widget_id: int) -> Widget | None:
        for widget in self.widgets:
            if widget.id is not None and widget.id == widget_id:
                return widget
        return None

    def with_widget(self, updated: Widget) -> Row:
        """Return a copy with the widget sharing ``updated.id`` replaced."""
        if updated.id is None:
            raise WidgetNotFoundError(None)

        widgets = list(self.widgets)
        for index, widget in enumerate(widgets):
            if widget.id == updated.id:
                if widget.column_type != updated.column_type:
                    msg = (
                        f"Widget {updated.id} column type cannot change "
                        f"from {widget.column_type.value} "
                        f"to {updated.column_type.value}"
                    )
                    raise ValueError(msg)
                widgets[index] = updated
                return replace(self, widgets=tuple(widgets))

        raise WidgetNotFoundError(updated.id)
