"""Value objects for the widget board."""

from cashboard.domain.board.value_objects.account_ref import AccountRef
from cashboard.domain.board.value_objects.row_type import (
    ROW_LAYOUTS,
    ColumnType,
    RowType,
    arity,
)
from cashboard.domain.board.value_objects.widget_kind import (
    ACCOUNT_COMPATIBILITY,
    WidgetKind,
)

__all__ = [
    "ACCOUNT_COMPATIBILITY",
    "ROW_LAYOUTS",
    "AccountRef",
    "ColumnType",
    "RowType",
    "WidgetKind",
    "arity",
]
