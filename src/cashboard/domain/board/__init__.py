"""Widget board domain - rows of widget tiles bound to linked accounts."""

from cashboard.domain.board.aggregates import Board
from cashboard.domain.board.entities import Row, Widget
from cashboard.domain.board.exceptions import (
    BoardLoadError,
    BoardNotReadyError,
    IncompatibleAccountError,
    InvalidRowTypeError,
    MutationRejectedError,
    NoAccountSelectedError,
    OperationInProgressError,
    RowHasBoundWidgetsError,
    RowNotFoundError,
    WidgetNotBoundError,
    WidgetNotFoundError,
)
from cashboard.domain.board.ports import BoardRemoteStorePort
from cashboard.domain.board.services import create_row
from cashboard.domain.board.value_objects import (
    ACCOUNT_COMPATIBILITY,
    ROW_LAYOUTS,
    AccountRef,
    ColumnType,
    RowType,
    WidgetKind,
    arity,
)

__all__ = [
    "ACCOUNT_COMPATIBILITY",
    "ROW_LAYOUTS",
    "AccountRef",
    "Board",
    "BoardLoadError",
    "BoardNotReadyError",
    "BoardRemoteStorePort",
    "ColumnType",
    "IncompatibleAccountError",
    "InvalidRowTypeError",
    "MutationRejectedError",
    "NoAccountSelectedError",
    "OperationInProgressError",
    "Row",
    "RowHasBoundWidgetsError",
    "RowNotFoundError",
    "RowType",
    "Widget",
    "WidgetKind",
    "WidgetNotBoundError",
    "WidgetNotFoundError",
    "arity",
    "create_row",
]
