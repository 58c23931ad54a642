"""Board state and the pure reducer that advances it.

The reducer performs no I/O. ``BoardStore`` runs the remote calls and
feeds their outcomes in as actions.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from cashboard.domain.board import Board, BoardNotReadyError, Row, Widget


class BoardStatus(str, Enum):
    """Lifecycle of the board held by a store."""

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class BoardState:
    status: BoardStatus = BoardStatus.UNINITIALIZED
    board: Board | None = None
    error: str | None = None

    @property
    def is_ready(self) -> bool:
        return self.status is BoardStatus.READY


# -----------------------------------------------------------------------------
# Actions
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class LoadStarted:
    pass


@dataclass(frozen=True)
class LoadSucceeded:
    board: Board


@dataclass(frozen=True)
class LoadFailed:
    message: str


@dataclass(frozen=True)
class LoadCancelled:
    pass


@dataclass(frozen=True)
class RowAdded:
    row: Row


@dataclass(frozen=True)
class RowDeleted:
    row_id: int


@dataclass(frozen=True)
class WidgetReplaced:
    widget: Widget


BoardAction = Union[
    LoadStarted,
    LoadSucceeded,
    LoadFailed,
    LoadCancelled,
    RowAdded,
    RowDeleted,
    WidgetReplaced,
]

_LOAD_ENTRY_STATUSES = frozenset({BoardStatus.UNINITIALIZED, BoardStatus.ERROR})


def reduce_board(state: BoardState, action: BoardAction) -> BoardState:
    """Return the state that follows ``state`` after ``action``."""
    if isinstance(action, LoadStarted):
        if state.status not in _LOAD_ENTRY_STATUSES:
            raise BoardNotReadyError(state.status.value, "start loading")
        return BoardState(status=BoardStatus.LOADING)

    if isinstance(action, (LoadSucceeded, LoadFailed, LoadCancelled)):
        if state.status is not BoardStatus.LOADING:
            raise BoardNotReadyError(state.status.value, "finish loading")
        if isinstance(action, LoadSucceeded):
            return BoardState(status=BoardStatus.READY, board=action.board)
        if isinstance(action, LoadFailed):
            return BoardState(status=BoardStatus.ERROR, error=action.message)
        return BoardState(status=BoardStatus.UNINITIALIZED)

    board = _ready_board(state, action)
    if isinstance(action, RowAdded):
        return replace(state, board=board.with_row(action.row))
    if isinstance(action, RowDeleted):
        return replace(state, board=board.without_row(action.row_id))
    if isinstance(action, WidgetReplaced):
        return replace(state, board=board.with_widget(action.widget))

    msg = f"Unknown board action: {action!r}"
    raise TypeError(msg)


def _ready_board(state: BoardState, action: BoardAction) -> Board:
    if state.status is not BoardStatus.READY or state.board is None:
        raise BoardNotReadyError(state.status.value, type(action).__name__)
    return state.board
