"""Board state, pending operation markers and generation tokens."""

from cashboard.application.state.board_state import (
    BoardAction,
    BoardState,
    BoardStatus,
    LoadCancelled,
    LoadFailed,
    LoadStarted,
    LoadSucceeded,
    RowAdded,
    RowDeleted,
    WidgetReplaced,
    reduce_board,
)
from cashboard.application.state.generation import GenerationCounter
from cashboard.application.state.pending_operations import (
    PendingEntity,
    PendingOperation,
    PendingOperations,
)

__all__ = [
    "BoardAction",
    "BoardState",
    "BoardStatus",
    "GenerationCounter",
    "LoadCancelled",
    "LoadFailed",
    "LoadStarted",
    "LoadSucceeded",
    "PendingEntity",
    "PendingOperation",
    "PendingOperations",
    "RowAdded",
    "RowDeleted",
    "WidgetReplaced",
    "reduce_board",
]
