"""Board store - the single owner of the in-memory board.

Every mutation goes through the store. The store sends the request through
the injected remote store port and applies the acknowledged result to its
state via the pure reducer. Nothing is inserted optimistically: the board
only changes once the remote side has confirmed.
"""

from __future__ import annotations

import logging
from typing import Callable, ContextManager

from cashboard.application.state import (
    BoardAction,
    BoardState,
    BoardStatus,
    LoadCancelled,
    LoadFailed,
    LoadStarted,
    LoadSucceeded,
    PendingEntity,
    PendingOperations,
    RowAdded,
    RowDeleted,
    WidgetReplaced,
    reduce_board,
)
from cashboard.domain.board import (
    Board,
    BoardLoadError,
    BoardNotReadyError,
    BoardRemoteStorePort,
    InvalidRowTypeError,
    MutationRejectedError,
    OperationInProgressError,
    Row,
    RowHasBoundWidgetsError,
    RowNotFoundError,
    RowType,
    Widget,
    WidgetNotFoundError,
    create_row,
)

logger = logging.getLogger(__name__)

GENERIC_LOAD_ERROR = "Could not load widget board."

BoardListener = Callable[[BoardState], None]


class BoardStore:
    """Holds the authoritative board and serializes mutations against it."""

    def __init__(self, remote_store: BoardRemoteStorePort):
        self._remote_store = remote_store
        self._state = BoardState()
        self._pending = PendingOperations()
        self._listeners: list[BoardListener] = []

    @property
    def state(self) -> BoardState:
        return self._state

    @property
    def status(self) -> BoardStatus:
        return self._state.status

    @property
    def board(self) -> Board | None:
        return self._state.board

    @property
    def error(self) -> str | None:
        return self._state.error

    @property
    def pending(self) -> PendingOperations:
        return self._pending

    def subscribe(self, listener: BoardListener) -> Callable[[], None]:
        """Call ``listener`` with the new state after every change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    async def load(self) -> BoardState:
        """Fetch the persisted board.

        Remote failures do not raise; they move the store into ``ERROR``
        with the server's message. Cancellation returns the store to
        ``UNINITIALIZED`` and propagates.
        """
        self._dispatch(LoadStarted())
        try:
            board = await self._remote_store.load_board()
        except BoardLoadError as e:
            logger.warning("Loading widget board failed: %s", e.message)
            return self._dispatch(LoadFailed(e.message or GENERIC_LOAD_ERROR))
        except BaseException:
            # Cancellation or an unexpected bug; never leave LOADING behind
            self._dispatch(LoadCancelled())
            raise

        logger.info("Loaded widget board %s with %d rows", board.id, len(board.rows))
        return self._dispatch(LoadSucceeded(board))

    async def retry(self) -> BoardState:
        """Reload after a failed load."""
        if self._state.status is not BoardStatus.ERROR:
            raise BoardNotReadyError(self._state.status.value, "retry loading")
        return await self.load()

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    async def add_row(self, row_type: RowType | str) -> Row:
        """Persist a new row of ``row_type`` and append the confirmed row."""
        board = self._require_board("add a row")
        draft = create_row(board.next_row_sort_order(), row_type, board.id)
        if draft is None:
            raise InvalidRowTypeError(row_type)

        with self._pending.claim(PendingEntity.BOARD, board.id, "add_row"):
            try:
                confirmed = await self._remote_store.add_row(board, draft)
            except MutationRejectedError as e:
                logger.warning(
                    "Adding %s row was rejected: %s",
                    draft.row_type.value,
                    e.message,
                )
                raise

            _check_confirmed_row(draft, confirmed)
            try:
                self._dispatch(RowAdded(confirmed))
            except ValueError as e:
                raise MutationRejectedError(
                    "The server returned a row that does not fit the board.",
                    operation="add_row",
                    details={"reason": str(e)},
                ) from e

        logger.info(
            "Added %s row %s to board %s",
            confirmed.row_type.value,
            confirmed.id,
            board.id,
        )
        return confirmed

    async def delete_row(self, row_id: int) -> None:
        """Delete a row whose widgets are all placeholders."""
        board = self._require_board("delete a row")
        row = board.find_row(row_id)
        if row is None:
            raise RowNotFoundError(row_id)
        if row.has_bound_widgets:
            raise RowHasBoundWidgetsError(
                row_id,
                [widget.id for widget in row.bound_widgets],
            )
        busy = [
            widget.id
            for widget in row.widgets
            if self._pending.is_pending(PendingEntity.WIDGET, widget.id)
        ]
        if busy:
            raise OperationInProgressError("widget", busy[0], "delete_row")

        with self._pending.claim(PendingEntity.ROW, row_id, "delete_row"):
            try:
                await self._remote_store.delete_row(row_id)
            except MutationRejectedError as e:
                logger.warning("Deleting row %s was rejected: %s", row_id, e.message)
                raise

            self._dispatch(RowDeleted(row_id))

        logger.info("Deleted row %s from board %s", row_id, board.id)

    def claim_widget(self, widget_id: int, operation: str) -> ContextManager:
        """Claim a widget for one request.

        Refused while the widget's row is being deleted.
        """
        board = self._require_board(operation)
        row = board.row_for_widget(widget_id)
        if row is None:
            raise WidgetNotFoundError(widget_id)
        if self._pending.is_pending(PendingEntity.ROW, row.id):
            raise OperationInProgressError("row", row.id, operation)
        return self._pending.claim(PendingEntity.WIDGET, widget_id, operation)

    def replace_widget(self, widget: Widget) -> Board:
        """Merge an already-confirmed widget value into the board.

        Only the widget sharing ``widget.id`` changes; every other row and
        widget is carried over unchanged. No request is made.
        """
        board = self._require_board("replace a widget")
        if widget.id is None or board.find_widget(widget.id) is None:
            raise WidgetNotFoundError(widget.id)

        state = self._dispatch(WidgetReplaced(widget))
        logger.debug("Replaced widget %s (kind=%s)", widget.id, widget.kind)
        return state.board  # type: ignore[return-value]

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _require_board(self, action: str) -> Board:
        if self._state.status is not BoardStatus.READY or self._state.board is None:
            raise BoardNotReadyError(self._state.status.value, action)
        return self._state.board

    def _dispatch(self, action: BoardAction) -> BoardState:
        self._state = reduce_board(self._state, action)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state


def _check_confirmed_row(draft: Row, confirmed: Row) -> None:
    """Reject a confirmed row that is unpersisted or shaped unlike its draft."""
    if not confirmed.is_persisted or any(
        not widget.is_persisted for widget in confirmed.widgets
    ):
        raise MutationRejectedError(
            "The server did not assign ids to the new row.",
            operation="add_row",
        )
    if confirmed.row_type is not draft.row_type:
        raise MutationRejectedError(
            "The server returned a row of a different type.",
            operation="add_row",
            details={
                "expected": draft.row_type.value,
                "actual": confirmed.row_type.value,
            },
        )
