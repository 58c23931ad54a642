"""Widget unbinder - confirm, then return a bound widget to a placeholder."""

from __future__ import annotations

import logging
from enum import Enum

from cashboard.application.services.board_store import BoardStore
from cashboard.domain.board import (
    BoardRemoteStorePort,
    MutationRejectedError,
    OperationInProgressError,
    Widget,
    WidgetNotBoundError,
    WidgetNotFoundError,
)
from cashboard.domain.shared import BusinessRuleViolation

logger = logging.getLogger(__name__)

UNBIND_FAILED_ERROR = "Could not remove widget, please try again."


class UnbindPhase(str, Enum):
    IDLE = "idle"
    CONFIRMING = "confirming"
    SUBMITTING = "submitting"
    DONE = "done"


class WidgetUnbinder:
    """Confirmation flow for removing a widget's binding.

    The row keeps its shape; only the widget's kind and accounts are
    cleared once the remote store agrees.
    """

    def __init__(
        self,
        widget: Widget,
        store: BoardStore,
        remote_store: BoardRemoteStorePort,
    ):
        if widget.id is None:
            raise WidgetNotFoundError(None)
        self._widget = widget
        self._store = store
        self._remote_store = remote_store
        self._phase = UnbindPhase.IDLE
        self._error_message: str | None = None

    @property
    def widget(self) -> Widget:
        return self._widget

    @property
    def phase(self) -> UnbindPhase:
        return self._phase

    @property
    def error_message(self) -> str | None:
        return self._error_message

    def request(self) -> None:
        """Ask for confirmation."""
        if self._widget.is_placeholder:
            raise WidgetNotBoundError(self._widget.id)
        if self._phase is not UnbindPhase.IDLE:
            raise BusinessRuleViolation(
                f"Cannot request removal while {self._phase.value}",
            )
        self._phase = UnbindPhase.CONFIRMING

    def cancel(self) -> None:
        if self._phase is UnbindPhase.CONFIRMING:
            self._phase = UnbindPhase.IDLE
            self._error_message = None

    async def confirm(self) -> Widget:
        """Send the unbind request and clear the widget on success."""
        if self._phase is UnbindPhase.SUBMITTING:
            raise OperationInProgressError("widget", self._widget.id, "unbind")
        if self._phase is not UnbindPhase.CONFIRMING:
            raise BusinessRuleViolation("Removal has not been requested")

        widget_id: int = self._widget.id  # type: ignore[assignment]
        self._phase = UnbindPhase.SUBMITTING
        self._error_message = None
        try:
            with self._store.claim_widget(widget_id, "unbind"):
                await self._remote_store.unbind_widget(widget_id)

            updated = self._widget.cleared()
            self._store.replace_widget(updated)
            self._widget = updated
            self._phase = UnbindPhase.DONE
        except MutationRejectedError as e:
            logger.warning("Unbinding widget %s was rejected: %s", widget_id, e.message)
            self._error_message = UNBIND_FAILED_ERROR
            raise
        finally:
            if self._phase is UnbindPhase.SUBMITTING:
                self._phase = UnbindPhase.CONFIRMING

        logger.info("Unbound widget %s", widget_id)
        return updated
