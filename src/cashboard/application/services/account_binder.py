"""Account binder - two-step wizard that binds a widget to an account.

Step one picks a widget kind, which (re)fetches the user's linked accounts.
Step two picks exactly one compatible account and submits the binding.
The board only changes after the remote store acknowledges the binding.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Callable, Optional

from cashboard.application.dtos import AccountOptionDTO, compatible_account_options
from cashboard.application.services.board_store import BoardStore
from cashboard.application.state import GenerationCounter
from cashboard.domain.accounts import (
    AccountListingError,
    LinkedAccountListing,
    LinkedAccountSourcePort,
)
from cashboard.domain.board import (
    AccountRef,
    BoardRemoteStorePort,
    MutationRejectedError,
    NoAccountSelectedError,
    OperationInProgressError,
    Widget,
    WidgetKind,
    WidgetNotFoundError,
)
from cashboard.domain.shared import BusinessRuleViolation, ValidationError

logger = logging.getLogger(__name__)

LOAD_ACCOUNTS_ERROR = "Error loading account data"
BIND_FAILED_ERROR = "Could not save account to widget, please try again."


class BinderPhase(str, Enum):
    CHOOSING_KIND = "choosing_kind"
    LOADING_ACCOUNTS = "loading_accounts"
    CHOOSING_ACCOUNT = "choosing_account"
    NO_ACCOUNTS = "no_accounts"
    LOAD_FAILED = "load_failed"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    CLOSED = "closed"


class AccountBinder:
    """Wizard state for binding one widget.

    The binder owns no board state. On success it hands the updated widget
    to ``BoardStore.replace_widget``. Closing it at any point before
    submission leaves the board untouched.
    """

    def __init__(  # NOQA: PLR0913
        self,
        widget: Widget,
        store: BoardStore,
        remote_store: BoardRemoteStorePort,
        account_source: LinkedAccountSourcePort,
        success_display_seconds: float = 1.0,
        on_close: Optional[Callable[[], None]] = None,
    ):
        if widget.id is None:
            raise WidgetNotFoundError(None)
        self._widget = widget
        self._store = store
        self._remote_store = remote_store
        self._account_source = account_source
        self._success_display_seconds = success_display_seconds
        self._on_close = on_close

        self._generation = GenerationCounter()
        self._phase = BinderPhase.CHOOSING_KIND
        self._kind: WidgetKind | None = None
        self._listing: LinkedAccountListing | None = None
        self._options: tuple[AccountOptionDTO, ...] = ()
        self._selected: AccountRef | None = None
        self._error_message: str | None = None
        self._close_timer: asyncio.TimerHandle | None = None

    # -------------------------------------------------------------------------
    # Read-only view state
    # -------------------------------------------------------------------------

    @property
    def widget(self) -> Widget:
        return self._widget

    @property
    def phase(self) -> BinderPhase:
        return self._phase

    @property
    def kind(self) -> WidgetKind | None:
        return self._kind

    @property
    def options(self) -> tuple[AccountOptionDTO, ...]:
        return self._options

    @property
    def selected(self) -> AccountRef | None:
        return self._selected

    @property
    def error_message(self) -> str | None:
        return self._error_message

    @property
    def is_busy(self) -> bool:
        return self._phase is BinderPhase.SUBMITTING

    @property
    def is_closed(self) -> bool:
        return self._phase is BinderPhase.CLOSED

    @property
    def can_submit(self) -> bool:
        return (
            self._phase is BinderPhase.CHOOSING_ACCOUNT and self._selected is not None
        )

    # -------------------------------------------------------------------------
    # Step 1: kind
    # -------------------------------------------------------------------------

    async def choose_kind(
        self,
        kind: WidgetKind | str,
    ) -> tuple[AccountOptionDTO, ...] | None:
        """Pick a widget kind and fetch the accounts it can display.

        Returns the compatible options, or ``None`` when this fetch was
        superseded by a later choice, by closing the wizard, or failed.
        """
        self._ensure_open()
        if self.is_busy:
            raise OperationInProgressError("widget", self._widget.id, "bind")

        resolved = WidgetKind.parse(kind)
        token = self._generation.next()
        self._kind = resolved
        self._listing = None
        self._options = ()
        self._selected = None
        self._error_message = None
        self._phase = BinderPhase.LOADING_ACCOUNTS

        try:
            listing = await self._account_source.list_linked_accounts()
        except AccountListingError as e:
            if not self._generation.is_current(token):
                logger.debug("Ignoring failed stale account fetch for %s", resolved)
                return None
            logger.warning("Loading linked accounts failed: %s", e.message)
            self._phase = BinderPhase.LOAD_FAILED
            self._error_message = LOAD_ACCOUNTS_ERROR
            return None

        if not self._generation.is_current(token):
            logger.debug("Discarding stale account listing for %s", resolved.value)
            return None

        self._listing = listing
        self._options = compatible_account_options(listing, resolved)
        self._phase = (
            BinderPhase.CHOOSING_ACCOUNT if self._options else BinderPhase.NO_ACCOUNTS
        )
        return self._options

    # -------------------------------------------------------------------------
    # Step 2: account
    # -------------------------------------------------------------------------

    def select_account(self, institution_id: int, account_id: int) -> AccountOptionDTO:
        """Select exactly one of the offered accounts."""
        self._ensure_open()
        if self._phase is not BinderPhase.CHOOSING_ACCOUNT:
            raise BusinessRuleViolation(
                f"Cannot select an account while {self._phase.value}",
            )

        for option in self._options:
            if (
                option.ref.institution_id == institution_id
                and option.ref.account_id == account_id
            ):
                self._selected = option.ref
                self._error_message = None
                return option

        msg = f"Account {institution_id}:{account_id} is not available for this widget"
        raise ValidationError(msg)

    async def submit(self) -> Widget:
        """Send the binding and merge the confirmed widget into the board."""
        self._ensure_open()
        if self.is_busy:
            raise OperationInProgressError("widget", self._widget.id, "bind")
        if self._phase is not BinderPhase.CHOOSING_ACCOUNT or self._selected is None:
            error = NoAccountSelectedError()
            self._error_message = error.message
            raise error

        kind = self._kind
        account = self._listing.find_account(self._selected)  # type: ignore[union-attr]
        if kind is None or account is None:
            raise NoAccountSelectedError()
        updated = self._widget.bound_to(kind, [account])
        widget_id: int = self._widget.id  # type: ignore[assignment]

        self._error_message = None
        self._phase = BinderPhase.SUBMITTING
        try:
            with self._store.claim_widget(widget_id, "bind"):
                await self._remote_store.bind_widget(
                    widget_id,
                    kind,
                    updated.linked_accounts,
                )

            # The remote side has changed; reconcile even if the wizard closed
            self._store.replace_widget(updated)
            self._widget = updated
            if not self.is_closed:
                self._phase = BinderPhase.SUCCEEDED
        except MutationRejectedError as e:
            logger.warning("Binding widget %s was rejected: %s", widget_id, e.message)
            self._back_to_idle(BIND_FAILED_ERROR)
            raise
        finally:
            if self.is_busy:
                self._back_to_idle(None)

        logger.info(
            "Bound widget %s to %s (%s)",
            widget_id,
            kind.value,
            self._selected,
        )
        if not self.is_closed:
            self._schedule_close()
        return updated

    # -------------------------------------------------------------------------
    # Closing
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Abandon the wizard and everything selected so far."""
        if self.is_closed:
            return
        self._generation.invalidate()
        if self._close_timer is not None:
            self._close_timer.cancel()
            self._close_timer = None
        self._phase = BinderPhase.CLOSED
        self._kind = None
        self._listing = None
        self._options = ()
        self._selected = None
        self._error_message = None
        if self._on_close is not None:
            self._on_close()

    def _schedule_close(self) -> None:
        loop = asyncio.get_running_loop()
        self._close_timer = loop.call_later(self._success_display_seconds, self.close)

    def _back_to_idle(self, message: str | None) -> None:
        if self.is_closed:
            return
        self._phase = BinderPhase.CHOOSING_ACCOUNT
        self._error_message = message

    def _ensure_open(self) -> None:
        if self.is_closed:
            raise BusinessRuleViolation("The account selection has been closed")
