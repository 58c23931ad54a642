"""Remote store adapter implementing the board and account ports over HTTP."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from cashboard.domain.accounts import (
    AccountListingError,
    LinkedAccount,
    LinkedAccountListing,
    LinkedAccountSourcePort,
    LinkedInstitution,
)
from cashboard.domain.board import (
    AccountRef,
    Board,
    BoardLoadError,
    BoardRemoteStorePort,
    ColumnType,
    MutationRejectedError,
    Row,
    RowType,
    Widget,
    WidgetKind,
)
from cashboard.domain.shared import DomainException
from cashboard.infrastructure.remote.client import RemoteRequestError
from cashboard.infrastructure.remote.contracts import (
    AccountListingResponse,
    AddRowRequest,
    AddRowResponse,
    BindWidgetRequest,
    BoardContract,
    DeleteRowRequest,
    LoadBoardResponse,
    MessageResponse,
    RowContract,
    UnbindWidgetRequest,
    WidgetContract,
    WidgetLinkedAccountContract,
)

if TYPE_CHECKING:
    from cashboard.infrastructure.remote.client import CashflowApiClient

logger = logging.getLogger(__name__)

LOAD_BOARD_PATH = "/api/retrieveWidgets"
ADD_ROW_PATH = "/api/AddRowToWidgetBoard"
DELETE_ROW_PATH = "/api/DeleteRowToWidgetBoard"
BIND_WIDGET_PATH = "/api/SaveWidgetAccount"
UNBIND_WIDGET_PATH = "/api/DeleteWidgetAccount"
LIST_ACCOUNTS_PATH = "/api/retrieve_user_account/"

MALFORMED_BOARD = "The server sent a widget board that could not be read."
MALFORMED_ROW = "The server sent a row that could not be read."


class HttpBoardRemoteStore(BoardRemoteStorePort, LinkedAccountSourcePort):
    """Infrastructure adapter for the widget board API.

    Translates domain objects to wire contracts and client failures to
    domain exceptions.
    """

    def __init__(self, client: CashflowApiClient):
        self._client = client

    async def load_board(self) -> Board:
        try:
            response = await self._client.get(LOAD_BOARD_PATH, LoadBoardResponse)
        except RemoteRequestError as e:
            raise BoardLoadError(e.message) from e

        if response.board is None:
            raise BoardLoadError()

        try:
            return board_from_contract(response.board)
        except (ValueError, DomainException) as e:
            logger.warning("Rejecting malformed widget board: %s", e)
            raise BoardLoadError(MALFORMED_BOARD) from e

    async def add_row(self, board: Board, draft: Row) -> Row:
        request = AddRowRequest(
            board=BoardContract(
                board_id=_wire_id(board.id),
                user_id=_wire_id(board.owner_id),
                rows=[row_to_contract(draft)],
            ),
        )
        try:
            response = await self._client.post(ADD_ROW_PATH, request, AddRowResponse)
        except RemoteRequestError as e:
            raise MutationRejectedError(e.message, operation="add_row") from e

        try:
            return row_from_contract(response.returned_row)
        except (ValueError, DomainException) as e:
            logger.warning("Rejecting malformed returned row: %s", e)
            raise MutationRejectedError(MALFORMED_ROW, operation="add_row") from e

    async def delete_row(self, row_id: int) -> None:
        try:
            await self._client.post(
                DELETE_ROW_PATH,
                DeleteRowRequest(row_id=row_id),
                MessageResponse,
            )
        except RemoteRequestError as e:
            raise MutationRejectedError(
                e.message,
                operation="delete_row",
                details={"row_id": row_id},
            ) from e

    async def bind_widget(
        self,
        widget_id: int,
        kind: WidgetKind,
        accounts: Sequence[AccountRef],
    ) -> None:
        request = BindWidgetRequest(
            widget_id=widget_id,
            widget_type=kind.value,
            institution_ids=[ref.institution_id for ref in accounts],
            account_ids=[ref.account_id for ref in accounts],
        )
        try:
            await self._client.post(BIND_WIDGET_PATH, request, MessageResponse)
        except RemoteRequestError as e:
            raise MutationRejectedError(
                e.message,
                operation="bind_widget",
                details={"widget_id": widget_id},
            ) from e

    async def unbind_widget(self, widget_id: int) -> None:
        try:
            await self._client.post(
                UNBIND_WIDGET_PATH,
                UnbindWidgetRequest(widget_id=widget_id),
                MessageResponse,
            )
        except RemoteRequestError as e:
            raise MutationRejectedError(
                e.message,
                operation="unbind_widget",
                details={"widget_id": widget_id},
            ) from e

    async def list_linked_accounts(self) -> LinkedAccountListing:
        try:
            response = await self._client.get(
                LIST_ACCOUNTS_PATH,
                AccountListingResponse,
            )
        except RemoteRequestError as e:
            raise AccountListingError(e.message) from e

        try:
            return listing_from_contract(response)
        except ValueError as e:
            logger.warning("Rejecting malformed account listing: %s", e)
            raise AccountListingError() from e


# =============================================================================
# Contract <-> domain mapping
# =============================================================================


def _domain_id(wire_id: int | None) -> int | None:
    return wire_id or None


def _wire_id(domain_id: int | None) -> int:
    return domain_id if domain_id is not None else 0


def board_from_contract(contract: BoardContract) -> Board:
    rows = sorted(contract.rows, key=lambda row: row.sort_order)
    return Board(
        id=_domain_id(contract.board_id),
        owner_id=_domain_id(contract.user_id),
        rows=tuple(row_from_contract(row) for row in rows),
    )


def row_from_contract(contract: RowContract) -> Row:
    row_type = RowType.parse(contract.row_type)
    if row_type is None:
        msg = f"Unknown row type {contract.row_type!r}"
        raise ValueError(msg)

    row_id = _domain_id(contract.row_id)
    if row_id is None:
        msg = "Persisted row has no id"
        raise ValueError(msg)

    widgets = sorted(contract.widgets, key=lambda widget: widget.sort_order)
    return Row(
        id=row_id,
        board_id=_domain_id(contract.board_id),
        row_type=row_type,
        sort_order=contract.sort_order,
        widgets=tuple(widget_from_contract(widget, row_id) for widget in widgets),
    )


def widget_from_contract(contract: WidgetContract, row_id: int) -> Widget:
    widget_id = _domain_id(contract.widget_id)
    if widget_id is None:
        msg = "Persisted widget has no id"
        raise ValueError(msg)

    kind = WidgetKind.parse(contract.widget_type) if contract.widget_type else None
    return Widget(
        id=widget_id,
        row_id=_domain_id(contract.row_id) or row_id,
        column_type=ColumnType(contract.column_type),
        sort_order=contract.sort_order,
        kind=kind,
        linked_accounts=tuple(
            AccountRef(
                institution_id=linked.linked_institution_id,
                account_id=linked.linked_account_id,
            )
            for linked in contract.linked_accounts
        ),
    )


def row_to_contract(row: Row) -> RowContract:
    return RowContract(
        row_id=_wire_id(row.id),
        board_id=_wire_id(row.board_id),
        row_type=row.row_type.value,
        sort_order=row.sort_order,
        widgets=[widget_to_contract(widget) for widget in row.widgets],
    )


def widget_to_contract(widget: Widget) -> WidgetContract:
    return WidgetContract(
        widget_id=_wire_id(widget.id),
        widget_type=widget.kind.value if widget.kind else None,
        row_id=_wire_id(widget.row_id),
        column_type=widget.column_type.value,
        sort_order=widget.sort_order,
        linked_accounts=[
            WidgetLinkedAccountContract(
                widget_id=_wire_id(widget.id),
                linked_account_id=ref.account_id,
                linked_institution_id=ref.institution_id,
            )
            for ref in widget.linked_accounts
        ],
    )


def listing_from_contract(response: AccountListingResponse) -> LinkedAccountListing:
    return LinkedAccountListing(
        accounts=tuple(
            LinkedAccount(
                account_id=account.account_id,
                institution_id=account.linked_institution_id,
                name=account.name,
                account_type=account.type,
                mask=account.mask,
                official_name=account.official_name,
                subtype=account.subtype,
                created_at=account.created_at,
            )
            for account in response.accounts
        ),
        institutions=tuple(
            LinkedInstitution(
                institution_id=institution.linked_institution_id,
                name=institution.institution_name,
            )
            for institution in response.institutions
        ),
    )
