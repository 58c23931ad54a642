"""Cashboard CLI application using Typer.

Each command loads the board through ``BoardStore``, performs one
operation and prints the resulting board.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncIterator

import typer
from rich.console import Console

from cashboard.application.dtos import compatible_account_options
from cashboard.application.services import (
    AccountBinder,
    BoardStore,
    WidgetUnbinder,
)
from cashboard.application.state import BoardStatus
from cashboard.domain.board import AccountRef, Board, WidgetKind, WidgetNotFoundError
from cashboard.domain.shared import DomainException, ValidationError
from cashboard.infrastructure.remote import CashflowApiClient, HttpBoardRemoteStore
from cashboard.presentation.cli.rendering import render_account_options, render_board
from cashboard_config import Settings, get_settings

app = typer.Typer(
    name="cashboard",
    help="Cashboard - compose your widget dashboard from the command line",
    no_args_is_help=True,
)
board_app = typer.Typer(
    name="board",
    help="Rows of the widget board",
    no_args_is_help=True,
)
widget_app = typer.Typer(
    name="widget",
    help="Widget bindings",
    no_args_is_help=True,
)
accounts_app = typer.Typer(
    name="accounts",
    help="Linked accounts",
    no_args_is_help=True,
)
app.add_typer(board_app)
app.add_typer(widget_app)
app.add_typer(accounts_app)

console = Console()
logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_logging() -> None:
    """Configure application logging.

    Sets up console logging with timestamps and module names, the level
    from settings for cashboard modules, and WARNING for httpx.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger("cashboard").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@asynccontextmanager
async def open_remote_store(settings: Settings) -> AsyncIterator[HttpBoardRemoteStore]:
    """Yield a remote store bound to the configured session."""
    token = (
        settings.api_session_token.get_secret_value()
        if settings.api_session_token
        else None
    )
    async with CashflowApiClient(
        base_url=settings.api_base_url,
        session_token=token,
        session_cookie_name=settings.api_session_cookie_name,
        timeout=settings.api_timeout_seconds,
    ) as client:
        yield HttpBoardRemoteStore(client)


async def _load(remote: HttpBoardRemoteStore) -> BoardStore:
    store = BoardStore(remote)
    state = await store.load()
    if state.status is BoardStatus.ERROR:
        console.print(f"[red]{state.error}[/red]")
        raise typer.Exit(code=1)
    return store


def _run(coro) -> None:
    configure_logging()
    try:
        asyncio.run(coro)
    except DomainException as e:
        logger.debug("Command failed: %r", e)
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=1) from e


def _parse_account(value: str) -> AccountRef:
    institution, sep, account = value.partition(":")
    msg = f"Accounts are written INSTITUTION_ID:ACCOUNT_ID, got {value!r}"
    if not sep or not institution.isdigit() or not account.isdigit():
        raise ValidationError(msg)
    try:
        return AccountRef(institution_id=int(institution), account_id=int(account))
    except ValueError as e:
        raise ValidationError(msg) from e


def _show(board: Board | None) -> None:
    if board is not None:
        console.print(render_board(board))


# -----------------------------------------------------------------------------
# board
# -----------------------------------------------------------------------------


@board_app.command("show")
def show_board() -> None:
    """Show the widget board."""

    async def _show_board() -> None:
        async with open_remote_store(get_settings()) as remote:
            store = await _load(remote)
            _show(store.board)

    _run(_show_board())


@board_app.command("add-row")
def add_row(
    row_type: str = typer.Argument(..., help="Row shape: 1, 2a, 2b or 3"),
) -> None:
    """Add a row of empty widgets."""

    async def _add_row() -> None:
        async with open_remote_store(get_settings()) as remote:
            store = await _load(remote)
            row = await store.add_row(row_type)
            console.print(f"[green]Added row {row.id}[/green]")
            _show(store.board)

    _run(_add_row())


@board_app.command("delete-row")
def delete_row(row_id: int = typer.Argument(..., help="Row to delete")) -> None:
    """Delete a row whose widgets are all empty."""

    async def _delete_row() -> None:
        async with open_remote_store(get_settings()) as remote:
            store = await _load(remote)
            await store.delete_row(row_id)
            console.print(f"[green]Deleted row {row_id}[/green]")
            _show(store.board)

    _run(_delete_row())


# -----------------------------------------------------------------------------
# widget
# -----------------------------------------------------------------------------


@widget_app.command("bind")
def bind_widget(
    widget_id: int = typer.Argument(..., help="Widget to bind"),
    kind: str = typer.Option(..., "--kind", "-k", help="Widget kind"),
    account: str = typer.Option(
        ...,
        "--account",
        "-a",
        help="Account as INSTITUTION_ID:ACCOUNT_ID",
    ),
) -> None:
    """Bind a widget to a kind and one compatible linked account."""

    async def _bind() -> None:
        settings = get_settings()
        ref = _parse_account(account)
        async with open_remote_store(settings) as remote:
            store = await _load(remote)
            widget = store.board.find_widget(widget_id)  # type: ignore[union-attr]
            if widget is None:
                raise WidgetNotFoundError(widget_id)

            binder = AccountBinder(
                widget,
                store,
                remote,
                remote,
                success_display_seconds=settings.binder_success_display_seconds,
            )
            try:
                options = await binder.choose_kind(kind)
                if not options:
                    label = binder.kind.value if binder.kind else kind
                    message = (
                        binder.error_message
                        or f"No bank accounts to add to a {label} widget"
                    )
                    console.print(f"[red]{message}[/red]")
                    raise typer.Exit(code=1)
                binder.select_account(ref.institution_id, ref.account_id)
                updated = await binder.submit()
            finally:
                binder.close()

            console.print(
                f"[green]Widget {updated.id} now shows "
                f"{updated.kind.value}[/green]",  # type: ignore[union-attr]
            )
            _show(store.board)

    _run(_bind())


@widget_app.command("unbind")
def unbind_widget(
    widget_id: int = typer.Argument(..., help="Widget to clear"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Remove a widget's binding, leaving an empty tile."""

    async def _unbind() -> None:
        async with open_remote_store(get_settings()) as remote:
            store = await _load(remote)
            widget = store.board.find_widget(widget_id)  # type: ignore[union-attr]
            if widget is None:
                raise WidgetNotFoundError(widget_id)

            unbinder = WidgetUnbinder(widget, store, remote)
            unbinder.request()
            if not yes and not typer.confirm(
                "Are you sure you want to delete this widget?",
            ):
                unbinder.cancel()
                console.print("Cancelled")
                return

            await unbinder.confirm()
            console.print(f"[green]Widget {widget_id} cleared[/green]")
            _show(store.board)

    _run(_unbind())


# -----------------------------------------------------------------------------
# accounts
# -----------------------------------------------------------------------------


@accounts_app.command("list")
def list_accounts(
    kind: str = typer.Option(..., "--kind", "-k", help="Widget kind to filter for"),
) -> None:
    """List linked accounts a widget kind can display."""

    async def _list() -> None:
        widget_kind = WidgetKind.parse(kind)
        async with open_remote_store(get_settings()) as remote:
            listing = await remote.list_linked_accounts()
            options = compatible_account_options(listing, widget_kind)
            if not options:
                console.print(
                    f"[yellow]No bank accounts to add to a "
                    f"{widget_kind.value} widget[/yellow]",
                )
                return
            console.print(render_account_options(options))

    _run(_list())


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
