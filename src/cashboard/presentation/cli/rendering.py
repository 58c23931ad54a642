"""Rich renderables for boards and account options."""

from __future__ import annotations

from typing import Sequence

from rich.table import Table

from cashboard.application.dtos import AccountOptionDTO
from cashboard.domain.board import Board, Row, Widget

_PLACEHOLDER = "[dim]+ add widget[/dim]"


def render_board(board: Board, title: str | None = None) -> Table:
    table = Table(
        title=title or f"Widget board {board.id or ''}".strip(),
        show_lines=True,
    )
    table.add_column("Row", justify="right", style="cyan")
    table.add_column("Type", justify="center")
    table.add_column("Widgets")

    if not board.rows:
        table.add_row("-", "-", "[dim]No rows yet. Add one with 'board add-row'.[/dim]")
        return table

    for row in board.rows:
        table.add_row(str(row.id), row.row_type.value, render_row_widgets(row))
    return table


def render_row_widgets(row: Row) -> str:
    return "   ".join(render_widget(widget) for widget in row.widgets)


def render_widget(widget: Widget) -> str:
    span = f"{widget.column_type.grid_span}/12"
    if widget.is_placeholder:
        return f"[{widget.id}] {span} {_PLACEHOLDER}"
    accounts = ", ".join(str(ref) for ref in widget.linked_accounts)
    kind = widget.kind.value  # type: ignore[union-attr]
    return f"[{widget.id}] {span} [bold]{kind}[/bold] ({accounts})"


def render_account_options(
    options: Sequence[AccountOptionDTO],
    title: str = "Select Account",
) -> Table:
    table = Table(title=title)
    table.add_column("Account", style="cyan")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Number")
    table.add_column("Added", style="dim")

    for option in options:
        table.add_row(
            str(option.ref),
            option.label,
            option.account_type,
            option.masked_number,
            option.added_label,
        )
    return table
