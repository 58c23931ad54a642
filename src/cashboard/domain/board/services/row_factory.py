"""Row factory - builds unpersisted row skeletons."""

from __future__ import annotations

import logging

from cashboard.domain.board.entities import Row, Widget
from cashboard.domain.board.value_objects import RowType

logger = logging.getLogger(__name__)


def create_row(
    sort_order: int,
    row_type: RowType | str,
    board_id: int | None,
) -> Row | None:
    """Build a draft row of placeholder widgets for ``row_type``.

    The row and its widgets carry no ids; the remote store assigns them.
    Widget column types follow the layout table in order. An unknown tag
    yields ``None`` instead of raising.
    """
    resolved = RowType.parse(row_type)
    if resolved is None:
        logger.warning("Ignoring unknown row type %r", row_type)
        return None

    widgets = tuple(
        Widget(column_type=column_type, sort_order=position)
        for position, column_type in enumerate(resolved.column_types, start=1)
    )
    return Row(
        row_type=resolved,
        sort_order=sort_order,
        widgets=widgets,
        board_id=board_id,
    )
