"""Board entities."""

from cashboard.domain.board.entities.row import Row
from cashboard.domain.board.entities.widget import Widget

__all__ = [
    "Row",
    "Widget",
]
