"""Board domain services."""

from cashboard.domain.board.services.row_factory import create_row

__all__ = ["create_row"]
