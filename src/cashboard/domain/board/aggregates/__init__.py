"""Board aggregates."""

from cashboard.domain.board.aggregates.board import Board

__all__ = ["Board"]
