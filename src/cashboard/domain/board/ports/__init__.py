"""Ports for board persistence."""

from cashboard.domain.board.ports.board_remote_store_port import (
    BoardRemoteStorePort,
)

__all__ = ["BoardRemoteStorePort"]
