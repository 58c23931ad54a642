"""Ports for linked account retrieval."""

from cashboard.domain.accounts.ports.linked_account_source_port import (
    LinkedAccountSourcePort,
)

__all__ = ["LinkedAccountSourcePort"]
