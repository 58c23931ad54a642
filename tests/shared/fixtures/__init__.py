"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.factories import (
    InMemoryRemoteStore,
    TestAccountFactory,
    TestBoardFactory,
)

__all__ = [
    "InMemoryRemoteStore",
    "TestAccountFactory",
    "TestBoardFactory",
]
