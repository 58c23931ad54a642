"""Markers for requests that are still outstanding.

At most one mutating request may run per board, row or widget. Views read
``is_pending`` to disable the matching control; workflows wrap each request
in ``claim`` so the rule is enforced even if a control is bypassed.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from cashboard.domain.board import OperationInProgressError


class PendingEntity(str, Enum):
    BOARD = "board"
    ROW = "row"
    WIDGET = "widget"


@dataclass(frozen=True)
class PendingOperation:
    entity: PendingEntity
    entity_id: int | None
    operation: str

    @property
    def key(self) -> tuple[PendingEntity, int | None]:
        return (self.entity, self.entity_id)


class PendingOperations:
    """Set of in-flight operations keyed by entity."""

    def __init__(self) -> None:
        self._operations: dict[tuple[PendingEntity, int | None], PendingOperation] = {}

    def __len__(self) -> int:
        return len(self._operations)

    def __contains__(self, key: object) -> bool:
        return key in self._operations

    def is_pending(self, entity: PendingEntity, entity_id: int | None) -> bool:
        return (entity, entity_id) in self._operations

    def get(
        self,
        entity: PendingEntity,
        entity_id: int | None,
    ) -> PendingOperation | None:
        return self._operations.get((entity, entity_id))

    def snapshot(self) -> frozenset[PendingOperation]:
        return frozenset(self._operations.values())

    @contextmanager
    def claim(
        self,
        entity: PendingEntity,
        entity_id: int | None,
        operation: str,
    ) -> Iterator[PendingOperation]:
        """Mark an entity busy for the duration of the block."""
        pending = PendingOperation(entity, entity_id, operation)
        if pending.key in self._operations:
            raise OperationInProgressError(entity.value, entity_id, operation)

        self._operations[pending.key] = pending
        try:
            yield pending
        finally:
            self._operations.pop(pending.key, None)
