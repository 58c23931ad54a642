"""Unit tests for pending operation markers."""

import pytest

from cashboard.application.state import (
    PendingEntity,
    PendingOperation,
    PendingOperations,
)
from cashboard.domain.board import OperationInProgressError


class TestPendingOperations:
    """Tests for PendingOperations.claim."""

    def test_claim_marks_entity_busy(self):
        pending = PendingOperations()

        with pending.claim(PendingEntity.ROW, 4, "delete_row") as operation:
            assert pending.is_pending(PendingEntity.ROW, 4)
            assert (PendingEntity.ROW, 4) in pending
            assert pending.get(PendingEntity.ROW, 4) == operation
            assert pending.snapshot() == frozenset(
                {PendingOperation(PendingEntity.ROW, 4, "delete_row")},
            )

        assert not pending.is_pending(PendingEntity.ROW, 4)
        assert len(pending) == 0

    def test_second_claim_on_same_entity_is_refused(self):
        pending = PendingOperations()

        with pending.claim(PendingEntity.WIDGET, 9, "bind"):
            with pytest.raises(OperationInProgressError):
                with pending.claim(PendingEntity.WIDGET, 9, "unbind"):
                    pass

            assert pending.get(PendingEntity.WIDGET, 9).operation == "bind"

    def test_different_entities_do_not_conflict(self):
        pending = PendingOperations()

        with pending.claim(PendingEntity.WIDGET, 9, "bind"):
            with pending.claim(PendingEntity.WIDGET, 10, "bind"):
                with pending.claim(PendingEntity.ROW, 9, "delete_row"):
                    assert len(pending) == 3

    def test_claim_is_released_on_error(self):
        pending = PendingOperations()

        with pytest.raises(RuntimeError):
            with pending.claim(PendingEntity.BOARD, 1, "add_row"):
                raise RuntimeError("boom")

        assert not pending.is_pending(PendingEntity.BOARD, 1)
