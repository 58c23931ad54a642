"""Unit tests for WidgetUnbinder."""

from unittest.mock import AsyncMock, Mock

import pytest

from cashboard.application.services import (
    UNBIND_FAILED_ERROR,
    BoardStore,
    UnbindPhase,
    WidgetUnbinder,
)
from cashboard.domain.board import (
    BoardNotReadyError,
    MutationRejectedError,
    RowType,
    WidgetNotBoundError,
)
from cashboard.domain.shared import BusinessRuleViolation
from tests.shared.fixtures.factories import InMemoryRemoteStore, TestBoardFactory


@pytest.fixture
def remote():
    return InMemoryRemoteStore(
        board=TestBoardFactory.board(
            TestBoardFactory.row(
                row_id=1,
                row_type=RowType.NARROW_WIDE,
                bound={1: TestBoardFactory.spend_binding()},
            ),
        ),
    )


@pytest.fixture
async def store(remote):
    store = BoardStore(remote)
    await store.load()
    return store


class TestWidgetUnbinder:
    """Tests for the confirm-then-unbind flow."""

    @pytest.mark.asyncio
    async def test_placeholder_cannot_be_unbound(self, store, remote):
        unbinder = WidgetUnbinder(store.board.find_widget(11), store, remote)

        with pytest.raises(WidgetNotBoundError):
            unbinder.request()

        assert unbinder.phase is UnbindPhase.IDLE

    @pytest.mark.asyncio
    async def test_cancel_returns_to_idle(self, store, remote):
        unbinder = WidgetUnbinder(store.board.find_widget(12), store, remote)

        unbinder.request()
        assert unbinder.phase is UnbindPhase.CONFIRMING
        unbinder.cancel()

        assert unbinder.phase is UnbindPhase.IDLE
        assert store.board.find_widget(12).is_bound

    @pytest.mark.asyncio
    async def test_confirm_requires_request(self, store, remote):
        unbinder = WidgetUnbinder(store.board.find_widget(12), store, remote)

        with pytest.raises(BusinessRuleViolation):
            await unbinder.confirm()

    @pytest.mark.asyncio
    async def test_confirm_clears_widget(self, store, remote):
        before = store.board.find_widget(12)
        unbinder = WidgetUnbinder(before, store, remote)
        unbinder.request()

        cleared = await unbinder.confirm()

        assert unbinder.phase is UnbindPhase.DONE
        assert cleared.is_placeholder
        assert cleared.column_type is before.column_type
        assert store.board.find_widget(12) is cleared
        assert ("unbind_widget", 12) in remote.calls

    @pytest.mark.asyncio
    async def test_rejection_keeps_binding(self, store, remote):
        remote.unbind_widget = AsyncMock(side_effect=MutationRejectedError("nope"))
        unbinder = WidgetUnbinder(store.board.find_widget(12), store, remote)
        unbinder.request()

        with pytest.raises(MutationRejectedError):
            await unbinder.confirm()

        assert unbinder.phase is UnbindPhase.CONFIRMING
        assert unbinder.error_message == UNBIND_FAILED_ERROR
        assert store.board.find_widget(12).is_bound
        assert len(store.pending) == 0

    @pytest.mark.asyncio
    async def test_row_can_be_deleted_once_cleared(self, store, remote):
        unbinder = WidgetUnbinder(store.board.find_widget(12), store, remote)
        unbinder.request()
        await unbinder.confirm()

        await store.delete_row(1)

        assert store.board.rows == ()

    @pytest.mark.asyncio
    async def test_replace_failure_returns_to_confirming(self, store, remote):
        store.replace_widget = Mock(
            side_effect=BoardNotReadyError("loading", "replace a widget"),
        )
        unbinder = WidgetUnbinder(store.board.find_widget(12), store, remote)
        unbinder.request()

        with pytest.raises(BoardNotReadyError):
            await unbinder.confirm()

        assert unbinder.phase is UnbindPhase.CONFIRMING
        assert len(store.pending) == 0
