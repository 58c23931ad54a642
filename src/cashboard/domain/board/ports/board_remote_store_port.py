"""Board remote store port interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from cashboard.domain.board.aggregates import Board
    from cashboard.domain.board.entities import Row
    from cashboard.domain.board.value_objects import AccountRef, WidgetKind


class BoardRemoteStorePort(ABC):
    """
    Interface for the remote store that persists a user's board.

    The remote side is the source of truth for identifiers and ordering.
    Implementations carry the user's session themselves.
    """

    @abstractmethod
    async def load_board(self) -> Board:
        """
        Fetch the persisted board, created empty by the remote side if absent.

        Raises
        ------
        BoardLoadError
            If the board cannot be fetched
        """

    @abstractmethod
    async def add_row(self, board: Board, draft: Row) -> Row:
        """
        Persist a draft row.

        Parameters
        ----------
        board
            Board the row is added to (its identity travels with the request)
        draft
            Unpersisted row built by the row factory

        Returns
        -------
        The row as persisted, with real row and widget ids

        Raises
        ------
        MutationRejectedError
            If the remote store refuses the row
        """

    @abstractmethod
    async def delete_row(self, row_id: int) -> None:
        """
        Delete a persisted row.

        Raises
        ------
        MutationRejectedError
            If the remote store refuses the deletion
        """

    @abstractmethod
    async def bind_widget(
        self,
        widget_id: int,
        kind: WidgetKind,
        accounts: Sequence[AccountRef],
    ) -> None:
        """
        Bind a widget to a kind and its linked accounts.

        Raises
        ------
        MutationRejectedError
            If the remote store refuses the binding
        """

    @abstractmethod
    async def unbind_widget(self, widget_id: int) -> None:
        """
        Return a widget to the placeholder state.

        Raises
        ------
        MutationRejectedError
            If the remote store refuses the change
        """
