"""Widget entity - a single dashboard tile."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Sequence

from cashboard.domain.board.exceptions import IncompatibleAccountError
from cashboard.domain.board.value_objects import AccountRef, ColumnType, WidgetKind

if TYPE_CHECKING:
    from cashboard.domain.accounts import LinkedAccount


@dataclass(frozen=True)
class Widget:
    """A tile inside a row.

    A widget is either a placeholder (no kind, no accounts) or bound to one
    kind and at least one linked account. Its column type is fixed by its
    position in the row and never changes.

    ``id`` and ``row_id`` are ``None`` until the remote store assigns them.
    """

    column_type: ColumnType
    sort_order: int
    id: int | None = None
    row_id: int | None = None
    kind: WidgetKind | None = None
    linked_accounts: tuple[AccountRef, ...] = ()

    def __post_init__(self):
        if self.kind is None and self.linked_accounts:
            msg = "A placeholder widget cannot have linked accounts"
            raise ValueError(msg)
        if self.kind is not None and not self.linked_accounts:
            msg = f"A {self.kind.value} widget needs at least one linked account"
            raise ValueError(msg)
        if len(set(self.linked_accounts)) != len(self.linked_accounts):
            msg = "Linked accounts must be unique"
            raise ValueError(msg)

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @property
    def is_placeholder(self) -> bool:
        return self.kind is None

    @property
    def is_bound(self) -> bool:
        return self.kind is not None

    def bound_to(
        self,
        kind: WidgetKind,
        accounts: Sequence[LinkedAccount],
    ) -> Widget:
        """Return a copy bound to ``kind`` and the given accounts."""
        if not accounts:
            msg = f"A {kind.value} widget needs at least one linked account"
            raise ValueError(msg)
        for account in accounts:
            if not kind.accepts(account.account_type):
                raise IncompatibleAccountError(kind.value, account.account_type)
        return replace(
            self,
            kind=kind,
            linked_accounts=tuple(account.ref for account in accounts),
        )

    def cleared(self) -> Widget:
        """Return a placeholder copy of this widget."""
        return replace(self, kind=None, linked_accounts=())
