"""DTO for a selectable account in the account binder."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from cashboard.domain.accounts import LinkedAccount, LinkedAccountListing
from cashboard.domain.board import AccountRef, WidgetKind


@dataclass(frozen=True)
class AccountOptionDTO:
    """Linked account as offered to the user, with display labels."""

    ref: AccountRef
    institution_name: str
    account_name: str
    account_type: str
    mask: Optional[str]
    added_at: Optional[datetime]

    @classmethod
    def from_linked_account(
        cls,
        account: LinkedAccount,
        institution_name: str,
    ) -> AccountOptionDTO:
        return cls(
            ref=account.ref,
            institution_name=institution_name,
            account_name=account.name,
            account_type=account.account_type,
            mask=account.mask,
            added_at=account.created_at,
        )

    @property
    def label(self) -> str:
        return f"{self.institution_name} {self.account_name}".strip()

    @property
    def masked_number(self) -> str:
        return f"••••{self.mask}" if self.mask else ""

    @property
    def added_label(self) -> str:
        if self.added_at is None:
            return ""
        added = self.added_at
        return f"Added: {added:%B} {added.day}, {added.year}"


def compatible_account_options(
    listing: LinkedAccountListing,
    kind: WidgetKind,
) -> tuple[AccountOptionDTO, ...]:
    """Accounts from ``listing`` that ``kind`` can display, in listing order."""
    return tuple(
        AccountOptionDTO.from_linked_account(
            account,
            listing.institution_name(account.institution_id),
        )
        for account in listing.accounts
        if kind.accepts(account.account_type)
    )
