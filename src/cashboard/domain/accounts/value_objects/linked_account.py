"""Linked account value objects.

These are the board's read-only view of accounts the user linked through
the account aggregator. The board never owns or mutates them.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cashboard.domain.board.value_objects.account_ref import AccountRef


class LinkedInstitution(BaseModel):
    """A financial institution the user has linked."""

    institution_id: int = Field(..., gt=0)
    name: str = Field(default="", max_length=255)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


class LinkedAccount(BaseModel):
    """A single account held at a linked institution."""

    account_id: int = Field(..., gt=0)
    institution_id: int = Field(..., gt=0)
    name: str = Field(default="", max_length=255)
    account_type: str = Field(
        ...,
        description="Aggregator account type (e.g. 'depository', 'credit')",
    )
    mask: str | None = Field(default=None, max_length=16)
    official_name: str | None = None
    subtype: str | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("account_type")
    @classmethod
    def normalize_account_type(cls, v: str) -> str:
        normalized = v.strip().lower()
        if not normalized:
            msg = "Account type cannot be empty"
            raise ValueError(msg)
        return normalized

    @property
    def ref(self) -> AccountRef:
        return AccountRef(
            institution_id=self.institution_id,
            account_id=self.account_id,
        )


class LinkedAccountListing(BaseModel):
    """Everything the account-listing source returned in one call."""

    accounts: tuple[LinkedAccount, ...] = ()
    institutions: tuple[LinkedInstitution, ...] = ()

    model_config = ConfigDict(frozen=True)

    def institution_name(self, institution_id: int) -> str:
        for institution in self.institutions:
            if institution.institution_id == institution_id:
                return institution.name
        return ""

    def find_account(self, ref: AccountRef) -> LinkedAccount | None:
        for account in self.accounts:
            if account.ref == ref:
                return account
        return None
