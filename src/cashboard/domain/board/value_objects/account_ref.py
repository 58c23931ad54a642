"""Account reference value object."""

from pydantic import BaseModel, ConfigDict, Field


class AccountRef(BaseModel):
    """Weak reference to a linked account held at an institution."""

    institution_id: int = Field(..., gt=0)
    account_id: int = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.institution_id}:{self.account_id}"
