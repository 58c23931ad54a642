"""Wire contracts for the CashflowAnalysis widget board API.

Field aliases mirror the JSON produced by the remote store. Unpersisted
ids travel as ``0``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def _none_as_empty(v: Any) -> Any:
    return [] if v is None else v


# -----------------------------------------------------------------------------
# Board
# -----------------------------------------------------------------------------


class WidgetLinkedAccountContract(_WireModel):
    widget_id: int = Field(default=0, alias="WidgetID")
    linked_account_id: int = Field(alias="LinkedAccountID")
    linked_institution_id: int = Field(alias="LinkedInstitutionID")
    created_at: datetime | None = Field(default=None, alias="CreatedAt")


class WidgetContract(_WireModel):
    widget_id: int = Field(default=0, alias="WidgetID")
    widget_type: str | None = Field(default=None, alias="WidgetType")
    row_id: int | None = Field(default=None, alias="RowID")
    column_type: str = Field(alias="ColumnType")
    sort_order: int = Field(alias="SortOrder")
    linked_accounts: list[WidgetLinkedAccountContract] = Field(
        default_factory=list,
        alias="LinkedAccounts",
    )

    @field_validator("linked_accounts", mode="before")
    @classmethod
    def _null_accounts(cls, v: Any) -> Any:
        return _none_as_empty(v)

    @field_validator("widget_type", mode="before")
    @classmethod
    def _blank_type_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class RowContract(_WireModel):
    row_id: int = Field(default=0, alias="RowID")
    board_id: int = Field(default=0, alias="WidgetBoardID")
    row_type: str = Field(alias="RowType")
    sort_order: int = Field(alias="SortOrder")
    widgets: list[WidgetContract] = Field(default_factory=list, alias="Widgets")

    @field_validator("widgets", mode="before")
    @classmethod
    def _null_widgets(cls, v: Any) -> Any:
        return _none_as_empty(v)


class BoardContract(_WireModel):
    board_id: int = Field(default=0, alias="WidgetBoardID")
    user_id: int = Field(default=0, alias="UserID")
    rows: list[RowContract] = Field(default_factory=list, alias="WidgetBoardRows")

    @field_validator("rows", mode="before")
    @classmethod
    def _null_rows(cls, v: Any) -> Any:
        return _none_as_empty(v)


class LoadBoardResponse(_WireModel):
    board: BoardContract | None = Field(default=None, alias="WidgetBoardData")


class AddRowRequest(_WireModel):
    board: BoardContract = Field(alias="WidgetBoard")


class AddRowResponse(_WireModel):
    message: str = ""
    returned_row: RowContract = Field(alias="ReturnedRow")


class DeleteRowRequest(_WireModel):
    row_id: int = Field(alias="RowID")


class BindWidgetRequest(_WireModel):
    widget_id: int = Field(alias="WidgetID")
    widget_type: str = Field(alias="WidgetType")
    institution_ids: list[int] = Field(alias="InstitutionID")
    account_ids: list[int] = Field(alias="AccountID")


class UnbindWidgetRequest(_WireModel):
    widget_id: int = Field(alias="WidgetID")


class MessageResponse(_WireModel):
    message: str = ""


class ErrorResponse(_WireModel):
    error: str


# -----------------------------------------------------------------------------
# Linked accounts
# -----------------------------------------------------------------------------


class LinkedInstitutionContract(_WireModel):
    linked_institution_id: int = Field(alias="LinkedInstitutionID")
    institution_name: str = Field(default="", alias="InstitutionName")


class LinkedAccountContract(_WireModel):
    account_id: int = Field(alias="AccountID")
    linked_institution_id: int = Field(alias="LinkedInstitutionID")
    name: str = Field(default="", alias="Name")
    type: str = Field(alias="Type")
    mask: str | None = Field(default=None, alias="Mask")
    official_name: str | None = Field(default=None, alias="OfficialName")
    subtype: str | None = Field(default=None, alias="Subtype")
    created_at: datetime | None = Field(default=None, alias="CreatedAt")


class AccountListingResponse(_WireModel):
    accounts: list[LinkedAccountContract] = Field(default_factory=list)
    institutions: list[LinkedInstitutionContract] = Field(default_factory=list)

    @field_validator("accounts", "institutions", mode="before")
    @classmethod
    def _null_lists(cls, v: Any) -> Any:
        return _none_as_empty(v)
