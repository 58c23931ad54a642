"""Application DTOs."""

from cashboard.application.dtos.account_option_dto import (
    AccountOptionDTO,
    compatible_account_options,
)

__all__ = [
    "AccountOptionDTO",
    "compatible_account_options",
]
