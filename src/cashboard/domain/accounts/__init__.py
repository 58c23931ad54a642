"""Linked accounts - the externally owned accounts a widget can display."""

from cashboard.domain.accounts.exceptions import AccountListingError
from cashboard.domain.accounts.ports import LinkedAccountSourcePort
from cashboard.domain.accounts.value_objects import (
    LinkedAccount,
    LinkedAccountListing,
    LinkedInstitution,
)

__all__ = [
    "AccountListingError",
    "LinkedAccount",
    "LinkedAccountListing",
    "LinkedAccountSourcePort",
    "LinkedInstitution",
]
