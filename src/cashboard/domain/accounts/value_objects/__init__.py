"""Value objects for linked accounts."""

from cashboard.domain.accounts.value_objects.linked_account import (
    LinkedAccount,
    LinkedAccountListing,
    LinkedInstitution,
)

__all__ = [
    "LinkedAccount",
    "LinkedAccountListing",
    "LinkedInstitution",
]
