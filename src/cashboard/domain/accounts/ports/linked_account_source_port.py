"""Linked account source port interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cashboard.domain.accounts.value_objects import LinkedAccountListing


class LinkedAccountSourcePort(ABC):
    """
    Interface for listing the current user's linked accounts.

    The session is carried by the implementation; callers never pass
    credentials.
    """

    @abstractmethod
    async def list_linked_accounts(self) -> LinkedAccountListing:
        """
        Fetch all linked accounts and their institutions.

        Returns
        -------
        The full, unfiltered listing

        Raises
        ------
        AccountListingError
            If the listing cannot be retrieved
        """
