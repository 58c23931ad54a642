"""Linked account exceptions."""

from cashboard.domain.shared.exceptions import DomainException, ErrorCode


class AccountListingError(DomainException):
    """Raised when the user's linked accounts cannot be retrieved."""

    def __init__(self, message: str = "Could not retrieve account data") -> None:
        super().__init__(message=message, code=ErrorCode.ACCOUNT_LISTING_FAILED)
