"""Remote store integration for the widget board API."""

from cashboard.infrastructure.remote.adapter import HttpBoardRemoteStore
from cashboard.infrastructure.remote.client import (
    CashflowApiClient,
    NotAuthenticatedError,
    RemoteRequestError,
)

__all__ = [
    "CashflowApiClient",
    "HttpBoardRemoteStore",
    "NotAuthenticatedError",
    "RemoteRequestError",
]
