"""HTTP client for the CashflowAnalysis API."""

from __future__ import annotations

import logging
from typing import Awaitable, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from cashboard.infrastructure.remote.contracts import ErrorResponse

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

GENERIC_REQUEST_ERROR = "The server could not be reached, please try again."


class RemoteRequestError(Exception):
    """A request to the remote store failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotAuthenticatedError(RemoteRequestError):
    """The session cookie was missing, expired or revoked."""


class CashflowApiClient:
    """HTTP client wrapper carrying the user's session cookie."""

    def __init__(  # NOQA: PLR0913
        self,
        base_url: str,
        session_token: str | None = None,
        session_cookie_name: str = "session-id",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._session_token = session_token
        self._session_cookie_name = session_cookie_name
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> CashflowApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            cookies = (
                {self._session_cookie_name: self._session_token}
                if self._session_token
                else None
            )
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={"Content-Type": "application/json"},
                cookies=cookies,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get(self, path: str, response_model: type[ResponseT]) -> ResponseT:
        client = await self._get_client()
        response = await self._send(client.get(path), path)
        return _parse(response, response_model)

    async def post(
        self,
        path: str,
        body: BaseModel,
        response_model: type[ResponseT],
    ) -> ResponseT:
        client = await self._get_client()
        response = await self._send(
            client.post(path, content=body.model_dump_json(by_alias=True)),
            path,
        )
        return _parse(response, response_model)

    async def _send(
        self,
        request: Awaitable[httpx.Response],
        path: str,
    ) -> httpx.Response:
        try:
            response = await request
        except httpx.TimeoutException as e:
            logger.warning("Request to %s timed out: %s", path, e)
            raise RemoteRequestError(GENERIC_REQUEST_ERROR) from e
        except httpx.TransportError as e:
            logger.warning("Request to %s failed (%s): %s", path, type(e).__name__, e)
            raise RemoteRequestError(GENERIC_REQUEST_ERROR) from e

        if response.is_success:
            return response

        message = _error_message(response)
        logger.warning(
            "Remote store returned %d for %s: %s",
            response.status_code,
            path,
            message or (response.text[:200] if response.text else "no body"),
        )
        if response.status_code == httpx.codes.UNAUTHORIZED:
            raise NotAuthenticatedError(
                message or "Your session has expired, please log in again.",
                status_code=response.status_code,
            )
        raise RemoteRequestError(
            message or GENERIC_REQUEST_ERROR,
            status_code=response.status_code,
        )


def _error_message(response: httpx.Response) -> str | None:
    try:
        return ErrorResponse.model_validate(response.json()).error
    except (ValueError, PydanticValidationError):
        return None


def _parse(response: httpx.Response, response_model: type[ResponseT]) -> ResponseT:
    try:
        return response_model.model_validate(response.json())
    except (ValueError, PydanticValidationError) as e:
        logger.warning(
            "Unexpected %s payload from %s: %s",
            response_model.__name__,
            response.request.url.path,
            e,
        )
        raise RemoteRequestError(
            "The server sent an unexpected response.",
            status_code=response.status_code,
        ) from e
