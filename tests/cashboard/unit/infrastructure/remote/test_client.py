"""Unit tests for CashflowApiClient."""

import json

import httpx
import pytest

from cashboard.infrastructure.remote import (
    CashflowApiClient,
    NotAuthenticatedError,
    RemoteRequestError,
)
from cashboard.infrastructure.remote.client import GENERIC_REQUEST_ERROR
from cashboard.infrastructure.remote.contracts import DeleteRowRequest, MessageResponse


def _client(handler, **kwargs) -> CashflowApiClient:
    return CashflowApiClient(
        base_url="http://cashflow.test/",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestCashflowApiClient:
    """Tests for request sending and error translation."""

    @pytest.mark.asyncio
    async def test_sends_session_cookie_and_json_body(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["cookie"] = request.headers.get("cookie")
            seen["content_type"] = request.headers.get("content-type")
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"message": "Row deleted"})

        async with _client(handler, session_token="abc123") as client:
            response = await client.post(
                "/api/DeleteRowToWidgetBoard",
                DeleteRowRequest(row_id=4),
                MessageResponse,
            )

        assert response.message == "Row deleted"
        assert seen["url"] == "http://cashflow.test/api/DeleteRowToWidgetBoard"
        assert seen["cookie"] == "session-id=abc123"
        assert seen["content_type"] == "application/json"
        assert seen["body"] == {"RowID": 4}

    @pytest.mark.asyncio
    async def test_custom_cookie_name(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["cookie"] = request.headers.get("cookie")
            return httpx.Response(200, json={})

        async with _client(
            handler,
            session_token="abc123",
            session_cookie_name="sid",
        ) as client:
            await client.get("/api/retrieveWidgets", MessageResponse)

        assert seen["cookie"] == "sid=abc123"

    @pytest.mark.asyncio
    async def test_server_error_message_is_surfaced(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"error": "Could not delete row"})

        async with _client(handler) as client:
            with pytest.raises(RemoteRequestError) as exc_info:
                await client.get("/api/retrieveWidgets", MessageResponse)

        assert exc_info.value.message == "Could not delete row"
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_error_without_body_uses_generic_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        async with _client(handler) as client:
            with pytest.raises(RemoteRequestError) as exc_info:
                await client.get("/api/retrieveWidgets", MessageResponse)

        assert exc_info.value.message == GENERIC_REQUEST_ERROR

    @pytest.mark.asyncio
    async def test_unauthorized(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"error": "Unauthorized"})

        async with _client(handler) as client:
            with pytest.raises(NotAuthenticatedError) as exc_info:
                await client.get("/api/retrieveWidgets", MessageResponse)

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as client:
            with pytest.raises(RemoteRequestError) as exc_info:
                await client.get("/api/retrieveWidgets", MessageResponse)

        assert exc_info.value.message == GENERIC_REQUEST_ERROR
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_unexpected_payload(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>login</html>")

        async with _client(handler) as client:
            with pytest.raises(RemoteRequestError, match="unexpected response"):
                await client.get("/api/retrieveWidgets", MessageResponse)

    @pytest.mark.asyncio
    async def test_close_is_safe_twice(self):
        client = _client(lambda request: httpx.Response(200, json={}))
        await client.get("/api/retrieveWidgets", MessageResponse)

        await client.close()
        await client.close()
