"""Tests for ApiClient."""

from __future__ import annotations

import json

import httpx
import pytest

from teams_tools.client import (
    JSON_PATCH_CONTENT_TYPE,
    ApiClient,
    ApiParseError,
    ApiTransportError,
)
from teams_tools.data import Credentials


def make_client(handler) -> ApiClient:
    return ApiClient(
        Credentials(host="teams.example.com", bearer_token="test-token"),
        transport=httpx.MockTransport(handler),
    )


class TestApiClient:
    """Tests for ApiClient."""

    async def test_get_sends_bearer_token(self):
        """Should send Authorization header and return parsed JSON."""
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"id": 5})

        async with make_client(handler) as client:
            data = await client.get("/api/v3/users/by-email/a@x.com")

        assert data == {"id": 5}
        request = captured[0]
        assert request.method == "GET"
        assert request.url.scheme == "https"
        assert request.url.host == "teams.example.com"
        assert request.url.path == "/api/v3/users/by-email/a@x.com"
        assert request.headers["Authorization"] == "Bearer test-token"
        assert "Content-Type" not in request.headers
        assert request.content == b""

    async def test_get_passes_params(self):
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"items": []})

        async with make_client(handler) as client:
            await client.get("/api/v3/articles", params={"authorId": "9", "order": "desc"})

        assert captured[0].url.params["authorId"] == "9"
        assert captured[0].url.params["order"] == "desc"

    async def test_post_sends_json_body_and_content_type(self):
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(201, json={"id": 11})

        async with make_client(handler) as client:
            data = await client.post(
                "/api/v3/user-groups",
                {"name": "g", "userIds": ["1"]},
                content_type=JSON_PATCH_CONTENT_TYPE,
            )

        assert data == {"id": 11}
        request = captured[0]
        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/json-patch+json"
        assert json.loads(request.content) == {"name": "g", "userIds": ["1"]}

    async def test_post_defaults_to_json_content_type(self):
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json=[])

        async with make_client(handler) as client:
            await client.post("/api/v3/tags/3/subject-matter-experts/user-groups", [11])

        assert captured[0].headers["Content-Type"] == "application/json"
        assert json.loads(captured[0].content) == [11]

    async def test_error_status_with_json_body_is_returned(self):
        """Status codes are not inspected; a JSON error payload comes back as data."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"errorMessage": "Not found"})

        async with make_client(handler) as client:
            data = await client.get("/api/v3/users/by-email/nobody@x.com")

        assert data == {"errorMessage": "Not found"}

    async def test_non_json_body_raises_parse_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="not json")

        async with make_client(handler) as client:
            with pytest.raises(ApiParseError, match="Error parsing response data"):
                await client.get("/api/v3/articles")

    async def test_empty_body_raises_parse_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(204)

        async with make_client(handler) as client:
            with pytest.raises(ApiParseError):
                await client.post("/api/v3/tags/1/subject-matter-experts/user-groups", [1])

    async def test_transport_error_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(ApiTransportError, match="connection refused") as exc_info:
                await client.get("/api/v3/articles")

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    def test_bad_port_raises_transport_error(self):
        with pytest.raises(ApiTransportError, match="Request error") as exc_info:
            ApiClient(Credentials(host="teams.example.com:abc", bearer_token="t"))

        assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)

    async def test_no_timeout_by_default(self):
        client = make_client(lambda request: httpx.Response(200, json={}))
        assert client._client.timeout == httpx.Timeout(None)
        await client.aclose()
