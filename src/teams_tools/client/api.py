"""Async client for the ``/api/v3`` REST API."""

from __future__ import annotations

import json
import logging
from types import TracebackType
from typing import Any

import httpx

from teams_tools.client.errors import ApiParseError, ApiTransportError
from teams_tools.data import Credentials

JSON_CONTENT_TYPE = "application/json"
JSON_PATCH_CONTENT_TYPE = "application/json-patch+json"

logger = logging.getLogger(__name__)


class ApiClient:
    """Issue single authenticated requests and return the parsed JSON body.

    The HTTP status code is not inspected: any response whose body parses as
    JSON is returned as-is, so an error payload is indistinguishable from
    success unless its shape says otherwise. Nothing is retried.

    Args:
        credentials: Target host and bearer token.
        scheme: URL scheme (default: "https").
        timeout: Request timeout in seconds, or None for no timeout.
        verify: Verify TLS certificates.
        transport: Optional httpx transport (used by tests).
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        scheme: str = "https",
        timeout: float | None = None,
        verify: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._host = credentials.host
        try:
            self._client = httpx.AsyncClient(
                base_url=f"{scheme}://{credentials.host}",
                headers={"Authorization": f"Bearer {credentials.bearer_token}"},
                timeout=timeout,
                verify=verify,
                transport=transport,
            )
        except httpx.InvalidURL as e:
            raise ApiTransportError(f"Request error: {e}") from e

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        body: Any = None,
        content_type: str | None = None,
    ) -> Any:
        """Perform one round trip and return the parsed JSON response.

        Args:
            method: HTTP method.
            path: Path relative to the host, e.g. "/api/v3/articles".
            params: Query string parameters.
            body: JSON-serializable request body, or None for no body.
            content_type: Value for the Content-Type header, if any.

        Returns:
            Parsed JSON value (object or array).

        Raises:
            ApiTransportError: If the request could not be completed.
            ApiParseError: If the body is not valid JSON.
        """
        headers = {"Content-Type": content_type} if content_type else None
        content = json.dumps(body) if body is not None else None

        try:
            response = await self._client.request(
                method, path, params=params, content=content, headers=headers
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ApiTransportError(f"Request error: {e}") from e

        logger.debug(f"{method} {self._host}{path} -> {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise ApiParseError(
                f"Error parsing response data from {method} {path}: {e}"
            ) from e

    async def get(
        self,
        path: str,
        *,
        params: dict[str, str] | None = None,
        content_type: str | None = None,
    ) -> Any:
        return await self.request("GET", path, params=params, content_type=content_type)

    async def post(
        self,
        path: str,
        body: Any,
        *,
        content_type: str = JSON_CONTENT_TYPE,
    ) -> Any:
        return await self.request("POST", path, body=body, content_type=content_type)
