"""
httpx-backed transport that satisfies ``ApiTransport``.

Bodies are sent as JSON and responses decoded from JSON. Transport and HTTP
failures are normalized into ``ApiTransportError`` with consistent logging.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from service_weaver.http_client import create_http_client
from service_weaver.interfaces import Headers
from service_weaver.settings import Settings

logger = logging.getLogger(__name__)

_SNIPPET_LIMIT = 512


class ApiTransportError(RuntimeError):
    """Represents failures when communicating with the backing API."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(slots=True)
class HttpxTransport:
    """JSON transport over a shared AsyncClient."""

    _client: httpx.AsyncClient

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpxTransport":
        """Factory that builds the transport from Settings."""
        return cls(create_http_client(settings))

    async def aclose(self) -> None:
        """Close the underlying HTTP resources."""
        await self._client.aclose()

    async def post(self, url: str, data: Any = None, headers: Headers | None = None) -> Any | None:
        return await self._request("POST", url, data=data, headers=headers)

    async def get(self, url: str, data: Any = None, headers: Headers | None = None) -> Any | None:
        return await self._request("GET", url, data=data, headers=headers)

    async def put(self, url: str, data: Any = None, headers: Headers | None = None) -> Any | None:
        return await self._request("PUT", url, data=data, headers=headers)

    async def patch(self, url: str, data: Any = None, headers: Headers | None = None) -> Any | None:
        return await self._request("PATCH", url, data=data, headers=headers)

    async def delete(self, url: str, data: Any = None, headers: Headers | None = None) -> Any | None:
        return await self._request("DELETE", url, data=data, headers=headers)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        data: Any = None,
        headers: Headers | None = None,
    ) -> Any | None:
        """Normalized request handler for all outgoing API calls."""

        def _transport_error(message: str, *, exc: Exception | None = None) -> ApiTransportError:
            logger.error(
                message,
                extra={"method": method, "url": url},
                exc_info=exc,
            )
            return ApiTransportError(message)

        kwargs: dict[str, Any] = {}
        if data is not None:
            kwargs["json"] = data
        if headers:
            kwargs["headers"] = dict(headers)

        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            raise _transport_error(
                f"API request timed out ({method} {url}).",
                exc=exc,
            ) from exc
        except httpx.RequestError as exc:
            raise _transport_error(
                f"API request failed ({method} {url}): {exc!s}",
                exc=exc,
            ) from exc

        if response.is_error:
            snippet = response.text.strip()
            if len(snippet) > _SNIPPET_LIMIT:
                snippet = f"{snippet[:_SNIPPET_LIMIT]}..."
            logger.warning(
                "API responded with error",
                extra={
                    "method": method,
                    "url": url,
                    "status_code": response.status_code,
                    "content": snippet,
                },
            )
            raise ApiTransportError(
                f"API error ({response.status_code}) during {method} {url}: {snippet or 'no body provided.'}",
                status_code=response.status_code,
            )

        if not response.content:
            return None

        try:
            return response.json()
        except json.JSONDecodeError as exc:
            logger.error(
                "API returned invalid JSON",
                extra={"method": method, "url": url},
            )
            raise ApiTransportError(
                f"API returned invalid JSON during {method} {url}.",
                status_code=response.status_code,
            ) from exc
