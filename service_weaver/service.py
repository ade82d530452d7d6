"""
CRUD service object bound to one transport and one endpoint resolver.

Every operation asks the resolver for a URL and hands it to exactly one
transport verb. Results and exceptions travel back to the caller untouched.
"""

import logging
from typing import Any, Generic, TypeVar

from service_weaver.interfaces import ApiTransport, EndpointResolver, Headers, Identifier

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ServiceWeaver(Generic[T]):
    """Uniform CRUD facade over a REST-style resource."""

    def __init__(self, base_path: str, api: ApiTransport, resolver: EndpointResolver) -> None:
        self._base_path = base_path
        self._api = api
        self._resolver = resolver

    @property
    def api(self) -> ApiTransport:
        """Transport used for every outbound call."""
        return self._api

    @property
    def resolver(self) -> EndpointResolver:
        return self._resolver

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def root_url(self) -> str:
        """Collection endpoint as reported by the resolver."""
        return self._resolver.root()

    async def create(self, data: T, headers: Headers | None = None) -> Any | None:
        url = self._resolver.root()
        self._log_dispatch("POST", url)
        return await self._api.post(url, data, headers=headers)

    async def get_all(self, headers: Headers | None = None) -> Any | None:
        url = self._resolver.root()
        self._log_dispatch("GET", url)
        return await self._api.get(url, headers=headers)

    async def get_by_id(self, id: Identifier, headers: Headers | None = None) -> Any | None:
        url = self._resolver.by_id(id)
        self._log_dispatch("GET", url)
        return await self._api.get(url, headers=headers)

    async def update(self, id: Identifier, data: T, headers: Headers | None = None) -> Any | None:
        url = self._resolver.update(id)
        self._log_dispatch("PUT", url)
        return await self._api.put(url, data, headers=headers)

    async def patch(self, id: Identifier, data: Any, headers: Headers | None = None) -> Any | None:
        """
        Send a partial update.

        ``data`` holds only the changed fields, so it is not typed as a full ``T``.
        """
        url = self._resolver.patch(id)
        self._log_dispatch("PATCH", url)
        return await self._api.patch(url, data, headers=headers)

    async def delete(self, id: Identifier, headers: Headers | None = None) -> Any | None:
        url = self._resolver.delete(id)
        self._log_dispatch("DELETE", url)
        return await self._api.delete(url, headers=headers)

    async def get_page(
        self,
        page: int,
        criteria: Any = None,
        headers: Headers | None = None,
    ) -> Any | None:
        """Fetch one page of the collection, posting ``criteria`` as the query body."""
        url = self._resolver.page(page)
        self._log_dispatch("POST", url)
        return await self._api.post(url, criteria, headers=headers)

    def _log_dispatch(self, method: str, url: str) -> None:
        logger.debug(
            "Dispatching service call",
            extra={"method": method, "url": url, "base_path": self._base_path},
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_path={self._base_path!r}, resolver={self._resolver!r})"
