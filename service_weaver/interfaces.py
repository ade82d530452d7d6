"""Capabilities consumed by the service layer and the shapes that pass through it."""

from collections.abc import Callable, Mapping
from typing import Any, Generic, Protocol, TypedDict, TypeVar

T = TypeVar("T")

Headers = Mapping[str, str]
Identifier = str | int


class ApiTransport(Protocol):
    """Asynchronous HTTP verbs used by ``ServiceWeaver``.

    Implementations own the wire: encoding, auth, retries and error semantics
    are entirely theirs. Every verb accepts an optional payload; read and
    delete calls made by ``ServiceWeaver`` leave it unset.
    """

    async def post(self, url: str, data: Any = None, headers: Headers | None = None) -> Any | None: ...

    async def get(self, url: str, data: Any = None, headers: Headers | None = None) -> Any | None: ...

    async def put(self, url: str, data: Any = None, headers: Headers | None = None) -> Any | None: ...

    async def patch(self, url: str, data: Any = None, headers: Headers | None = None) -> Any | None: ...

    async def delete(self, url: str, data: Any = None, headers: Headers | None = None) -> Any | None: ...


class EndpointResolver(Protocol):
    """Maps a resource base path to concrete endpoint strings."""

    def root(self) -> str: ...

    def by_id(self, id: Identifier) -> str: ...

    def update(self, id: Identifier) -> str: ...

    def delete(self, id: Identifier) -> str: ...

    def patch(self, id: Identifier) -> str: ...

    def page(self, page: int) -> str: ...


ResolverFactory = Callable[[str], EndpointResolver]


class ResponseDTO(TypedDict, Generic[T], total=False):
    """Response envelope as commonly returned by the backing API."""

    status: int
    message: str
    data: T
    timestamp: str


class Page(TypedDict, Generic[T], total=False):
    """Paginated listing returned by ``get_page``."""

    content: list[T]
    total_elements: int
    total_pages: int
    number: int
    size: int
    first: bool
    last: bool
    empty: bool


__all__ = [
    "ApiTransport",
    "EndpointResolver",
    "Headers",
    "Identifier",
    "Page",
    "ResolverFactory",
    "ResponseDTO",
]
