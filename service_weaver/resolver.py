"""Default endpoint resolution by plain path concatenation."""

from service_weaver.interfaces import Identifier


class DefaultResolver:
    """Resolve ``<base>``, ``<base>/<id>`` and ``<base>/page/<n>`` endpoints."""

    def __init__(self, base_path: str) -> None:
        self._base_path = base_path

    @property
    def base_path(self) -> str:
        return self._base_path

    def root(self) -> str:
        return self._base_path

    def by_id(self, id: Identifier) -> str:
        return f"{self._base_path}/{id}"

    def update(self, id: Identifier) -> str:
        return f"{self._base_path}/{id}"

    def delete(self, id: Identifier) -> str:
        return f"{self._base_path}/{id}"

    def patch(self, id: Identifier) -> str:
        return f"{self._base_path}/{id}"

    def page(self, page: int) -> str:
        return f"{self._base_path}/page/{page}"

    def __repr__(self) -> str:
        return f"DefaultResolver({self._base_path!r})"
