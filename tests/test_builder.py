from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from service_weaver import ServiceWeaverBuilder, ServiceWeaverConfig, build
from service_weaver.resolver import DefaultResolver


def _api_stub() -> MagicMock:
    api = MagicMock()
    for verb in ("post", "get", "put", "patch", "delete"):
        setattr(api, verb, AsyncMock())
    return api


class EditResolver(DefaultResolver):
    def update(self, id: Any) -> str:
        return f"/custom/{id}/edit"


def test_build_returns_config_record() -> None:
    api = _api_stub()
    config = ServiceWeaverBuilder.build(api)
    assert isinstance(config, ServiceWeaverConfig)
    assert config.transport is api
    assert config.resolver_factory is None


def test_defaults_without_overrides() -> None:
    api = _api_stub()
    service = build(api)("/api/users")
    assert service.api is api
    assert isinstance(service.resolver, DefaultResolver)
    assert service.root_url == "/api/users"


def test_resolver_factory_applied_to_base_path() -> None:
    api = _api_stub()
    seen: list[str] = []

    def factory(base_path: str) -> EditResolver:
        seen.append(base_path)
        return EditResolver(base_path)

    service = build(api, factory)("/api/users")
    assert seen == ["/api/users"]
    assert isinstance(service.resolver, EditResolver)


def test_api_override_keeps_factory_resolver() -> None:
    api = _api_stub()
    other = _api_stub()
    service = build(api, EditResolver).create("/api/users", api=other)
    assert service.api is other
    assert isinstance(service.resolver, EditResolver)


def test_resolver_override_keeps_captured_api() -> None:
    api = _api_stub()
    factory = MagicMock()
    resolver = DefaultResolver("/elsewhere")
    service = build(api, factory)("/api/users", resolver=resolver)
    assert service.api is api
    assert service.resolver is resolver
    factory.assert_not_called()


def test_every_call_builds_independent_instances() -> None:
    Service = build(_api_stub())
    first = Service("/api/users")
    second = Service("/api/users")
    assert first is not second
    assert first.resolver is not second.resolver


@pytest.mark.anyio
async def test_get_by_id_through_built_service() -> None:
    api = _api_stub()
    api.get.return_value = {"id": "42"}
    Service = build(api)
    result = await Service("/api/users").get_by_id("42")
    api.get.assert_awaited_once_with("/api/users/42", headers=None)
    assert result == {"id": "42"}


@pytest.mark.anyio
async def test_get_page_through_built_service() -> None:
    api = _api_stub()
    Service = build(api)
    await Service("/api/users").get_page(0, {"filter": "x"})
    api.post.assert_awaited_once_with("/api/users/page/0", {"filter": "x"}, headers=None)


@pytest.mark.anyio
async def test_custom_resolver_update_url() -> None:
    api = _api_stub()
    Service = build(api, EditResolver)
    await Service("/api/users").update("7", {"name": "x"})
    api.put.assert_awaited_once_with("/custom/7/edit", {"name": "x"}, headers=None)


class _FalsyTransport:
    def __bool__(self) -> bool:
        return False


class _FalsyResolver(DefaultResolver):
    def __bool__(self) -> bool:
        return False


def test_falsy_overrides_still_win() -> None:
    api = _api_stub()
    falsy_api = _FalsyTransport()
    falsy_resolver = _FalsyResolver("/elsewhere")
    factory = MagicMock()
    service = build(api, factory)("/api/users", falsy_api, falsy_resolver)
    assert service.api is falsy_api
    assert service.resolver is falsy_resolver
    factory.assert_not_called()
