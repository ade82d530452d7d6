"""Factory that captures shared defaults and stamps out configured services."""

import logging
from dataclasses import dataclass
from typing import Any

from service_weaver.interfaces import ApiTransport, EndpointResolver, ResolverFactory
from service_weaver.resolver import DefaultResolver
from service_weaver.service import ServiceWeaver

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ServiceWeaverConfig:
    """Transport and resolver factory shared by every service built from it."""

    transport: ApiTransport
    resolver_factory: ResolverFactory | None = None

    def create(
        self,
        base_path: str,
        *,
        api: ApiTransport | None = None,
        resolver: EndpointResolver | None = None,
    ) -> ServiceWeaver[Any]:
        """
        Build a service for ``base_path``.

        ``api`` and ``resolver`` override the captured transport and the
        factory-made resolver independently of each other. Nothing is cached:
        every call produces a fresh resolver and service.
        """
        final_api = api if api is not None else self.transport
        if resolver is not None:
            final_resolver = resolver
        elif self.resolver_factory is not None:
            final_resolver = self.resolver_factory(base_path)
        else:
            final_resolver = DefaultResolver(base_path)

        logger.debug(
            "Building service",
            extra={
                "base_path": base_path,
                "api_override": api is not None,
                "resolver_override": resolver is not None,
            },
        )
        return ServiceWeaver(base_path, final_api, final_resolver)

    def __call__(
        self,
        base_path: str,
        api: ApiTransport | None = None,
        resolver: EndpointResolver | None = None,
    ) -> ServiceWeaver[Any]:
        return self.create(base_path, api=api, resolver=resolver)


class ServiceWeaverBuilder:
    """Entry point mirroring ``Service = build(api)`` style configuration."""

    @staticmethod
    def build(
        api: ApiTransport,
        resolver_factory: ResolverFactory | None = None,
    ) -> ServiceWeaverConfig:
        return ServiceWeaverConfig(transport=api, resolver_factory=resolver_factory)


build = ServiceWeaverBuilder.build
