"""
Service Weaver: uniform CRUD clients for REST-style resources.

``build(api)`` captures a transport and optional resolver factory; calling the
result with a base path yields a ``ServiceWeaver`` for that resource.
"""

from service_weaver.builder import ServiceWeaverBuilder, ServiceWeaverConfig, build
from service_weaver.interfaces import (
    ApiTransport,
    EndpointResolver,
    Page,
    ResolverFactory,
    ResponseDTO,
)
from service_weaver.resolver import DefaultResolver
from service_weaver.service import ServiceWeaver

__all__ = [
    "ApiTransport",
    "DefaultResolver",
    "EndpointResolver",
    "Page",
    "ResolverFactory",
    "ResponseDTO",
    "ServiceWeaver",
    "ServiceWeaverBuilder",
    "ServiceWeaverConfig",
    "build",
]
