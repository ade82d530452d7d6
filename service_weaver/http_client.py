"""HTTP client factory for the bundled transport adapter."""

import httpx

from service_weaver.settings import Settings


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """
    Build an AsyncClient rooted at the configured API.

    Service base paths are resolved relative to ``settings.base_url``.
    """
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=settings.api_timeout,
    )
