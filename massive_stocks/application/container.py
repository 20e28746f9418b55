from __future__ import annotations

from functools import lru_cache

from massive_stocks.core.config import settings
from massive_stocks.domain.interfaces import JsonHttpClient
from massive_stocks.infrastructure.clients.massive import MassiveRestClient

_installed_client: JsonHttpClient | None = None


@lru_cache
def _massive_client() -> MassiveRestClient:
    return MassiveRestClient(
        settings.massive_api_key or "",
        base_url=settings.massive_base_url,
        timeout=settings.massive_timeout_seconds,
    )


def set_client(client: JsonHttpClient) -> None:
    global _installed_client
    _installed_client = client


def get_client() -> JsonHttpClient:
    if _installed_client is not None:
        return _installed_client
    return _massive_client()


def reset_client() -> None:
    global _installed_client
    _installed_client = None
    if _massive_client.cache_info().currsize:
        _massive_client().close()
    _massive_client.cache_clear()
