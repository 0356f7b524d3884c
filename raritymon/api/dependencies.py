"""
Request dependencies for shared resources.

The cache store and HTTP client are created once in the app lifespan and
kept on app.state; handlers receive them through these dependencies so
tests can override them.

Usage in FastAPI:
    @router.get("/items")
    async def get_items(cache: Annotated[RarityCache, Depends(get_cache)]):
        ...
"""

import httpx
from fastapi import Request

from raritymon.db.cache import RarityCache


def get_cache(request: Request) -> RarityCache:
    """Cache store for the running app."""
    cache: RarityCache = request.app.state.cache
    return cache


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Shared outbound HTTP client for the running app."""
    client: httpx.AsyncClient = request.app.state.http_client
    return client
