import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import timedelta
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from raritymon.api import health_router, items_router
from raritymon.config import settings
from raritymon.db.cache import RarityCache
from raritymon.models.errors import RarityLookupError
from raritymon.scrapers.raritymon import create_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    max_age = (
        timedelta(seconds=settings.cache_ttl_seconds)
        if settings.cache_ttl_seconds is not None
        else None
    )
    cache = RarityCache.from_url(settings.database_url, max_age=max_age, echo=settings.debug)
    await cache.init()

    app.state.cache = cache
    app.state.http_client = create_client()
    try:
        yield
    finally:
        await app.state.http_client.aclose()
        await cache.close()


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("raritymon"),
    lifespan=lifespan,
)

app.include_router(items_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RarityLookupError)
async def lookup_error_handler(request: Request, exc: RarityLookupError) -> PlainTextResponse:
    """Report any lookup failure as a 500 with its description as the body."""
    logger.error("Lookup failed for %s: %s", request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
