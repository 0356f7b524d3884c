"""
Item API endpoints.

Serves item rarity profiles, backed by the read-through cache.
"""

import re
from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel, Field

from raritymon.api.dependencies import get_cache, get_http_client
from raritymon.db.cache import RarityCache
from raritymon.services.item_lookup import lookup_item

router = APIRouter(prefix="/api", tags=["items"])

# Optional sign and ASCII digits only; rejects "1_000", " 7" and non-ASCII digits
ITEM_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class TraitResponse(BaseModel):
    """Response model for a single trait."""

    type: str
    name: str
    tier: str
    percentage: float


class ItemResponse(BaseModel):
    """Response model for an item's rarity profile."""

    name: str
    rank: int
    total: int
    score: float
    traits: dict[str, TraitResponse] = Field(default_factory=dict)


def parse_item_id(raw: str) -> int:
    """
    Parse the item id path segment.

    Raises:
        HTTPException: 400 if the id is not a non-negative integer
    """
    if not ITEM_ID_PATTERN.fullmatch(raw):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"invalid item id: {raw!r}",
        )

    item_id = int(raw)
    if item_id < 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"item id must be non-negative: {item_id}",
        )
    return item_id


@router.get(
    "/{collection}/{item_id}",
    response_class=Response,
    responses={
        200: {"model": ItemResponse, "content": {"application/json": {}}},
        400: {"description": "Item id is not a non-negative integer"},
        500: {"description": "Fetching, parsing or caching the item failed"},
    },
)
async def get_item(
    collection: str,
    item_id: str,
    cache: Annotated[RarityCache, Depends(get_cache)],
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
) -> Response:
    """
    Get an item's rarity profile.

    Returns cached JSON when available; otherwise fetches the RarityMon
    page, extracts the item and caches it. Cache hits return the stored
    bytes unchanged.
    """
    result = await lookup_item(cache, collection, parse_item_id(item_id), client=client)

    return Response(
        content=result.payload,
        media_type="application/json",
        headers={"X-Cache": "HIT" if result.cached else "MISS"},
    )
