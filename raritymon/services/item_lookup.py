"""
Read-through item lookup.

Order within one lookup is fixed: cache read, then fetch, then cache write.
Only a fully extracted item is ever written; a failure or cancellation
before the write leaves the cache untouched.
"""

import logging
from dataclasses import dataclass

import httpx

from raritymon.db.cache import RarityCache
from raritymon.models.item import serialize_item
from raritymon.parsers.item_page import extract_item
from raritymon.scrapers.raritymon import fetch_item_page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupResult:
    """Serialized item JSON and whether it came from the cache."""

    payload: bytes
    cached: bool


async def lookup_item(
    cache: RarityCache,
    collection: str,
    item_id: int,
    client: httpx.AsyncClient | None = None,
) -> LookupResult:
    """
    Return the item JSON for (collection, item_id), fetching on a cache miss.

    Args:
        cache: Store for serialized items
        collection: RarityMon collection identifier
        item_id: Non-negative item number
        client: Optional shared httpx client for the fetch

    Returns:
        LookupResult with the exact bytes to serve

    Raises:
        StoreError: If the cache cannot be read or written
        FetchError: If the page cannot be retrieved
        DocumentParseError, NodeNotFoundError, UnbalancedTraitDataError:
            If the page cannot be turned into a complete item
    """
    key = cache.fingerprint(collection, item_id)

    cached = await cache.get(key)
    if cached is not None:
        logger.debug("Cache hit for %s/%d", collection, item_id)
        return LookupResult(payload=cached, cached=True)

    logger.info("Cache miss for %s/%d", collection, item_id)
    html = await fetch_item_page(collection, item_id, client=client)
    item = extract_item(html)
    payload = serialize_item(item)

    await cache.put(key, payload)
    return LookupResult(payload=payload, cached=False)
