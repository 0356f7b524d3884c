"""
RarityMon item page fetcher.

Retrieves the rendered Item-details page for one collectible. HTTP-level
problems (timeouts, connection errors, non-2xx status) are reported as
FetchError; parsing is left to raritymon.parsers.item_page.
"""

import logging
from urllib.parse import urlencode

import httpx

from raritymon.config import settings
from raritymon.models.errors import FetchError

logger = logging.getLogger(__name__)

RARITYMON_BASE = "https://www.raritymon.com"
ITEM_DETAILS_PATH = "/Item-details"


def build_item_url(collection: str, item_id: int, base_url: str = RARITYMON_BASE) -> str:
    """
    Build the Item-details URL for a collection item.

    Example:
        build_item_url("apes", 7) ->
        "https://www.raritymon.com/Item-details?collection=apes&id=7"
    """
    query = urlencode({"collection": collection, "id": item_id})
    return f"{base_url.rstrip('/')}{ITEM_DETAILS_PATH}?{query}"


def create_client(timeout: float | None = None, user_agent: str | None = None) -> httpx.AsyncClient:
    """HTTP client configured for RarityMon requests."""
    return httpx.AsyncClient(
        headers={"User-Agent": user_agent or settings.user_agent},
        follow_redirects=True,
        timeout=timeout if timeout is not None else settings.fetch_timeout,
    )


async def fetch_item_page(
    collection: str,
    item_id: int,
    client: httpx.AsyncClient | None = None,
    base_url: str | None = None,
) -> str:
    """
    Fetch the Item-details page HTML.

    Args:
        collection: RarityMon collection identifier
        item_id: Item number within the collection
        client: Optional httpx client for connection reuse
        base_url: Site root; defaults to the configured source URL

    Returns:
        Raw HTML content

    Raises:
        FetchError: If the request fails or returns an error status
    """
    url = build_item_url(collection, item_id, base_url or settings.source_base_url)
    logger.info("Fetching %s", url)

    try:
        if client:
            response = await client.get(url)
        else:
            async with create_client() as one_off:
                response = await one_off.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise FetchError(
            f"Failed to fetch {collection}/{item_id}: HTTP {e.response.status_code}"
        ) from e
    except httpx.RequestError as e:
        raise FetchError(f"Failed to fetch {collection}/{item_id}: {e!r}") from e

    return response.text
