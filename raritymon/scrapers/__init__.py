from raritymon.scrapers.raritymon import build_item_url, create_client, fetch_item_page

__all__ = [
    "build_item_url",
    "create_client",
    "fetch_item_page",
]
