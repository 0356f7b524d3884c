"""
RarityMon services.

Lookup orchestration between the cache, the fetcher and the page parser.
"""

from raritymon.services.item_lookup import LookupResult, lookup_item

__all__ = [
    "LookupResult",
    "lookup_item",
]
