from raritymon.models.errors import (
    DocumentParseError,
    FetchError,
    MissingNodeTextError,
    NodeNotFoundError,
    RarityLookupError,
    StoreError,
    UnbalancedTraitDataError,
)
from raritymon.models.item import Item, Trait, serialize_item

__all__ = [
    "DocumentParseError",
    "FetchError",
    "Item",
    "MissingNodeTextError",
    "NodeNotFoundError",
    "RarityLookupError",
    "StoreError",
    "Trait",
    "UnbalancedTraitDataError",
    "serialize_item",
]
