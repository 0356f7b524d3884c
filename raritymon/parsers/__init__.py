from raritymon.parsers.document import ItemDocument, node_text
from raritymon.parsers.fields import (
    parse_percentage,
    parse_rank,
    parse_rarity_score,
    parse_trait_entry,
)
from raritymon.parsers.item_page import extract_item

__all__ = [
    "ItemDocument",
    "extract_item",
    "node_text",
    "parse_percentage",
    "parse_rank",
    "parse_rarity_score",
    "parse_trait_entry",
]
