"""
RarityMon item page extraction.

Builds an Item from the rendered Item-details page. Page layout:
    <h2>Item name</h2>
    <button class="item-rarity-rank">Rank 12 / 500</button>
    <button class="item-trait-data">Rarity Score: 87.42</button>
    ...one block per trait:
    <h3 class="tier-title">Background: Blue</h3>
    <div class="item-rarity-percentage">3.5%</div>
    <div class="item-rarity-tier">Rare</div>

Trait titles, percentages and tiers are collected as three parallel lists
and paired by index, so they must have the same length. Any missing node
aborts the extraction; there is no partial Item.

Note: Web scraping is inherently fragile. Page structure may change.
"""

import logging

from raritymon.models.errors import UnbalancedTraitDataError
from raritymon.models.item import Item, Trait
from raritymon.parsers.document import ItemDocument, node_text
from raritymon.parsers.fields import (
    parse_percentage,
    parse_rank,
    parse_rarity_score,
    parse_trait_entry,
)

logger = logging.getLogger(__name__)

# (tag, attribute, value) selectors
NAME_SELECTOR = ("h2", None, None)
RANK_SELECTOR = ("button", "class", "item-rarity-rank")
SCORE_SELECTOR = ("button", "class", "item-trait-data")
TRAIT_TITLE_SELECTOR = ("h3", "class", "tier-title")
TRAIT_PERCENTAGE_SELECTOR = ("div", "class", "item-rarity-percentage")
TRAIT_TIER_SELECTOR = ("div", "class", "item-rarity-tier")


def extract_item(html: str) -> Item:
    """
    Extract an Item from a fetched item page.

    Args:
        html: Raw HTML of the Item-details page

    Returns:
        Fully populated Item

    Raises:
        DocumentParseError: If the page is empty or not HTML
        NodeNotFoundError: If the name, rank or score node is missing, or
            any required node has no text
        UnbalancedTraitDataError: If the trait lists differ in length
    """
    document = ItemDocument.parse(html)

    name_node = document.find_one(*NAME_SELECTOR)
    rank_node = document.find_one(*RANK_SELECTOR)
    score_node = document.find_one(*SCORE_SELECTOR)

    titles = document.find_all(*TRAIT_TITLE_SELECTOR)
    percentages = document.find_all(*TRAIT_PERCENTAGE_SELECTOR)
    tiers = document.find_all(*TRAIT_TIER_SELECTOR)

    if not len(titles) == len(percentages) == len(tiers):
        raise UnbalancedTraitDataError(len(titles), len(percentages), len(tiers))

    rank, total = parse_rank(node_text(rank_node))
    score = parse_rarity_score(node_text(score_node))

    traits: dict[str, Trait] = {}
    for title, percentage, tier in zip(titles, percentages, tiers):
        trait_type, trait_value = parse_trait_entry(node_text(title))
        # Later blocks with the same type overwrite earlier ones
        traits[trait_type] = Trait(
            type=trait_type,
            name=trait_value,
            tier=node_text(tier),
            percentage=parse_percentage(node_text(percentage)),
        )

    item = Item(
        name=node_text(name_node),
        rank=rank,
        total=total,
        score=score,
        traits=traits,
    )
    logger.debug("Extracted %r with %d traits", item.name, len(traits))
    return item
