import json
from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class Trait:
    """
    One categorical attribute of an item.

    Attributes:
        type: Trait category as labelled on the page (e.g., "Background")
        name: Value within that category (e.g., "Blue")
        tier: Rarity tier label, taken verbatim from the page
        percentage: Share of the collection holding this trait (0-100)
    """

    type: str
    name: str
    tier: str
    percentage: float


@dataclass(frozen=True)
class Item:
    """
    Rarity profile of one collectible at fetch time.

    rank, total and score are -1 when the page did not expose them in a
    recognizable form.
    """

    name: str
    rank: int = -1
    total: int = -1
    score: float = -1.0
    traits: dict[str, Trait] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        """Plain dict form with the stable JSON field set."""
        return asdict(self)


def serialize_item(item: Item) -> bytes:
    """
    Encode an item as the JSON bytes stored in the cache and served to clients.

    Raises:
        ValueError: If a float field is NaN or infinite, which JSON cannot carry
    """
    encoded = json.dumps(item.to_dict(), indent=2, ensure_ascii=False, allow_nan=False)
    return encoded.encode("utf-8")

