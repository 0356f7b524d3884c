"""
Lookup failure kinds.

Every failure raised while resolving an item derives from RarityLookupError,
so the HTTP layer can report it with a single handler. None of these are
retried internally.
"""


class RarityLookupError(Exception):
    """Base class for failures while looking up an item."""

    pass


class DocumentParseError(RarityLookupError):
    """Raised when the fetched page is empty or is not usable HTML."""

    pass


class NodeNotFoundError(RarityLookupError):
    """Raised when a required HTML node is missing from the page."""

    def __init__(self, tag: str, attribute: str | None = None, value: str | None = None) -> None:
        self.tag = tag
        self.attribute = attribute
        self.value = value
        super().__init__(f"could not find the HTML node: {describe_selector(tag, attribute, value)}")


class MissingNodeTextError(NodeNotFoundError):
    """Raised when a node was found but has no leading text child."""

    def __init__(self, tag: str, attribute: str | None = None, value: str | None = None) -> None:
        super().__init__(tag, attribute, value)
        self.args = (f"HTML node has no text: {describe_selector(tag, attribute, value)}",)


class UnbalancedTraitDataError(RarityLookupError):
    """Raised when trait titles, percentages and tiers differ in count."""

    def __init__(self, titles: int, percentages: int, tiers: int) -> None:
        self.titles = titles
        self.percentages = percentages
        self.tiers = tiers
        super().__init__(
            "rarity nodes found are unbalanced: "
            f"{titles} titles, {percentages} percentages, {tiers} tiers"
        )


class FetchError(RarityLookupError):
    """Raised when the source page could not be retrieved."""

    pass


class StoreError(RarityLookupError):
    """Raised when the cache database cannot be read or written."""

    pass


def describe_selector(tag: str, attribute: str | None = None, value: str | None = None) -> str:
    """Render a tag/attribute query as a short CSS-like string."""
    if attribute is None:
        return tag
    if attribute == "class" and value is not None:
        return f"{tag}.{value}"
    return f'{tag}[{attribute}="{value}"]'
