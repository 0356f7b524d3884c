"""
Lookup helpers over a parsed item page.

Wraps a BeautifulSoup tree and turns "nothing matched" into typed errors
for single-node queries. Multi-node queries return a possibly empty list;
the caller decides whether zero matches is acceptable.
"""

from bs4 import BeautifulSoup, NavigableString, Tag

from raritymon.models.errors import (
    DocumentParseError,
    MissingNodeTextError,
    NodeNotFoundError,
)

HTML_PARSER = "html.parser"


def _attrs(attribute: str | None, value: str | None) -> dict[str, str | bool]:
    if attribute is None:
        return {}
    # Attribute given without value matches on presence
    return {attribute: value if value is not None else True}


class ItemDocument:
    """A parsed HTML document with fallible tag/attribute queries."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self.soup = soup

    @classmethod
    def parse(cls, html: str) -> "ItemDocument":
        """
        Parse raw HTML.

        Raises:
            DocumentParseError: If the input is empty or contains no elements
        """
        if not html or not html.strip():
            raise DocumentParseError("source page is empty")

        soup = BeautifulSoup(html, HTML_PARSER)
        if soup.find(True) is None:
            raise DocumentParseError("source page contains no HTML elements")

        return cls(soup)

    def find_one(self, tag: str, attribute: str | None = None, value: str | None = None) -> Tag:
        """
        Return the first node matching tag and optional attribute=value.

        For multi-valued attributes like class, a node matches when any of
        its values equals `value`.

        Raises:
            NodeNotFoundError: If no node matches
        """
        node = self.soup.find(tag, attrs=_attrs(attribute, value))
        if not isinstance(node, Tag):
            raise NodeNotFoundError(tag, attribute, value)
        return node

    def find_all(
        self, tag: str, attribute: str | None = None, value: str | None = None
    ) -> list[Tag]:
        """Return all nodes matching the query, in document order."""
        return [
            node
            for node in self.soup.find_all(tag, attrs=_attrs(attribute, value))
            if isinstance(node, Tag)
        ]


def node_text(node: Tag) -> str:
    """
    Return the node's first child as text, verbatim.

    Raises:
        MissingNodeTextError: If the node is empty or starts with an element
    """
    first = next(iter(node.children), None)
    if not isinstance(first, NavigableString):
        attribute, value = _first_class(node)
        raise MissingNodeTextError(node.name, attribute, value)
    return str(first)


def _first_class(node: Tag) -> tuple[str | None, str | None]:
    classes = node.get("class")
    if not classes:
        return None, None
    return "class", classes[0]
