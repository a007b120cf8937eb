"""BeautifulSoup adapter for the document query capability"""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..exceptions import ParseError
from .interfaces import DocumentNode


class SoupNode(DocumentNode):
    """Wraps a ``bs4`` tag (or the soup itself)"""

    def __init__(self, tag: Tag):
        self.tag = tag

    def by_class(self, name: str) -> list[DocumentNode]:
        # class_ matches any one of a multi-valued class attribute
        return [SoupNode(t) for t in self.tag.find_all(class_=name)]

    def by_id(self, identifier: str) -> DocumentNode | None:
        found = self.tag.find(id=identifier)
        return SoupNode(found) if isinstance(found, Tag) else None

    def children(self) -> list[DocumentNode]:
        return [SoupNode(c) for c in self.tag.children if isinstance(c, Tag)]

    def text(self) -> str:
        return self.tag.get_text(" ", strip=True)

    def __repr__(self) -> str:
        return f"SoupNode(<{self.tag.name}>)"


def parse_html_document(raw: str | bytes | None) -> SoupNode:
    """Parse an HTML response body into a queryable document"""
    if raw is None:
        raise ParseError("html.parser", "HTML", "empty response body")
    return SoupNode(BeautifulSoup(raw, "html.parser"))
