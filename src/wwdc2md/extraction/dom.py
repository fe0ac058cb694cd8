"""Small helpers over BeautifulSoup trees."""

from typing import Optional, Union

from bs4 import BeautifulSoup, Tag

Node = Union[BeautifulSoup, Tag]


def parse_html(html: str) -> BeautifulSoup:
    """Parse markup into a tree queryable by CSS selectors."""
    return BeautifulSoup(html, "html.parser")


def text_of(element: Tag) -> str:
    """Concatenate every text node below an element, unmodified."""
    return element.get_text()


def first_text(node: Node, selector: str) -> Optional[str]:
    """Text of the first element matching selector, or None if nothing matches."""
    element = node.select_one(selector)
    if element is None:
        return None
    return text_of(element)


def all_texts(node: Node, selector: str) -> list[str]:
    """Text of every element matching selector, in document order."""
    return [text_of(element) for element in node.select(selector)]


def first_attr(node: Node, selector: str, attr: str) -> Optional[str]:
    """Attribute of the first element matching selector, or None."""
    element = node.select_one(selector)
    if element is None:
        return None
    value = element.get(attr)
    if value is None:
        return None
    if isinstance(value, list):
        return " ".join(value)
    return str(value)
