"""Extraction of developer.apple.com reference document pages."""

import logging
from typing import Callable, Optional

from bs4 import Tag

from ..errors import MissingRequiredFieldError
from ..models.records import DocumentItem, DocumentRecord, Section
from .dom import all_texts, first_attr, first_text, parse_html, text_of

logger = logging.getLogger(__name__)

APPLE_DEVELOPER_HOST = "https://developer.apple.com"
ZERO_WIDTH_SPACE = "\u200b"
DEFAULT_ITEM_TYPE = "article"

TITLE_SELECTOR = "h1"
DESCRIPTION_SELECTOR = "meta[name='description']"
OVERVIEW_SELECTOR = ".content > p"
NOTE_SELECTOR = ".note"
SECTION_SELECTOR = ".contenttable-section"
SECTION_TITLE_SELECTOR = ".contenttable-title"
ITEM_SELECTOR = ".link-block"

TitleStrategy = Callable[[Tag], Optional[str]]


def absolute_url(href: str) -> str:
    """Prefix site-relative hrefs with the developer.apple.com host.

    Example:
        >>> absolute_url("/documentation/swiftui")
        'https://developer.apple.com/documentation/swiftui'
    """
    if href.startswith(("http://", "https://")):
        return href
    return APPLE_DEVELOPER_HOST + href


def _symbol_title(item: Tag) -> Optional[str]:
    # One combined selector, so the earliest of the three in document order wins
    text = first_text(item, ".identifier, .decorated-title, code")
    if text is None:
        return None
    return text.replace(ZERO_WIDTH_SPACE, "")


def _link_span_title(item: Tag) -> Optional[str]:
    return first_text(item, ".link span")


ITEM_TITLE_STRATEGIES: tuple[TitleStrategy, ...] = (
    _symbol_title,
    _link_span_title,
)


def resolve_item_title(item: Tag, strategies: tuple[TitleStrategy, ...] = ITEM_TITLE_STRATEGIES) -> str:
    """Return the first title any strategy finds for an item, else ''."""
    for strategy in strategies:
        title = strategy(item)
        if title is not None:
            return title
    return ""


class DocumentExtractor:
    """
    Extracts a DocumentRecord from a rendered reference page.

    Only the title is required. Description, overview, notes and topic
    sections fall back to empty values when the page does not have them.

    Example:
        extractor = DocumentExtractor()
        record = extractor.extract(rendered_html)
    """

    def _extract_note(self, note: Tag) -> str:
        label = first_text(note, ".label") or ""
        content = "\n".join(all_texts(note, "p:not(.label)"))
        return f"{label}: {content}"

    def _extract_item(self, item: Tag) -> DocumentItem:
        href = first_attr(item, "a", "href")
        item_type = first_text(item, ".decorator")
        return DocumentItem(
            title=resolve_item_title(item),
            description=first_text(item, ".content") or "",
            url=absolute_url(href) if href is not None else "",
            item_type=item_type if item_type is not None else DEFAULT_ITEM_TYPE,
        )

    def _extract_section(self, section: Tag) -> Section:
        items = tuple(self._extract_item(item) for item in section.select(ITEM_SELECTOR))
        return Section(
            title=first_text(section, SECTION_TITLE_SELECTOR) or "",
            items=items,
        )

    def extract(self, html: str, url: str = "") -> DocumentRecord:
        """
        Extract a document record from rendered markup.

        Args:
            html: Rendered page markup
            url: Page URL, used in error messages

        Returns:
            DocumentRecord

        Raises:
            MissingRequiredFieldError: If the page has no h1
        """
        soup = parse_html(html)

        heading = soup.select_one(TITLE_SELECTOR)
        if heading is None:
            raise MissingRequiredFieldError("title", url or None)
        title = text_of(heading)

        notes = tuple(self._extract_note(note) for note in soup.select(NOTE_SELECTOR))
        sections = tuple(self._extract_section(section) for section in soup.select(SECTION_SELECTOR))

        logger.info(
            f"Extracted document '{title}': {len(notes)} notes, {len(sections)} sections, "
            f"{sum(len(s.items) for s in sections)} items"
        )

        return DocumentRecord(
            title=title,
            description=first_attr(soup, DESCRIPTION_SELECTOR, "content") or "",
            overview="\n".join(all_texts(soup, OVERVIEW_SELECTOR)),
            notes=notes,
            sections=sections,
        )
