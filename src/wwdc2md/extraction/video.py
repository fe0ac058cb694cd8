"""Extraction of WWDC session video pages."""

import logging
from typing import Optional

from bs4 import Tag

from ..errors import MissingRequiredFieldError
from ..models.records import CodeSample, ResourceLink, ResourceType, VideoRecord
from .dom import all_texts, parse_html, text_of

logger = logging.getLogger(__name__)

TITLE_SELECTOR = "h1"
OVERVIEW_SELECTOR = ".supplement.details > p"
TRANSCRIPT_SELECTOR = ".supplement.transcript .sentence"
CODE_SAMPLE_SELECTOR = ".sample-code-main-container"
RESOURCE_SELECTOR = ".links.small li"

TIMESTAMP_SEPARATOR = " - "
DEFAULT_CODE_LANGUAGE = "swift"

# Checked in order, the first keyword found in the class attribute wins
RESOURCE_KEYWORDS = (
    ("document", ResourceType.DOCUMENT),
    ("download", ResourceType.DOWNLOAD),
    ("video", ResourceType.VIDEO),
)


def split_timestamp(text: str) -> tuple[str, str]:
    """
    Split a code sample heading into (timestamp, title).

    Example:
        >>> split_timestamp("10:40 - Setting scene association behavior")
        ('10:40', 'Setting scene association behavior')
        >>> split_timestamp("Configuring targets")
        ('', 'Configuring targets')
    """
    index = text.find(TIMESTAMP_SEPARATOR)
    if index == -1:
        return "", text
    return text[:index], text[index + len(TIMESTAMP_SEPARATOR) :]


def classify_resource(class_attr: str) -> ResourceType:
    """Classify a resource by keywords in its class attribute."""
    for keyword, resource_type in RESOURCE_KEYWORDS:
        if keyword in class_attr:
            return resource_type
    return ResourceType.DOCUMENT


def _class_string(element: Tag) -> str:
    classes = element.get("class") or []
    if isinstance(classes, str):
        return classes
    return " ".join(classes)


class VideoExtractor:
    """
    Extracts a VideoRecord from a developer.apple.com session page.

    Title and overview are required; transcript, code samples and resources
    are optional and may be empty.

    Example:
        extractor = VideoExtractor()
        record = extractor.extract(html, "https://developer.apple.com/videos/play/wwdc2024/10149/")
    """

    def __init__(self, code_language: str = DEFAULT_CODE_LANGUAGE):
        """
        Initialize the extractor.

        Args:
            code_language: Language tag given to every code sample
        """
        self._code_language = code_language

    def _required_text(self, soup: Tag, selector: str, field: str, url: str) -> str:
        element = soup.select_one(selector)
        if element is None:
            raise MissingRequiredFieldError(field, url)
        return text_of(element)

    def _extract_code_sample(self, container: Tag) -> Optional[CodeSample]:
        heading = container.select_one("p")
        code = container.select_one("code")
        if heading is None or code is None:
            logger.debug("Skipping code sample without heading or code element")
            return None

        timestamp, title = split_timestamp(text_of(heading))
        return CodeSample(
            title=title,
            timestamp=timestamp,
            code=text_of(code),
            language=self._code_language,
        )

    def _extract_resource(self, item: Tag) -> Optional[ResourceLink]:
        link = item.select_one("a")
        if link is None or link.get("href") is None:
            logger.debug("Skipping resource without a link")
            return None

        return ResourceLink(
            title=text_of(link),
            url=str(link["href"]),
            resource_type=classify_resource(_class_string(item)),
        )

    def extract(self, html: str, url: str) -> VideoRecord:
        """
        Extract a video record from page markup.

        Args:
            html: Page markup
            url: Page URL, kept on the record

        Returns:
            VideoRecord

        Raises:
            MissingRequiredFieldError: If the title or overview is absent
        """
        soup = parse_html(html)

        title = self._required_text(soup, TITLE_SELECTOR, "title", url)
        overview = self._required_text(soup, OVERVIEW_SELECTOR, "overview", url)
        transcript = " ".join(all_texts(soup, TRANSCRIPT_SELECTOR))

        code_samples = []
        for container in soup.select(CODE_SAMPLE_SELECTOR):
            sample = self._extract_code_sample(container)
            if sample is not None:
                code_samples.append(sample)

        resources = []
        for item in soup.select(RESOURCE_SELECTOR):
            resource = self._extract_resource(item)
            if resource is not None:
                resources.append(resource)

        logger.info(
            f"Extracted video '{title}': {len(code_samples)} code samples, "
            f"{len(resources)} resources, transcript {len(transcript)} characters"
        )

        return VideoRecord(
            title=title,
            url=url,
            overview=overview,
            transcript=transcript,
            code_samples=tuple(code_samples),
            resources=tuple(resources),
        )
