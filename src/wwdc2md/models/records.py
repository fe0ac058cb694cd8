"""Records extracted from WWDC pages."""

from dataclasses import dataclass, field
from enum import Enum


class ResourceType(str, Enum):
    """Kind of link listed in a video page's resources block."""

    DOCUMENT = "document"
    DOWNLOAD = "download"
    VIDEO = "video"

    @property
    def label(self) -> str:
        """Human readable label used in rendered Markdown."""
        return _RESOURCE_LABELS[self]


_RESOURCE_LABELS = {
    ResourceType.DOCUMENT: "Documentation",
    ResourceType.DOWNLOAD: "Download",
    ResourceType.VIDEO: "Video",
}


@dataclass(frozen=True)
class CodeSample:
    """A code listing shown during a session video."""

    title: str
    timestamp: str
    code: str
    language: str = "swift"


@dataclass(frozen=True)
class ResourceLink:
    """A related link from the video page sidebar."""

    title: str
    url: str
    resource_type: ResourceType = ResourceType.DOCUMENT


@dataclass(frozen=True)
class VideoRecord:
    """
    Structured content of a WWDC session video page.

    Attributes:
        title: Session title (first h1)
        url: Page URL the record was extracted from
        overview: Session abstract
        transcript: Transcript sentences joined by single spaces
        code_samples: Code listings in page order
        resources: Related links in page order
    """

    title: str
    url: str
    overview: str = ""
    transcript: str = ""
    code_samples: tuple[CodeSample, ...] = field(default_factory=tuple)
    resources: tuple[ResourceLink, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DocumentItem:
    """One entry of a topics table on a reference page."""

    title: str = ""
    description: str = ""
    url: str = ""
    item_type: str = "article"


@dataclass(frozen=True)
class Section:
    """A titled group of document items."""

    title: str = ""
    items: tuple[DocumentItem, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DocumentRecord:
    """
    Structured content of a developer.apple.com reference page.

    Attributes:
        title: Page title (first h1)
        description: Content of the meta description tag
        overview: Overview paragraphs joined by newlines
        notes: Callouts formatted as "label: content"
        sections: Topic sections in page order
    """

    title: str
    description: str = ""
    overview: str = ""
    notes: tuple[str, ...] = field(default_factory=tuple)
    sections: tuple[Section, ...] = field(default_factory=tuple)
