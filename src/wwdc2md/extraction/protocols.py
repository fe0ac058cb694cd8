"""Protocol definitions for page extraction."""

from typing import Protocol

from ..models.records import DocumentRecord, VideoRecord


class VideoPageExtractor(Protocol):
    """
    Protocol for building a VideoRecord from session page markup.

    Implementations must raise MissingRequiredFieldError when the title or
    overview is absent and degrade every other field to an empty value.
    """

    def extract(self, html: str, url: str) -> VideoRecord:
        """
        Extract a video record.

        Args:
            html: Page markup
            url: Page URL, kept on the record

        Returns:
            VideoRecord
        """
        ...


class DocumentPageExtractor(Protocol):
    """
    Protocol for building a DocumentRecord from rendered reference markup.

    Implementations must raise MissingRequiredFieldError when the title is
    absent and degrade every other field to an empty or default value.
    """

    def extract(self, html: str, url: str = "") -> DocumentRecord:
        """
        Extract a document record.

        Args:
            html: Rendered page markup
            url: Page URL, used in error messages

        Returns:
            DocumentRecord
        """
        ...
