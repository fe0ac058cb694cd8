"""Exception hierarchy for wwdc2md.

Every failure that aborts a conversion is a subclass of Wwdc2mdError so the
CLI can report it uniformly. Optional page elements never raise; they degrade
to empty values inside the extractors.
"""

from typing import Optional


class Wwdc2mdError(Exception):
    """Base class for all wwdc2md errors."""


class MissingRequiredFieldError(Wwdc2mdError):
    """A required selector matched no element in the page."""

    def __init__(self, field: str, url: Optional[str] = None) -> None:
        self.field = field
        self.url = url
        message = f"Missing {field}"
        if url:
            message += f" in {url}"
        super().__init__(message)


class TransportError(Wwdc2mdError):
    """The HTTP fetch of a page failed."""


class BrowserError(Wwdc2mdError):
    """Launching, navigating or waiting in the headless browser failed."""


class FilesystemError(Wwdc2mdError):
    """Writing the Markdown file failed."""
