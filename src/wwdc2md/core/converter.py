"""Main Converter class tying fetch, extraction, rendering and saving together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from ..browser.session import render_page
from ..conversion.markdown import MarkdownOutput, render_document, render_video
from ..extraction.document import DocumentExtractor
from ..extraction.protocols import DocumentPageExtractor, VideoPageExtractor
from ..extraction.video import VideoExtractor
from ..http.client import PageClient
from ..models.config import ContentType, Wwdc2mdConfig
from ..naming import output_filename
from ..pipeline.steps import SaveStep

logger = logging.getLogger(__name__)

# Takes a URL, returns the fully rendered page markup
PageRenderer = Callable[[str], str]


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of converting one page.

    Attributes:
        filename: Generated Markdown filename
        path: Destination path (not written when dry_run is set)
        markdown: Rendered Markdown text
        written: Whether the file was written
    """

    filename: str
    path: Path
    markdown: str
    written: bool


class Converter:
    """
    Primary API for wwdc2md.

    Runs one of two independent pipelines chosen by config.content_type:

    - video: HTTP fetch -> VideoExtractor -> render_video
    - document: headless render -> DocumentExtractor -> render_document

    The output file is written only after the whole record has been
    extracted and rendered, so a failure never leaves a partial file.

    Example:
        config = Wwdc2mdConfig(
            url="https://developer.apple.com/documentation/swiftui",
            content_type=ContentType.DOCUMENT,
        )
        result = Converter(config).convert()
        print(result.filename)
    """

    def __init__(
        self,
        config: Wwdc2mdConfig,
        client: PageClient | None = None,
        page_renderer: PageRenderer | None = None,
        video_extractor: VideoPageExtractor | None = None,
        document_extractor: DocumentPageExtractor | None = None,
    ):
        """
        Initialize the Converter.

        Args:
            config: Configuration for the conversion
            client: HTTP client for video pages (built from config.network if omitted)
            page_renderer: Callable returning rendered HTML for document pages
                           (a headless browser session if omitted)
            video_extractor: Extractor for video pages
            document_extractor: Extractor for reference pages
        """
        self.config = config
        self._client = client
        self._page_renderer = page_renderer or self._render_with_browser
        self._video_extractor = video_extractor or VideoExtractor()
        self._document_extractor = document_extractor or DocumentExtractor()
        self._save_step = SaveStep()

    def _render_with_browser(self, url: str) -> str:
        return render_page(url, self.config.browser, user_agent=self.config.network.user_agent)

    def _build_client(self) -> PageClient:
        network = self.config.network
        return PageClient(
            user_agent=network.user_agent,
            connect_timeout=network.connect_timeout,
            read_timeout=network.read_timeout,
            extra_headers=network.extra_headers,
        )

    def convert_video(self, url: str) -> MarkdownOutput:
        """Fetch, extract and render a session video page."""
        if self._client is not None:
            html = self._client.get_text(url)
        else:
            with self._build_client() as client:
                html = client.get_text(url)

        record = self._video_extractor.extract(html, url)
        return render_video(record)

    def convert_document(self, url: str) -> MarkdownOutput:
        """Render, extract and convert a reference document page."""
        html = self._page_renderer(url)
        record = self._document_extractor.extract(html, url)
        return render_document(record)

    def convert(self, url: str | None = None) -> ConversionResult:
        """
        Convert a page and write the Markdown file.

        Args:
            url: Page URL (defaults to config.url)

        Returns:
            ConversionResult

        Raises:
            ValueError: If no URL is given or configured
            Wwdc2mdError: Any extraction, transport, browser or filesystem failure
        """
        target = url or self.config.url
        if not target:
            raise ValueError("No URL to convert")

        content_type = self.config.content_type
        if content_type is ContentType.VIDEO:
            output = self.convert_video(target)
        else:
            output = self.convert_document(target)

        filename = output_filename(content_type, output.title)
        path = self.config.output.directory / filename

        if self.config.dry_run:
            logger.info(f"Dry run: not writing {path}")
            return ConversionResult(filename=filename, path=path, markdown=output.content, written=False)

        saved = self._save_step.save(output.content, path)
        return ConversionResult(filename=filename, path=saved, markdown=output.content, written=True)


def convert_blocking(url: str, **kwargs: object) -> ConversionResult:
    """
    Convert a single page with config options given as keyword arguments.

    Example:
        result = convert_blocking(
            "https://developer.apple.com/documentation/swiftui",
            content_type="document",
        )
    """
    config = Wwdc2mdConfig(url=url, **kwargs)  # type: ignore[arg-type]
    return Converter(config).convert()
