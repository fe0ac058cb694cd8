"""Tests for the Converter pipeline."""

from unittest.mock import MagicMock, patch

import pytest

from wwdc2md import ContentType, Converter, Wwdc2mdConfig, convert_blocking
from wwdc2md.errors import BrowserError, FilesystemError, MissingRequiredFieldError, TransportError

VIDEO_URL = "https://developer.apple.com/videos/play/wwdc2024/10149/"
DOCUMENT_URL = "https://developer.apple.com/documentation/swiftui"


def _client(html: str) -> MagicMock:
    client = MagicMock()
    client.get_text.return_value = html
    return client


class TestVideoPipeline:
    """Tests for converting video pages."""

    def test_writes_markdown_file(self, tmp_path, video_html):
        """Test a full video conversion."""
        config = Wwdc2mdConfig(url=VIDEO_URL, output={"directory": tmp_path})

        result = Converter(config, client=_client(video_html)).convert()

        assert result.filename == "wwdc_video_work_with_windows_in_swiftui.md"
        assert result.written is True
        assert result.path == (tmp_path / result.filename).resolve()
        content = result.path.read_text(encoding="utf-8")
        assert content.startswith("# Work with windows in SwiftUI\n")
        assert "## Code Samples" in content
        assert content == result.markdown

    def test_overwrites_existing_file(self, tmp_path, video_html):
        """Test an existing file is replaced."""
        existing = tmp_path / "wwdc_video_work_with_windows_in_swiftui.md"
        existing.write_text("old", encoding="utf-8")
        config = Wwdc2mdConfig(url=VIDEO_URL, output={"directory": tmp_path})

        Converter(config, client=_client(video_html)).convert()

        assert existing.read_text(encoding="utf-8") != "old"

    def test_no_code_samples_heading_when_absent(self, tmp_path):
        """Test pages without code samples omit the heading."""
        html = '<h1>Intro</h1><div class="supplement details"><p>Overview</p></div>'
        config = Wwdc2mdConfig(url=VIDEO_URL, output={"directory": tmp_path})

        result = Converter(config, client=_client(html)).convert()

        assert "## Code Samples" not in result.path.read_text(encoding="utf-8")

    def test_missing_title_writes_nothing(self, tmp_path):
        """Test a page without h1 fails before any file is written."""
        html = '<div class="supplement details"><p>Overview</p></div>'
        config = Wwdc2mdConfig(url=VIDEO_URL, output={"directory": tmp_path})

        with pytest.raises(MissingRequiredFieldError):
            Converter(config, client=_client(html)).convert()

        assert list(tmp_path.iterdir()) == []

    def test_transport_error_propagates(self, tmp_path):
        """Test fetch failures reach the caller unchanged."""
        client = MagicMock()
        client.get_text.side_effect = TransportError("Failed to fetch")
        config = Wwdc2mdConfig(url=VIDEO_URL, output={"directory": tmp_path})

        with pytest.raises(TransportError):
            Converter(config, client=client).convert()

        assert list(tmp_path.iterdir()) == []

    def test_builds_client_from_network_config(self, tmp_path, video_html):
        """Test the default client uses configured timeouts."""
        config = Wwdc2mdConfig(
            url=VIDEO_URL,
            network={"connect_timeout": 3, "read_timeout": 7},
            output={"directory": tmp_path},
        )

        with patch("wwdc2md.core.converter.PageClient") as client_cls:
            client_cls.return_value.__enter__.return_value = _client(video_html)
            Converter(config).convert()

        _, kwargs = client_cls.call_args
        assert kwargs["connect_timeout"] == 3
        assert kwargs["read_timeout"] == 7

    def test_dry_run_does_not_write(self, tmp_path, video_html):
        """Test dry run returns Markdown without writing."""
        config = Wwdc2mdConfig(url=VIDEO_URL, output={"directory": tmp_path}, dry_run=True)

        result = Converter(config, client=_client(video_html)).convert()

        assert result.written is False
        assert result.markdown.startswith("# Work with windows in SwiftUI")
        assert list(tmp_path.iterdir()) == []


class TestDocumentPipeline:
    """Tests for converting reference document pages."""

    def test_writes_markdown_file(self, tmp_path, document_html):
        """Test a full document conversion with an injected renderer."""
        config = Wwdc2mdConfig(
            url=DOCUMENT_URL,
            content_type=ContentType.DOCUMENT,
            output={"directory": tmp_path},
        )
        renderer = MagicMock(return_value=document_html)

        result = Converter(config, page_renderer=renderer).convert()

        renderer.assert_called_once_with(DOCUMENT_URL)
        assert result.filename == "wwdc_doc_swiftui.md"
        content = result.path.read_text(encoding="utf-8")
        assert "### protocol `App`" in content
        assert "[Documentation](https://developer.apple.com/documentation/swiftui/app)" in content

    def test_uses_browser_by_default(self, tmp_path, document_html):
        """Test the default renderer is the headless browser."""
        config = Wwdc2mdConfig(
            url=DOCUMENT_URL,
            content_type=ContentType.DOCUMENT,
            browser={"wait_timeout": 9},
            output={"directory": tmp_path},
        )

        with patch("wwdc2md.core.converter.render_page", return_value=document_html) as render:
            Converter(config).convert()

        args, kwargs = render.call_args
        assert args[0] == DOCUMENT_URL
        assert args[1].wait_timeout == 9

    def test_browser_error_writes_nothing(self, tmp_path):
        """Test browser failures propagate without output."""
        config = Wwdc2mdConfig(
            url=DOCUMENT_URL,
            content_type=ContentType.DOCUMENT,
            output={"directory": tmp_path},
        )
        renderer = MagicMock(side_effect=BrowserError("Timed out"))

        with pytest.raises(BrowserError):
            Converter(config, page_renderer=renderer).convert()

        assert list(tmp_path.iterdir()) == []

    def test_missing_title(self, tmp_path):
        """Test a rendered page without h1 is fatal."""
        config = Wwdc2mdConfig(
            url=DOCUMENT_URL,
            content_type=ContentType.DOCUMENT,
            output={"directory": tmp_path},
        )

        with pytest.raises(MissingRequiredFieldError):
            Converter(config, page_renderer=lambda url: "<p>no title</p>").convert()


class TestConverterErrors:
    """Tests for converter argument and filesystem errors."""

    def test_requires_url(self):
        """Test converting without a URL."""
        with pytest.raises(ValueError):
            Converter(Wwdc2mdConfig()).convert()

    def test_write_failure_raises_filesystem_error(self, tmp_path, video_html):
        """Test an unwritable destination raises FilesystemError."""
        blocker = tmp_path / "not-a-directory"
        blocker.write_text("", encoding="utf-8")
        config = Wwdc2mdConfig(url=VIDEO_URL, output={"directory": blocker})

        with pytest.raises(FilesystemError):
            Converter(config, client=_client(video_html)).convert()

    def test_convert_blocking(self, tmp_path, video_html):
        """Test the keyword-argument convenience function."""
        with patch("wwdc2md.core.converter.PageClient") as client_cls:
            client_cls.return_value.__enter__.return_value = _client(video_html)
            result = convert_blocking(VIDEO_URL, output={"directory": tmp_path})

        assert result.path.exists()
