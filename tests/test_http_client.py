"""Tests for the static page HTTP client."""

from unittest.mock import MagicMock

import pytest
import requests
from requests.utils import get_encoding_from_headers

from wwdc2md.errors import TransportError
from wwdc2md.http import BROWSER_HEADERS, PageClient, decode_body
from wwdc2md.models.config import DEFAULT_USER_AGENT


@pytest.fixture
def mock_session():
    """Create a mock requests session returning a 200 response."""
    session = MagicMock(spec=requests.Session)
    response = MagicMock()
    response.status_code = 200
    response.headers = {"Content-Type": "text/html; charset=utf-8"}
    response.content = b"<html><h1>Title</h1></html>"
    session.get.return_value = response
    return session


def _response(body: bytes, content_type: str) -> requests.Response:
    """Build a response the way HTTPAdapter does, encoding guessed from headers."""
    response = requests.Response()
    response.status_code = 200
    response._content = body
    response.headers["Content-Type"] = content_type
    response.encoding = get_encoding_from_headers(response.headers)
    return response


class TestPageClient:
    """Tests for PageClient."""

    def test_sends_browser_headers_and_timeouts(self, mock_session):
        """Test the request carries the header set and explicit timeouts."""
        client = PageClient(connect_timeout=5, read_timeout=20, session=mock_session)

        html = client.get_text("https://developer.apple.com/videos/play/wwdc2024/10149/")

        assert html == "<html><h1>Title</h1></html>"
        _, kwargs = mock_session.get.call_args
        assert kwargs["timeout"] == (5, 20)
        headers = kwargs["headers"]
        assert headers["User-Agent"] == DEFAULT_USER_AGENT
        for name in ("Accept", "Accept-Language", "Accept-Encoding", "Connection", "Sec-Fetch-Mode"):
            assert headers[name] == BROWSER_HEADERS[name]

    def test_custom_user_agent_and_extra_headers(self, mock_session):
        """Test overriding the user agent and adding headers."""
        client = PageClient(
            user_agent="test-agent",
            extra_headers={"Accept-Language": "fr-FR"},
            session=mock_session,
        )

        assert client.headers["User-Agent"] == "test-agent"
        assert client.headers["Accept-Language"] == "fr-FR"

    def test_http_error_raises_transport_error(self, mock_session):
        """Test an error status becomes TransportError."""
        mock_session.get.return_value.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        client = PageClient(session=mock_session)

        with pytest.raises(TransportError, match="404"):
            client.get_text("https://developer.apple.com/missing")

    def test_connection_error_raises_transport_error(self, mock_session):
        """Test a connection failure becomes TransportError."""
        mock_session.get.side_effect = requests.ConnectionError("connection refused")
        client = PageClient(session=mock_session)

        with pytest.raises(TransportError):
            client.get_text("https://developer.apple.com/videos/")

    def test_timeout_raises_transport_error(self, mock_session):
        """Test a read timeout becomes TransportError."""
        mock_session.get.side_effect = requests.Timeout("read timed out")
        client = PageClient(session=mock_session)

        with pytest.raises(TransportError, match="timed out"):
            client.get_text("https://developer.apple.com/videos/")

    def test_context_manager_closes_session(self, mock_session):
        """Test leaving the context closes the session."""
        with PageClient(session=mock_session):
            pass

        mock_session.close.assert_called_once()

    def test_utf8_body_without_charset(self, mock_session):
        """Test UTF-8 pages served without a charset are not read as Latin-1."""
        body = "<h1>What’s new in SwiftUI — 2024</h1>".encode("utf-8")
        mock_session.get.return_value = _response(body, "text/html")
        client = PageClient(session=mock_session)

        html = client.get_text("https://developer.apple.com/videos/play/wwdc2024/10144/")

        assert html == "<h1>What’s new in SwiftUI — 2024</h1>"

    def test_declared_charset_is_used(self, mock_session):
        """Test the Content-Type charset decides the decoding."""
        body = "<h1>Café</h1>".encode("iso-8859-1")
        mock_session.get.return_value = _response(body, "text/html; charset=ISO-8859-1")
        client = PageClient(session=mock_session)

        assert client.get_text("https://developer.apple.com/") == "<h1>Café</h1>"


class TestDecodeBody:
    """Tests for decode_body."""

    def test_quoted_charset(self):
        """Test a quoted charset parameter."""
        assert decode_body("é".encode("utf-8"), 'text/html; charset="utf-8"') == "é"

    def test_unknown_declared_charset_falls_back(self):
        """Test an unknown charset name falls back to UTF-8."""
        assert decode_body("’".encode("utf-8"), "text/html; charset=x-unknown") == "’"

    def test_no_content_type(self):
        """Test decoding without any header."""
        assert decode_body(b"<h1>Title</h1>", None) == "<h1>Title</h1>"
