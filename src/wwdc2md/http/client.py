"""Blocking HTTP client for static WWDC pages."""

from __future__ import annotations

import logging
from types import TracebackType

import requests
from charset_normalizer import from_bytes as detect_encoding
from requests.utils import DEFAULT_ACCEPT_ENCODING

from ..errors import TransportError
from ..models.config import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

# developer.apple.com serves different markup to clients that do not look like
# a desktop browser navigating to the page.
BROWSER_HEADERS = {
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,"
        "image/apng,*/*;q=0.8,application/signed-exchange;v=b3;q=0.7"
    ),
    "Accept-Language": "en-US,en;q=0.9",
    # Only advertise encodings requests can decode (br needs brotli installed)
    "Accept-Encoding": DEFAULT_ACCEPT_ENCODING,
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Sec-Fetch-User": "?1",
}


def decode_body(content: bytes, content_type: str | None) -> str:
    """
    Decode a response body to text.

    Fallback chain:
    1. Content-Type header charset
    2. UTF-8
    3. charset-normalizer detection
    4. UTF-8 with replacement

    requests assumes ISO-8859-1 for text/html without a charset, which
    garbles UTF-8 titles, so its decoding is not used.
    """
    encoding = None
    if content_type:
        for part in content_type.split(";"):
            part = part.strip()
            if part.lower().startswith("charset="):
                encoding = part.split("=", 1)[1].strip().strip("\"'")
                break

    if encoding:
        try:
            return content.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            logger.debug(f"Failed to decode with declared encoding: {encoding}")

    try:
        return content.decode("utf-8")
    except UnicodeDecodeError:
        pass

    best_match = detect_encoding(content).best()
    if best_match is not None:
        logger.debug(f"Detected encoding: {best_match.encoding}")
        return str(best_match)

    return content.decode("utf-8", errors="replace")


class PageClient:
    """
    HTTP client that fetches page markup with a browser-like header set.

    No retries are attempted; any transport or HTTP status failure is raised
    as TransportError.

    Example:
        with PageClient(connect_timeout=5, read_timeout=20) as client:
            html = client.get_text("https://developer.apple.com/videos/play/wwdc2024/10149/")
    """

    def __init__(
        self,
        user_agent: str | None = None,
        connect_timeout: float = 10.0,
        read_timeout: float = 30.0,
        extra_headers: dict[str, str] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            user_agent: User-Agent header (defaults to a desktop Chrome string)
            connect_timeout: Connection timeout in seconds
            read_timeout: Read timeout in seconds
            extra_headers: Headers merged over the default header set
            session: Optional pre-built requests session
        """
        self._timeout = (connect_timeout, read_timeout)
        self._headers = dict(BROWSER_HEADERS)
        self._headers["User-Agent"] = user_agent or DEFAULT_USER_AGENT
        if extra_headers:
            self._headers.update(extra_headers)
        self._session = session or requests.Session()

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        return dict(self._headers)

    def __enter__(self) -> PageClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def get_text(self, url: str) -> str:
        """
        Fetch a page and return its body as text.

        Args:
            url: The URL to fetch

        Returns:
            Decoded response body

        Raises:
            TransportError: On connection errors, timeouts or HTTP error statuses
        """
        logger.info(f"Fetching {url}")
        try:
            response = self._session.get(url, headers=self._headers, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"Failed to fetch {url}: {e}") from e

        logger.debug(f"Fetched {url}: status={response.status_code}, {len(response.content)} bytes")
        return decode_body(response.content, response.headers.get("Content-Type"))
