"""HTTP fetching for static pages."""

from .client import BROWSER_HEADERS, PageClient, decode_body

__all__ = [
    "BROWSER_HEADERS",
    "PageClient",
    "decode_body",
]
