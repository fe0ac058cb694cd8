"""Browser rendering for JavaScript-driven pages."""

from .session import BrowserSession, render_page

__all__ = [
    "BrowserSession",
    "render_page",
]
