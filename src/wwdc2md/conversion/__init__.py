"""Markdown conversion for extracted records."""

from .markdown import MarkdownOutput, render_document, render_video

__all__ = [
    "MarkdownOutput",
    "render_document",
    "render_video",
]
