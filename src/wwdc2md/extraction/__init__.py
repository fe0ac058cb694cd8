"""Structured extraction from WWDC video and reference pages."""

from .document import DocumentExtractor, absolute_url, resolve_item_title
from .protocols import DocumentPageExtractor, VideoPageExtractor
from .video import VideoExtractor, classify_resource, split_timestamp

__all__ = [
    # Protocols
    "DocumentPageExtractor",
    "VideoPageExtractor",
    # Implementations
    "DocumentExtractor",
    "VideoExtractor",
    # Helpers
    "absolute_url",
    "classify_resource",
    "resolve_item_title",
    "split_timestamp",
]
