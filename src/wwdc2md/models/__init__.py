"""Wwdc2md configuration and record models."""

from .config import (
    DEFAULT_USER_AGENT,
    BrowserConfig,
    ContentType,
    NetworkConfig,
    OutputConfig,
    Wwdc2mdConfig,
)
from .records import (
    CodeSample,
    DocumentItem,
    DocumentRecord,
    ResourceLink,
    ResourceType,
    Section,
    VideoRecord,
)

__all__ = [
    # Config
    "DEFAULT_USER_AGENT",
    "BrowserConfig",
    "ContentType",
    "NetworkConfig",
    "OutputConfig",
    "Wwdc2mdConfig",
    # Records
    "CodeSample",
    "DocumentItem",
    "DocumentRecord",
    "ResourceLink",
    "ResourceType",
    "Section",
    "VideoRecord",
]
