"""
wwdc2md - Convert WWDC session videos and Apple reference pages to Markdown.

Usage:
    from wwdc2md import ContentType, Converter, Wwdc2mdConfig

    config = Wwdc2mdConfig(
        url="https://developer.apple.com/videos/play/wwdc2024/10149/",
        content_type=ContentType.VIDEO,
    )

    result = Converter(config).convert()
    print(result.filename)
"""

__version__ = "1.0.0"

from .conversion import MarkdownOutput, render_document, render_video
from .core.converter import ConversionResult, Converter, convert_blocking
from .errors import (
    BrowserError,
    FilesystemError,
    MissingRequiredFieldError,
    TransportError,
    Wwdc2mdError,
)
from .extraction import DocumentExtractor, VideoExtractor
from .models.config import BrowserConfig, ContentType, NetworkConfig, OutputConfig, Wwdc2mdConfig
from .models.records import (
    CodeSample,
    DocumentItem,
    DocumentRecord,
    ResourceLink,
    ResourceType,
    Section,
    VideoRecord,
)
from .naming import output_filename, sanitize_filename

__all__ = [
    "__version__",
    # Core
    "Converter",
    "ConversionResult",
    "convert_blocking",
    # Config
    "Wwdc2mdConfig",
    "ContentType",
    "NetworkConfig",
    "BrowserConfig",
    "OutputConfig",
    # Records
    "VideoRecord",
    "CodeSample",
    "ResourceLink",
    "ResourceType",
    "DocumentRecord",
    "Section",
    "DocumentItem",
    # Extraction and rendering
    "VideoExtractor",
    "DocumentExtractor",
    "MarkdownOutput",
    "render_video",
    "render_document",
    "output_filename",
    "sanitize_filename",
    # Errors
    "Wwdc2mdError",
    "MissingRequiredFieldError",
    "TransportError",
    "BrowserError",
    "FilesystemError",
]
