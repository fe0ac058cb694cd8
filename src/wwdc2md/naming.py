"""Output file naming."""

from .models.config import ContentType

# Characters that are unsafe in filenames on at least one platform, plus space.
UNSAFE_CHARACTERS = frozenset('/\\:*?"<>| ')


def sanitize_filename(name: str) -> str:
    """Sanitize a page title for use in a filename.

    Each unsafe character is replaced by an underscore and the result is
    lower-cased. Other punctuation (apostrophes, dots) is kept.

    Args:
        name: Title to sanitize

    Returns:
        Sanitized name

    Example:
        >>> sanitize_filename("What's New in SwiftUI?")
        "what's_new_in_swiftui_"
    """
    replaced = "".join("_" if char in UNSAFE_CHARACTERS else char for char in name)
    return replaced.lower().strip()


def output_filename(content_type: ContentType, title: str) -> str:
    """Build the Markdown filename for a converted page."""
    return f"wwdc_{content_type.file_tag}_{sanitize_filename(title)}.md"
