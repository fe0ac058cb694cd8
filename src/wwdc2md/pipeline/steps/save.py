"""SaveStep - Markdown file writing."""

import logging
from pathlib import Path

from ...errors import FilesystemError

logger = logging.getLogger(__name__)


class SaveStep:
    """
    Writes rendered Markdown to a file, overwriting any existing file.

    Creates the parent directory when needed.

    Example:
        save_step = SaveStep()
        path = save_step.save(markdown, Path("wwdc_video_example.md"))
    """

    name = "save"

    def save(self, content: str, output_path: Path) -> Path:
        """
        Write content to output_path.

        Args:
            content: Markdown text
            output_path: Destination file

        Returns:
            Resolved path of the written file

        Raises:
            FilesystemError: If the directory cannot be created or the write fails
        """
        resolved = output_path.resolve()

        try:
            resolved.parent.mkdir(parents=True, exist_ok=True)
            resolved.write_text(content, encoding="utf-8")
        except OSError as e:
            raise FilesystemError(f"Failed to save {resolved}: {e}") from e

        logger.info(f"Saved: {resolved}")
        return resolved
