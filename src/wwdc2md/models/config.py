"""Pydantic configuration models for wwdc2md."""

from enum import Enum
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class ContentType(str, Enum):
    """Kind of WWDC page to convert."""

    VIDEO = "video"
    DOCUMENT = "document"

    @property
    def file_tag(self) -> str:
        """Tag used in output filenames."""
        return "video" if self is ContentType.VIDEO else "doc"


class NetworkConfig(BaseModel):
    """Configuration for the HTTP client used on video pages."""

    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent header sent with requests")
    connect_timeout: float = Field(10.0, gt=0, description="Connection timeout in seconds")
    read_timeout: float = Field(30.0, gt=0, description="Read timeout in seconds")
    extra_headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers merged over the default browser header set",
    )

    model_config = {"extra": "forbid"}


class BrowserConfig(BaseModel):
    """Configuration for headless rendering of reference pages."""

    headless: bool = Field(True, description="Run Chromium without a visible window")
    navigation_timeout: float = Field(30.0, gt=0, description="Page navigation timeout in seconds")
    wait_timeout: float = Field(
        30.0,
        gt=0,
        description="Seconds to wait for the rendered content selector before failing",
    )
    wait_until: Literal["load", "domcontentloaded", "networkidle"] = Field(
        "load",
        description="Navigation event that counts as settled",
    )
    wait_selector: str = Field("h1", description="Selector that marks the page as rendered")

    model_config = {"extra": "forbid"}


class OutputConfig(BaseModel):
    """Configuration for where Markdown files are written."""

    directory: Path = Field(Path("."), description="Directory for generated Markdown files")

    model_config = {"extra": "forbid"}


class Wwdc2mdConfig(BaseModel):
    """
    Root configuration model for wwdc2md.

    Example:
        config = Wwdc2mdConfig(
            url="https://developer.apple.com/videos/play/wwdc2024/10149/",
            content_type=ContentType.VIDEO,
        )

    YAML format:
        content_type: document
        browser:
          headless: false
          wait_timeout: 45
        output:
          directory: ./notes
    """

    url: Optional[str] = Field(None, description="Target page URL")
    content_type: ContentType = Field(ContentType.VIDEO, description="Kind of page to convert")

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "WARNING",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")
    dry_run: bool = Field(False, description="Render without writing the output file")

    model_config = {"extra": "forbid"}

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "Wwdc2mdConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "Wwdc2mdConfig":
        """Load config from YAML file."""
        return cls.from_yaml(path.read_text())
