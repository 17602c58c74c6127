"""Configuration schema models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
RenderOrder = Literal["ascending", "descending"]
CatalogLookup = Literal["index", "number"]

DEFAULT_BUCKET_URL = "https://storage.yandexcloud.net/javaswag/?list-type"


class SiteConfig(BaseModel):
    """Settings for one podcast site.

    Relative paths are resolved against ``root_dir``.
    """

    version: str = "1"
    root_dir: Path = Field(default=Path("."))
    feed_path: Path = Field(default=Path("layout/soundcloud_rss.xml"))
    episode_dir: Path = Field(default=Path("content/episode"))
    bucket_url: str = DEFAULT_BUCKET_URL
    request_timeout: float = Field(default=30.0, gt=0)
    log_level: LogLevel = "INFO"

    # Rendering
    render_limit: int = Field(default=5, ge=0)
    # "ascending" renders the lowest-numbered episodes, which is what the site
    # has always done; "descending" renders the newest.
    render_order: RenderOrder = "ascending"
    layout: str = "episode"
    image: str = "images/logo.png"
    hosts: list[str] = Field(default_factory=lambda: ["volyx"])

    # Reconciliation
    catalog_lookup: CatalogLookup = "index"
    skip_malformed_audio: bool = False

    # Site builder
    build_command: list[str] = Field(default_factory=lambda: ["hugo"], min_length=1)

    def resolve(self, path: Path) -> Path:
        """Resolve a configured path against the root directory."""
        path = path.expanduser()
        if path.is_absolute():
            return path
        return (self.root_dir.expanduser() / path).resolve()

    @property
    def root_path(self) -> Path:
        """Absolute project root."""
        return self.root_dir.expanduser().resolve()

    @property
    def feed_file(self) -> Path:
        """Absolute path of the source feed."""
        return self.resolve(self.feed_path)

    @property
    def episode_path(self) -> Path:
        """Absolute path of the episode pages directory."""
        return self.resolve(self.episode_dir)
