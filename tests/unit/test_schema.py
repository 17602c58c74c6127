"""Tests for configuration schema models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from podsite.config.schema import DEFAULT_BUCKET_URL, SiteConfig


class TestSiteConfig:
    """Tests for SiteConfig model."""

    def test_defaults(self) -> None:
        """Test defaults match the site's long-standing layout."""
        config = SiteConfig()

        assert config.feed_path == Path("layout/soundcloud_rss.xml")
        assert config.episode_dir == Path("content/episode")
        assert config.bucket_url == DEFAULT_BUCKET_URL
        assert config.render_limit == 5
        assert config.render_order == "ascending"
        assert config.catalog_lookup == "index"
        assert config.skip_malformed_audio is False
        assert config.build_command == ["hugo"]
        assert config.hosts == ["volyx"]
        assert config.image == "images/logo.png"

    def test_paths_resolve_against_root(self, tmp_path: Path) -> None:
        """Test relative paths are resolved from root_dir."""
        config = SiteConfig(root_dir=tmp_path)

        assert config.feed_file == (tmp_path / "layout" / "soundcloud_rss.xml").resolve()
        assert config.episode_path == (tmp_path / "content" / "episode").resolve()
        assert config.root_path == tmp_path.resolve()

    def test_absolute_paths_kept(self, tmp_path: Path) -> None:
        """Test absolute paths ignore root_dir."""
        feed = tmp_path / "elsewhere" / "feed.xml"
        config = SiteConfig(root_dir=Path("/srv/site"), feed_path=feed)

        assert config.feed_file == feed

    def test_negative_limit_rejected(self) -> None:
        """Test render_limit must not be negative."""
        with pytest.raises(ValidationError):
            SiteConfig(render_limit=-1)

    def test_invalid_order_rejected(self) -> None:
        """Test render_order only accepts known directions."""
        with pytest.raises(ValidationError):
            SiteConfig(render_order="newest")  # type: ignore

    def test_invalid_lookup_rejected(self) -> None:
        """Test catalog_lookup only accepts known modes."""
        with pytest.raises(ValidationError):
            SiteConfig(catalog_lookup="name")  # type: ignore

    def test_timeout_must_be_positive(self) -> None:
        """Test request_timeout must be greater than zero."""
        with pytest.raises(ValidationError):
            SiteConfig(request_timeout=0)

    def test_empty_build_command_rejected(self) -> None:
        """Test build_command needs at least the executable."""
        with pytest.raises(ValidationError):
            SiteConfig(build_command=[])
