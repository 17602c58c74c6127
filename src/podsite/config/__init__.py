"""Configuration management for podsite."""

from podsite.config.manager import ConfigManager
from podsite.config.schema import SiteConfig

__all__ = ["ConfigManager", "SiteConfig"]
