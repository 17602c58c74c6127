"""Static-site builder invocation."""

from podsite.site.builder import BuildResult, SiteBuilder

__all__ = ["BuildResult", "SiteBuilder"]
