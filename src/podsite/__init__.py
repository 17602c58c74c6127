"""podsite - regenerate podcast episode pages from a feed and an audio bucket."""

__version__ = "0.1.0"
