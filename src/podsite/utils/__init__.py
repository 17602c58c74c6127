"""Utility functions and helpers for podsite."""

from podsite.utils.errors import (
    BuildError,
    ConfigError,
    FeedNotFoundError,
    FeedParseError,
    FetchError,
    InvalidConfigError,
    MalformedAudioNameError,
    MissingAudioError,
    ParseError,
    PodsiteError,
    RenderError,
)
from podsite.utils.xml import (
    child_text,
    find_child,
    iter_children,
    local_name,
    parse_document,
)

__all__ = [
    # Errors
    "PodsiteError",
    "ConfigError",
    "InvalidConfigError",
    "FetchError",
    "ParseError",
    "FeedParseError",
    "FeedNotFoundError",
    "MissingAudioError",
    "MalformedAudioNameError",
    "RenderError",
    "BuildError",
    # XML helpers
    "parse_document",
    "local_name",
    "find_child",
    "iter_children",
    "child_text",
]
