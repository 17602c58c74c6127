"""Custom exceptions for podsite."""


class PodsiteError(Exception):
    """Base exception for all podsite errors."""

    pass


class ConfigError(PodsiteError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class FetchError(PodsiteError):
    """Network or transport failure while fetching the audio catalog."""

    def __init__(self, message: str, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(PodsiteError):
    """Malformed XML or an unparseable title, date or number field."""

    pass


class FeedParseError(ParseError):
    """RSS feed parsing errors."""

    pass


class FeedNotFoundError(PodsiteError):
    """Feed file is missing."""

    pass


class MissingAudioError(PodsiteError, IndexError):
    """No catalog entry matches an episode number."""

    def __init__(self, number: int, catalog_size: int) -> None:
        super().__init__(
            f"Missing audio for episode {number} (catalog has {catalog_size} entries)"
        )
        self.number = number
        self.catalog_size = catalog_size


class MalformedAudioNameError(PodsiteError):
    """Audio filename has too few '-' separated segments to name a guest."""

    def __init__(self, audio_name: str) -> None:
        super().__init__(f"Cannot derive guest name from audio file: {audio_name!r}")
        self.audio_name = audio_name


class RenderError(PodsiteError):
    """Template or file-write failure while rendering a page."""

    pass


class BuildError(PodsiteError):
    """Site builder is missing or exited non-zero."""

    def __init__(
        self,
        message: str,
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
