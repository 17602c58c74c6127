"""Parsers for the naming conventions shared by feed titles and audio keys.

Feed titles look like ``"#12 - Jane Doe - Episode Name"`` and audio keys
like ``"12-2023-05-01-jane-doe.mp3"``. Each convention has one function here.
"""

import re
from datetime import datetime

from podsite.utils.errors import MalformedAudioNameError, ParseError

TITLE_SEPARATOR = "-"
NAME_SEPARATOR = "-"

# RFC 1123 with a numeric zone, e.g. "Mon, 02 Jan 2006 15:04:05 -0700"
PUB_DATE_FORMAT = "%a, %d %b %Y %H:%M:%S %z"
# strptime also takes one-digit days and "Z"; the layout needs exact widths
_PUB_DATE_RE = re.compile(
    r"[A-Z][a-z]{2}, [0-9]{2} [A-Z][a-z]{2} [0-9]{4} [0-9]{2}:[0-9]{2}:[0-9]{2} [+-][0-9]{4}"
)
PAGE_DATE_FORMAT = "%Y-%m-%d"

_DIGITS_RE = re.compile(r"[+-]?[0-9]+")


def parse_episode_number(title: str) -> int:
    """Extract the episode number from a feed title.

    Args:
        title: Title such as ``"#3 - Jane Doe - Episode Title"``

    Returns:
        Episode number

    Raises:
        ParseError: If the leading token is not a number
    """
    token = title.split(TITLE_SEPARATOR, 1)[0].strip()
    if token and not token[0].isdigit():
        token = token[1:]

    if not _DIGITS_RE.fullmatch(token):
        raise ParseError(f"Cannot parse episode number from title: {title!r}")
    return int(token)


def parse_pub_date(value: str) -> datetime:
    """Parse an RSS ``pubDate`` value.

    Raises:
        ParseError: If the value doesn't match the RFC 1123 numeric-zone layout
    """
    if not _PUB_DATE_RE.fullmatch(value):
        raise ParseError(f"Cannot parse publish date {value!r}: expected {PUB_DATE_FORMAT!r}")
    try:
        return datetime.strptime(value, PUB_DATE_FORMAT)
    except ValueError as e:
        raise ParseError(f"Cannot parse publish date {value!r}: {e}") from e


def format_episode_date(value: datetime) -> str:
    """Format a publish timestamp as a page date (in its own time zone)."""
    return value.strftime(PAGE_DATE_FORMAT)


def parse_guest_name(audio_name: str) -> str:
    """Derive the guest slug from an audio filename.

    The extension is dropped and the last two ``-`` separated words are kept:
    ``"3-2023-01-01-jane-doe.mp3"`` gives ``"jane-doe"``.

    Raises:
        MalformedAudioNameError: If the name has fewer than two words
    """
    stem = audio_name.split(".", 1)[0]
    words = stem.split(NAME_SEPARATOR)
    if len(words) < 2:
        raise MalformedAudioNameError(audio_name)
    return f"{words[-2]}{NAME_SEPARATOR}{words[-1]}"


def expand_paragraphs(text: str) -> str:
    """Double every newline so each line becomes its own markdown paragraph."""
    return text.replace("\n", "\n\n")
