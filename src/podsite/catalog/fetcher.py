"""Audio catalog fetcher for object-storage bucket listings.

The bucket is listed with a single unauthenticated GET. Only the ``Key`` of
each ``Contents`` entry is used; keys look like ``3-2023-01-01-jane-doe.mp3``
where the prefix before the first ``-`` is the episode number.
"""

import logging
import re

import requests

from podsite.catalog.models import AudioEntry
from podsite.utils.errors import FetchError
from podsite.utils.xml import child_text, iter_children, parse_document

logger = logging.getLogger(__name__)

KEY_SEPARATOR = "-"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_audio_number(key: str) -> int | None:
    """Parse the episode number from an object key.

    Args:
        key: Object key such as ``"12-2023-05-01-john-smith.mp3"``

    Returns:
        None if the key has no separator (not an episode file), otherwise the
        integer before the first separator, or 0 if that prefix is not numeric.
    """
    if KEY_SEPARATOR not in key:
        return None

    prefix = key.split(KEY_SEPARATOR, 1)[0]
    if not _INTEGER_RE.fullmatch(prefix):
        logger.debug("Non-numeric prefix %r in audio key %r, using 0", prefix, key)
        return 0
    return int(prefix)


def parse_bucket_listing(content: str | bytes) -> list[AudioEntry]:
    """Parse a ``ListBucketResult`` document into a sorted catalog.

    Args:
        content: Raw XML of the bucket listing

    Returns:
        Audio entries sorted ascending by number

    Raises:
        ParseError: If the document is malformed or not a bucket listing
    """
    root = parse_document(content, "ListBucketResult")

    entries = []
    for contents in iter_children(root, "Contents"):
        key = child_text(contents, "Key")
        number = parse_audio_number(key)
        if number is None:
            logger.debug("Skipping non-episode key %r", key)
            continue
        entries.append(AudioEntry(number=number, name=key))

    return sorted(entries, key=lambda entry: entry.number)


class CatalogFetcher:
    """Fetches the audio catalog from a bucket listing endpoint."""

    def __init__(self, url: str, timeout: float = 30.0) -> None:
        """Initialize the fetcher.

        Args:
            url: Bucket listing URL
            timeout: HTTP request timeout in seconds
        """
        self.url = url
        self.timeout = timeout

    def fetch(self) -> list[AudioEntry]:
        """Fetch and parse the bucket listing.

        Returns:
            Audio entries sorted ascending by number

        Raises:
            FetchError: On transport failure or a non-2xx response
            ParseError: If the response body is not a bucket listing
        """
        logger.info("Fetching audio catalog from %s", self.url)
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            raise FetchError(
                f"Bucket listing request failed (HTTP {e.response.status_code}): {self.url}",
                url=self.url,
                status_code=e.response.status_code,
            ) from e
        except requests.Timeout as e:
            raise FetchError(
                f"Timed out after {self.timeout}s fetching {self.url}", url=self.url
            ) from e
        except requests.RequestException as e:
            raise FetchError(f"Failed to fetch {self.url}: {e}", url=self.url) from e

        catalog = parse_bucket_listing(response.content)
        logger.info("Found %d audio files", len(catalog))
        return catalog
