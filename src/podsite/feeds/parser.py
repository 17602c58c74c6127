"""RSS feed reader for the previously published feed."""

import logging
from pathlib import Path

from podsite.feeds.models import Feed, FeedItem
from podsite.utils.errors import FeedNotFoundError, FeedParseError
from podsite.utils.xml import child_text, find_child, iter_children, parse_document

logger = logging.getLogger(__name__)

# FeedItem field -> element local name. ``itunes:duration`` and friends
# match on local name.
ITEM_FIELDS = {
    "title": "title",
    "link": "link",
    "description": "description",
    "pub_date": "pubDate",
    "guid": "guid",
    "duration": "duration",
    "author": "author",
    "explicit": "explicit",
    "summary": "summary",
    "subtitle": "subtitle",
}


class RSSParser:
    """Parses RSS documents and extracts episode items."""

    def read(self, path: Path) -> Feed:
        """Read and parse a feed file.

        Args:
            path: Feed file location

        Returns:
            Parsed feed

        Raises:
            FeedNotFoundError: If the file doesn't exist
            FeedParseError: If the file can't be read or parsed
        """
        logger.info("Reading feed %s", path)
        try:
            content = path.read_bytes()
        except FileNotFoundError as e:
            raise FeedNotFoundError(f"Feed file not found: {path}") from e
        except OSError as e:
            raise FeedParseError(f"Cannot read feed file {path}: {e}") from e

        feed = self.parse(content)
        logger.info("Feed '%s' has %d items", feed.title, len(feed.items))
        return feed

    def parse(self, content: str | bytes) -> Feed:
        """Parse an RSS document.

        Args:
            content: Raw RSS XML

        Returns:
            Parsed feed with items in document order

        Raises:
            FeedParseError: If the markup is malformed or has no channel
        """
        root = parse_document(content, "rss", error_cls=FeedParseError)

        channel = find_child(root, "channel")
        if channel is None:
            raise FeedParseError("RSS document has no <channel>")

        items = [
            FeedItem(**{field: child_text(item, tag) for field, tag in ITEM_FIELDS.items()})
            for item in iter_children(channel, "item")
        ]

        return Feed(
            title=child_text(channel, "title"),
            link=child_text(channel, "link"),
            description=child_text(channel, "description"),
            items=items,
        )
