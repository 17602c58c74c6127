"""Feed reading for podsite."""

from podsite.feeds.models import Feed, FeedItem
from podsite.feeds.parser import RSSParser

__all__ = ["Feed", "FeedItem", "RSSParser"]
