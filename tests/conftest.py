"""Shared fixtures for podsite tests."""

import logging
from pathlib import Path

import pytest

BUCKET_NS = "http://s3.amazonaws.com/doc/2006-03-01/"


def bucket_listing(keys: list[str]) -> str:
    """Build a ListBucketResult document for the given keys."""
    contents = "".join(
        f"<Contents><Key>{key}</Key><LastModified>2023-01-01T00:00:00.000Z</LastModified>"
        f'<ETag>"abc"</ETag><Size>1024</Size></Contents>'
        for key in keys
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<ListBucketResult xmlns="{BUCKET_NS}"><Name>javaswag</Name>{contents}</ListBucketResult>'
    )


def feed_item(number: int, guest: str = "Jane Doe", description: str = "line1\nline2") -> str:
    """Build one RSS <item> for episode ``number``."""
    day = f"{number:02d}"
    return (
        "<item>"
        f"<title>#{number} - {guest} - Episode {number}</title>"
        f"<link>https://example.com/{number}</link>"
        f"<description><![CDATA[{description}]]></description>"
        f"<pubDate>Mon, {day} Jan 2023 10:00:00 +0300</pubDate>"
        f"<guid>tag:example.com,2023:{number}</guid>"
        "<itunes:duration>01:02:03</itunes:duration>"
        "<itunes:author>volyx</itunes:author>"
        "<itunes:explicit>no</itunes:explicit>"
        f"<itunes:summary>Summary {number}</itunes:summary>"
        f"<itunes:subtitle>Subtitle {number}</itunes:subtitle>"
        "</item>"
    )


def rss_document(items: list[str]) -> str:
    """Wrap items into an RSS document."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0" xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd">'
        "<channel><title>Javaswag</title><link>https://javaswag.github.io</link>"
        f"<description>Podcast about Java</description>{''.join(items)}</channel></rss>"
    )


def audio_keys(count: int) -> list[str]:
    """Gapless audio keys numbered 0..count-1."""
    return [f"{n}-2023-01-{n + 1:02d}-guest{n}-name{n}.mp3" for n in range(count)]


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Create a site project with a six-episode feed."""
    root = tmp_path / "site"
    (root / "layout").mkdir(parents=True)
    (root / "content" / "episode").mkdir(parents=True)
    feed = rss_document([feed_item(n) for n in range(1, 7)])
    (root / "layout" / "soundcloud_rss.xml").write_text(feed, encoding="utf-8")
    return root


@pytest.fixture
def listing_xml() -> str:
    """Bucket listing with audio for episodes 0..6 and a cover image."""
    return bucket_listing([*audio_keys(7), "cover.png"])


@pytest.fixture
def make_listing():
    """Factory for bucket listing documents."""
    return bucket_listing


@pytest.fixture
def make_item():
    """Factory for RSS items."""
    return feed_item


@pytest.fixture
def make_feed():
    """Factory for RSS documents."""
    return rss_document


@pytest.fixture(autouse=True)
def reset_podsite_logger():
    """Drop handlers the CLI installs so they don't outlive CliRunner streams."""
    yield
    logger = logging.getLogger("podsite")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
