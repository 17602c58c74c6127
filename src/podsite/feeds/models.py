"""Data models for the published RSS feed."""

from pydantic import BaseModel, Field


class FeedItem(BaseModel):
    """One ``<item>`` of the feed, with every field kept verbatim."""

    title: str = ""
    link: str = ""
    description: str = ""
    pub_date: str = ""
    guid: str = ""
    duration: str = ""
    author: str = ""
    explicit: str = ""
    summary: str = ""
    subtitle: str = ""


class Feed(BaseModel):
    """The feed channel and its items in document order."""

    title: str = ""
    link: str = ""
    description: str = ""
    items: list[FeedItem] = Field(default_factory=list)
