"""Episode model produced by reconciliation."""

from pydantic import BaseModel, Field


class Episode(BaseModel):
    """A feed item joined with its audio file, ready to render.

    ``description`` holds the episode title: it fills the page's
    ``description`` front-matter key, while ``content`` is the body.
    """

    number: int = Field(..., description="Episode number from the title")
    title: str = Field(..., description="Feed item title")
    date: str = Field(..., description="Publish date as YYYY-MM-DD")
    guid: str = Field("", description="Feed item guid")
    guest: str = Field(..., description="Guest slug from the audio filename")
    audio: str = Field(..., description="Audio object key")
    description: str = Field("", description="Front-matter description")
    content: str = Field("", description="Page body")
