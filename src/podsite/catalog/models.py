"""Data models for the audio catalog."""

from pydantic import BaseModel, Field


class AudioEntry(BaseModel):
    """One audio file stored in the bucket.

    Example:
        >>> AudioEntry(number=3, name="3-2023-01-01-jane-doe.mp3")
    """

    number: int = Field(..., description="Episode index parsed from the key prefix")
    name: str = Field(..., description="Object key (filename)")
