"""Data models for rendered output."""

from pathlib import Path

from pydantic import BaseModel, Field


class RenderedPage(BaseModel):
    """A page written to the episode directory."""

    number: int = Field(..., description="Episode number")
    path: Path = Field(..., description="Written file")
    size_bytes: int = Field(0, description="File size in bytes", ge=0)
