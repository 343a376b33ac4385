"""
Media module data models.
"""

from enum import Enum
from pydantic import BaseModel, Field


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


class MediaItem(BaseModel):
    """A file hosted on the media CDN."""

    id: str = Field(..., description="CDN public id")
    type: MediaType = Field(..., description="Image or video")
    url: str = Field(..., description="Secure delivery URL")
    path: str = Field(default="", description="CDN path (public id)")
    filename: str = Field(default="", description="Original file name")
