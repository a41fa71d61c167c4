"""Learning content models."""

from typing import Literal
from pydantic import BaseModel, Field

TopicLevel = Literal["Beginner", "Intermediate", "Advanced"]


class Topic(BaseModel):
    """Catalog entry for a learning topic."""
    slug: str = Field(..., pattern=r"^[a-z0-9][a-z0-9-]*$")
    title: str
    level: TopicLevel = "Beginner"


class TopicContent(Topic):
    """Topic with its raw markdown source."""
    markdown: str
