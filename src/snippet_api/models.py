"""Snippet API Pydantic models."""

from datetime import datetime

from pydantic import BaseModel, Field


class StoryResponse(BaseModel):
    """Article fields derived from one snippet, with its source metadata."""

    name: str
    source_id: str
    last_modified: datetime | None = None
    headline: str
    kicker: str
    author_name: str
    author_title: str
    body_text: str
    photo_byline: str
    photo_caption: str


class ValidationResponse(BaseModel):
    """Result of validating a posted snippet."""

    story: StoryResponse
    errors: list[str] = Field(default_factory=list)
