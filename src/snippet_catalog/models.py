"""Data models for the snippet catalog."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from extract_fields.snippet import Snippet


@dataclass
class StoryListing:
    """Derived article fields plus the metadata of the snippet they came from."""
    name: str
    source_id: str
    last_modified: Optional[datetime]
    headline: str
    kicker: str
    author_name: str
    author_title: str
    body_text: str
    photo_byline: str
    photo_caption: str


def build_listing(snippet: Snippet) -> StoryListing:
    """Build a listing from a snippet without downloading its photo."""
    return StoryListing(
        name=snippet.name,
        source_id=snippet.source_id,
        last_modified=snippet.last_modified,
        headline=snippet.headline,
        kicker=snippet.kicker,
        author_name=snippet.author_name,
        author_title=snippet.author_title,
        body_text=snippet.body_html,
        photo_byline=snippet.photo_byline,
        photo_caption=snippet.photo_caption,
    )
