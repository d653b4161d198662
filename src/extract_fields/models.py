"""Data models for the extract_fields pipeline stage."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Article:
    """Article fields derived from a snippet's style ranges."""
    headline: str
    kicker: str
    author_name: str
    author_title: str
    body_html: str
    photo_byline: str
    photo_caption: str
    photo: bytes = field(default=b"", repr=False)
