"""Data models for the parse_snippets pipeline stage."""

from dataclasses import dataclass, field


@dataclass
class CharacterRange:
    """Run of text sharing one character style (CharacterStyleRange)."""
    text_runs: list[str] = field(default_factory=list)
    font_style: str = ""


@dataclass
class ParagraphRange:
    """Paragraph tagged with a named paragraph style (ParagraphStyleRange)."""
    applied_style: str = ""
    character_ranges: list[CharacterRange] = field(default_factory=list)


@dataclass
class StoryBlock:
    """One Story element and its paragraphs, in document order."""
    paragraphs: list[ParagraphRange] = field(default_factory=list)


@dataclass
class LinkResource:
    """Placed asset referenced by a Link element."""
    uri: str = ""


@dataclass
class StyleRangeTree:
    """Everything the parser keeps from a snippet document."""
    stories: list[StoryBlock] = field(default_factory=list)
    links: list[LinkResource] = field(default_factory=list)
