"""Role table mapping paragraph style names to article fields.

Each rule pairs a predicate over ``AppliedParagraphStyle`` with a renderer
for the first paragraph that satisfies it. Adding a role means adding a
row to ``FIELD_RULES``; the extraction loop in ``extract_fields.snippet``
does not change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from parse_snippets.models import ParagraphRange

EMPHASIS_OPEN = "<i>"
EMPHASIS_CLOSE = "</i>"
PARAGRAPH_OPEN = "<p>"
PARAGRAPH_CLOSE = "</p>"


@dataclass(frozen=True)
class FieldRule:
    """How one article field is located and rendered."""
    name: str
    matches: Callable[[str], bool]
    render: Callable[[ParagraphRange], str]


def style_is(style_name: str) -> Callable[[str], bool]:
    return lambda style: style == style_name


def style_contains(fragment: str) -> Callable[[str], bool]:
    return lambda style: fragment in style


def _emphasize(text: str) -> str:
    return f"{EMPHASIS_OPEN}{text}{EMPHASIS_CLOSE}"


def first_text_run(paragraph: ParagraphRange) -> str:
    """Return the first text run of the first character range, or ''."""
    if not paragraph.character_ranges:
        return ""
    runs = paragraph.character_ranges[0].text_runs
    return runs[0] if runs else ""


def joined_text(paragraph: ParagraphRange) -> str:
    """Concatenate every text run of the paragraph without formatting."""
    return "".join(
        run
        for character_range in paragraph.character_ranges
        for run in character_range.text_runs
    )


def author_title_html(paragraph: ParagraphRange) -> str:
    """Render the author job line, emphasizing Regular ranges.

    The job line is set in italic by default, so the ranges an editor
    switched to Regular are the ones that stand out on the page.
    """
    parts = []
    for character_range in paragraph.character_ranges:
        text = "".join(character_range.text_runs)
        if character_range.font_style == "Regular":
            text = _emphasize(text)
        parts.append(text)
    return "".join(parts)


def body_text_html(paragraph: ParagraphRange) -> str:
    """Render body text as HTML paragraphs.

    Tabs separate paragraphs in the layout export, so each one closes the
    current paragraph and opens the next. Italic ranges are emphasized.
    """
    parts = [PARAGRAPH_OPEN]
    for character_range in paragraph.character_ranges:
        text = "".join(character_range.text_runs).replace("\t", PARAGRAPH_CLOSE + PARAGRAPH_OPEN)
        if character_range.font_style == "Italic":
            text = _emphasize(text)
        parts.append(text)
    parts.append(PARAGRAPH_CLOSE)
    return "".join(parts)


FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("author_name", style_is("ParagraphStyle/Author"), first_text_run),
    FieldRule("author_title", style_is("ParagraphStyle/Author Job"), author_title_html),
    FieldRule("kicker", style_is("ParagraphStyle/Kicker"), first_text_run),
    FieldRule("body_html", style_is("ParagraphStyle/Body Text"), body_text_html),
    FieldRule("headline", style_contains("Headline"), joined_text),
    FieldRule("photo_byline", style_is("ParagraphStyle/Photo Byline"), joined_text),
    FieldRule("photo_caption", style_is("ParagraphStyle/Caption"), joined_text),
)

RULES_BY_NAME: dict[str, FieldRule] = {rule.name: rule for rule in FIELD_RULES}
