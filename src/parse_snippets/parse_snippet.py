"""Streaming parser for InDesign snippet (.idms) documents."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Union

from lxml import etree

from parse_snippets.models import (
    CharacterRange,
    LinkResource,
    ParagraphRange,
    StoryBlock,
    StyleRangeTree,
)

logger = logging.getLogger(__name__)

SnippetSource = Union[str, Path, bytes, BinaryIO]


class SnippetParseError(ValueError):
    """Raised when the tokenizer cannot advance through a snippet."""


def _local_name(element) -> str:
    tag = element.tag
    # Comments and processing instructions carry a factory function as tag
    if not isinstance(tag, str):
        return ""
    return etree.QName(tag).localname


def _children(element, name: str) -> list:
    return [child for child in element if _local_name(child) == name]


def _decode_character_range(element) -> CharacterRange:
    return CharacterRange(
        text_runs=["".join(content.itertext()) for content in _children(element, "Content")],
        font_style=element.get("FontStyle", ""),
    )


def _decode_paragraph(element) -> ParagraphRange:
    return ParagraphRange(
        applied_style=element.get("AppliedParagraphStyle", ""),
        character_ranges=[
            _decode_character_range(child)
            for child in _children(element, "CharacterStyleRange")
        ],
    )


def _decode_story(element) -> StoryBlock:
    return StoryBlock(
        paragraphs=[_decode_paragraph(child) for child in _children(element, "ParagraphStyleRange")]
    )


def _decode_link(element) -> LinkResource:
    return LinkResource(uri=element.get("LinkResourceURI", ""))


def parse_snippet(source: SnippetSource) -> StyleRangeTree:
    """
    Parse a snippet document into a style-range tree.

    Only Story and Link elements are kept. A Story is decoded once its
    end tag is reached and then cleared, so a Link or Story nested inside
    another Story is never collected on its own. If the stream breaks off
    after the root element, the stories and links read up to that point
    are returned.

    Args:
        source: Path to a snippet file, raw bytes, or a binary file object

    Returns:
        The decoded StyleRangeTree

    Raises:
        SnippetParseError: If no element can be read from the stream
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    elif isinstance(source, Path):
        source = str(source)

    tree = StyleRangeTree()
    story_depth = 0
    seen_root = False

    events = etree.iterparse(
        source,
        events=("start", "end"),
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )
    try:
        for event, element in events:
            name = _local_name(element)
            seen_root = True

            if event == "start":
                if name == "Story":
                    story_depth += 1
                elif name == "Link" and story_depth == 0:
                    tree.links.append(_decode_link(element))
                continue

            if name != "Story":
                continue
            story_depth -= 1
            if story_depth == 0:
                tree.stories.append(_decode_story(element))
                element.clear(keep_tail=True)
    except etree.XMLSyntaxError as exc:
        if not seen_root:
            raise SnippetParseError(f"Unable to parse snippet: {exc}") from exc
        # Keep the stories completed before the bad token
        logger.warning(
            "Snippet is malformed, keeping %d stories read before the error: %s",
            len(tree.stories),
            exc,
        )

    if not seen_root:
        raise SnippetParseError("Unable to parse snippet: document is empty")

    logger.debug("Parsed %d stories and %d links", len(tree.stories), len(tree.links))
    return tree
