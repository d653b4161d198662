"""Parsed snippet documents with lazily derived, memoized article fields."""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Any, Callable, Optional

from extract_fields.models import Article
from extract_fields.roles import RULES_BY_NAME, FieldRule
from parse_snippets.models import StyleRangeTree
from parse_snippets.parse_snippet import SnippetSource, parse_snippet

logger = logging.getLogger(__name__)

PhotoLoader = Callable[[str], bytes]


class Snippet:
    """
    One parsed snippet and the article fields derived from it.

    Fields are computed on first access and stored in a cache owned by
    this instance. The cache lock is held only to check and to store, so
    two threads asking for the same field at once may both compute it;
    the first stored value wins and both callers return it.
    """

    def __init__(
        self,
        tree: StyleRangeTree,
        name: str = "",
        source_id: str = "",
        last_modified: Optional[datetime] = None,
        photo_loader: Optional[PhotoLoader] = None,
    ) -> None:
        self.tree = tree
        self.name = name
        self.source_id = source_id
        self.last_modified = last_modified
        self.photo_loader = photo_loader
        self._cache: dict[str, Any] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_source(cls, source: SnippetSource, **metadata: Any) -> Snippet:
        """Parse ``source`` and wrap the resulting tree."""
        return cls(parse_snippet(source), **metadata)

    def _cached(self, key: str, compute: Callable[[], Any]) -> Any:
        with self._lock:
            if key in self._cache:
                return self._cache[key]

        value = compute()

        with self._lock:
            return self._cache.setdefault(key, value)

    def _extract(self, rule: FieldRule) -> str:
        # First matching paragraph in document order wins
        for story in self.tree.stories:
            for paragraph in story.paragraphs:
                if rule.matches(paragraph.applied_style):
                    return rule.render(paragraph)
        return ""

    def field(self, name: str) -> str:
        """Return the named article field, '' when no paragraph has its role.

        Raises:
            KeyError: If ``name`` is not a known role
        """
        rule = RULES_BY_NAME[name]
        return self._cached(name, lambda: self._extract(rule))

    @property
    def headline(self) -> str:
        return self.field("headline")

    @property
    def kicker(self) -> str:
        return self.field("kicker")

    @property
    def author_name(self) -> str:
        return self.field("author_name")

    @property
    def author_title(self) -> str:
        return self.field("author_title")

    @property
    def body_html(self) -> str:
        return self.field("body_html")

    @property
    def photo_byline(self) -> str:
        return self.field("photo_byline")

    @property
    def photo_caption(self) -> str:
        return self.field("photo_caption")

    def photo(self) -> bytes:
        """Return the bytes of the first linked asset, or b'' if there is none."""
        return self._cached("photo", self._load_photo)

    def _load_photo(self) -> bytes:
        if not self.tree.links:
            return b""
        if self.photo_loader is None:
            logger.debug("No photo loader configured for %s", self.name or "snippet")
            return b""
        # Only the first placed asset is used
        return self.photo_loader(self.tree.links[0].uri)

    def to_article(self) -> Article:
        """Derive the full article record."""
        return Article(
            headline=self.headline,
            kicker=self.kicker,
            author_name=self.author_name,
            author_title=self.author_title,
            body_html=self.body_html,
            photo_byline=self.photo_byline,
            photo_caption=self.photo_caption,
            photo=self.photo(),
        )
