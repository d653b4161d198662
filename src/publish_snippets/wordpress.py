"""Minimal WordPress REST API client."""

from __future__ import annotations

import html
import logging
from typing import Any, Optional

import requests

from common.config import WordPressConfig
from common.utils import get_nested
from publish_snippets.models import PublishedItem

logger = logging.getLogger(__name__)

USER_AGENT = "snippet-uploader/1.0"


class WordPressError(RuntimeError):
    """Raised when WordPress cannot be reached or answers unexpectedly."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def parse_published_item(post: dict[str, Any]) -> PublishedItem:
    """Project a post from the REST listing onto the duplicate-check fields.

    ``title.rendered`` comes back entity-encoded (``&#038;``, ``&#8217;``),
    so it is decoded before comparing against snippet headlines.
    """
    return PublishedItem(
        headline=html.unescape(get_nested(post, "title", "rendered")),
        kicker=get_nested(post, "meta", "Kicker"),
        author_name=get_nested(post, "meta", "AuthorName"),
        link=get_nested(post, "link"),
    )


class WordPressClient:
    """Talks to ``/wp/v2/posts`` with basic auth. Requests are never retried."""

    def __init__(
        self,
        api_root: str,
        username: str,
        password: str,
        timeout: float = 10.0,
        recent_posts: int = 30,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_root = api_root.rstrip("/")
        self.timeout = timeout
        self.recent_posts = recent_posts
        self.session = session or requests.Session()
        self.session.auth = (username, password)
        self.session.headers.update({"User-Agent": USER_AGENT})

    @classmethod
    def from_config(cls, config: WordPressConfig) -> WordPressClient:
        return cls(
            api_root=config.api_root,
            username=config.username,
            password=config.password,
            timeout=config.timeout,
            recent_posts=config.recent_posts,
        )

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.api_root}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise WordPressError(f"{method} {url} failed: {exc}") from exc

        if not response.ok:
            raise WordPressError(
                f"{method} {url} returned HTTP {response.status_code}: {response.text[:500]}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise WordPressError(
                f"{method} {url} returned a body that is not JSON",
                status_code=response.status_code,
            ) from exc

    def list_recent_posts(self) -> list[PublishedItem]:
        """Fetch the most recent posts in any status for duplicate checks."""
        posts = self._request(
            "GET",
            "/wp/v2/posts",
            params={"per_page": self.recent_posts, "status": "any"},
        )
        if not isinstance(posts, list):
            raise WordPressError("Post listing was not a JSON array")

        items = [parse_published_item(post) for post in posts if isinstance(post, dict)]
        logger.info("Fetched %d recent posts", len(items))
        return items

    def create_post(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Create a post and return the decoded response."""
        created = self._request("POST", "/wp/v2/posts", json=payload)
        if not isinstance(created, dict):
            raise WordPressError("Post creation response was not a JSON object")
        return created
