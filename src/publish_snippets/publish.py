"""Validate an article, check for duplicates, and post it to WordPress once."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

from extract_fields.models import Article
from publish_snippets.models import PublishedItem, PublishOutcome, PublishResult
from publish_snippets.wordpress import WordPressClient, WordPressError
from validate_snippets.validate import MIN_BODY_CHARS, validate_article

logger = logging.getLogger(__name__)

POST_STATUS = "future"
PUBLISH_HOUR = 12


def is_duplicate(article: Article, item: PublishedItem) -> bool:
    """Same headline, or same kicker together with the same author."""
    if item.headline == article.headline:
        return True
    return item.kicker == article.kicker and item.author_name == article.author_name


def find_duplicate(article: Article, published: Iterable[PublishedItem]) -> Optional[PublishedItem]:
    """Return the first published item that duplicates the article, if any."""
    for item in published:
        if is_duplicate(article, item):
            return item
    return None


def build_post_payload(article: Article, now: Optional[datetime] = None) -> dict:
    """
    Build the WordPress creation payload for an article.

    Posts are scheduled for noon of the current local day.

    Args:
        article: Article to post
        now: Reference time (defaults to the current local time)

    Returns:
        JSON-serializable payload for ``POST /wp/v2/posts``
    """
    now = now or datetime.now().astimezone()
    scheduled = now.replace(hour=PUBLISH_HOUR, minute=0, second=0, microsecond=0)
    return {
        "title": article.headline,
        "content": article.body_html,
        "status": POST_STATUS,
        "date": scheduled.isoformat(),
        "meta": {
            "AuthorName": article.author_name,
            "AuthorTitle": article.author_title,
            "Kicker": article.kicker,
        },
    }


def publish_article(
    article: Article,
    client: WordPressClient,
    min_body_chars: int = MIN_BODY_CHARS,
    dry_run: bool = False,
) -> PublishResult:
    """
    Run one publish attempt.

    The duplicate check reads a snapshot of recent posts and the creation
    call follows it without any lock, so a post created elsewhere in
    between is not detected. Nothing is retried.

    Args:
        article: Article to publish
        client: WordPress client used for the listing and the creation call
        min_body_chars: Minimum body length before a short-body warning
        dry_run: Stop after the duplicate check without creating the post

    Returns:
        PublishResult describing the terminal state
    """
    errors = validate_article(article, min_body_chars=min_body_chars)
    if errors:
        logger.warning("Validation failed with %d errors; aborting", len(errors))
        return PublishResult(outcome=PublishOutcome.ABORTED_VALIDATION, errors=errors)

    try:
        published = client.list_recent_posts()
    except WordPressError as exc:
        logger.error("Could not fetch recent posts: %s", exc)
        return PublishResult(outcome=PublishOutcome.FAILED, message=str(exc))

    duplicate = find_duplicate(article, published)
    if duplicate is not None:
        logger.warning("Similar post already exists: %s", duplicate.link or duplicate.headline)
        return PublishResult(
            outcome=PublishOutcome.ABORTED_DUPLICATE,
            duplicate=duplicate,
            message=f"Similar post already exists: {duplicate.link or duplicate.headline}",
        )

    payload = build_post_payload(article)
    if dry_run:
        logger.info("Dry run: not creating post %r", payload["title"])
        return PublishResult(outcome=PublishOutcome.DRY_RUN)

    logger.info("Uploading %r", payload["title"])
    try:
        created = client.create_post(payload)
    except WordPressError as exc:
        logger.error("Upload failed: %s", exc)
        return PublishResult(outcome=PublishOutcome.FAILED, message=str(exc))

    link = created.get("link") or ""
    logger.info("Uploaded post %s", link or created.get("id"))
    return PublishResult(outcome=PublishOutcome.CONFIRMED, link=link)
