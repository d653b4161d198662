"""Helper functions for the upload_snippet CLI."""

from __future__ import annotations

import argparse
import logging

from common.cli_helpers import preview
from extract_fields.models import Article

logger = logging.getLogger(__name__)


def parse_uploader_args(argv: list[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for snippet-uploader.'''

    parser = argparse.ArgumentParser(
        prog="snippet-uploader",
        description="Parse InDesign snippets and turn stories into WordPress posts",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config name under configs/ (default: $SNIPPET_UPLOADER_CONFIG or prod)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    upload = subparsers.add_parser("upload", help="Validate and upload one snippet file")
    upload.add_argument("snippet_path", help="Path to the exported .idms snippet")
    upload.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate and check for duplicates without creating the post",
    )

    subparsers.add_parser("server", help="Run the snippet API server")
    return parser.parse_args(argv)


def log_article_summary(article: Article) -> None:
    '''Log the derived article fields so the operator can eyeball them.'''

    photo = f"{len(article.photo) / 1024 / 1024:.2f} MB" if article.photo else ""
    rows = [
        ("Kicker", article.kicker),
        ("Headline", article.headline),
        ("Author name", article.author_name),
        ("Author title", article.author_title),
        ("Photo", photo),
        ("Photo byline", article.photo_byline),
        ("Photo caption", preview(article.photo_caption)),
        ("Body text", preview(article.body_html)),
    ]
    for label, value in rows:
        logger.info("%13s: %s", label, value)
