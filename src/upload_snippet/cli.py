"""CLI for validating and uploading InDesign snippets."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from common.cli_helpers import setup_logging
from common.config import UploaderConfig, load_config
from extract_fields.snippet import Snippet
from parse_snippets.parse_snippet import SnippetParseError
from publish_snippets.publish import publish_article
from publish_snippets.wordpress import WordPressClient
from snippet_catalog.photos import S3PhotoLoader
from upload_snippet.helpers import log_article_summary, parse_uploader_args

logger = logging.getLogger(__name__)


def upload(snippet_path: Path, config: UploaderConfig, dry_run: bool = False) -> bool:
    """Parse, validate and publish one snippet file. Returns True on success."""
    logger.info("Reading %s", snippet_path)

    photo_loader = S3PhotoLoader.from_config(config.store) if config.store.bucket else None
    try:
        snippet = Snippet.from_source(
            snippet_path,
            name=snippet_path.name,
            source_id=str(snippet_path),
            photo_loader=photo_loader,
        )
    except (OSError, SnippetParseError) as exc:
        logger.error("Could not read %s: %s", snippet_path, exc)
        return False

    article = snippet.to_article()
    log_article_summary(article)

    client = WordPressClient.from_config(config.wordpress)
    result = publish_article(
        article,
        client,
        min_body_chars=config.validation.min_body_chars,
        dry_run=dry_run,
    )

    for error in result.errors:
        logger.warning("Validation error: %s", error)
    if result.message:
        logger.info(result.message)
    logger.info("Upload finished: %s", result.outcome.value)
    return result.succeeded


def main(argv: list[str] | None = None) -> None:
    args = parse_uploader_args(argv)
    setup_logging(verbose=args.verbose)

    config = load_config(args.config)

    if args.command == "server":
        from snippet_api.main import serve

        serve(config)
        return

    if not config.wordpress.password and not args.dry_run:
        logger.error("WP_API_PASSWORD is not set")
        sys.exit(1)

    if not upload(Path(args.snippet_path), config, dry_run=args.dry_run):
        sys.exit(1)


if __name__ == "__main__":
    main()
