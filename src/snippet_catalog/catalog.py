"""Periodically refreshed list of recently exported snippets."""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta, timezone
from pathlib import PurePosixPath
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

from common.aws import StoreObject, list_snippet_objects, read_s3_bytes
from common.config import UploaderConfig
from extract_fields.snippet import PhotoLoader, Snippet
from parse_snippets.parse_snippet import SnippetParseError
from snippet_catalog.models import StoryListing, build_listing

logger = logging.getLogger(__name__)


class SnippetCatalog:
    """
    Holds the current snapshot of available stories.

    ``refresh`` builds a complete new list and swaps it in under the lock,
    so readers always get either the previous or the new snapshot.
    """

    def __init__(
        self,
        bucket: str,
        prefix: str,
        lookback_days: int = 5,
        refresh_seconds: int = 600,
        photo_loader: Optional[PhotoLoader] = None,
    ) -> None:
        self.bucket = bucket
        self.prefix = prefix
        self.lookback_days = lookback_days
        self.refresh_seconds = refresh_seconds
        self.photo_loader = photo_loader
        self._stories: list[StoryListing] = []
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @classmethod
    def from_config(
        cls, config: UploaderConfig, photo_loader: Optional[PhotoLoader] = None
    ) -> SnippetCatalog:
        return cls(
            bucket=config.store.bucket,
            prefix=config.store.snippets_prefix,
            lookback_days=config.catalog.lookback_days,
            refresh_seconds=config.catalog.refresh_seconds,
            photo_loader=photo_loader,
        )

    def _load_snippet(self, obj: StoreObject) -> Snippet:
        data = read_s3_bytes(self.bucket, obj.key)
        return Snippet.from_source(
            data,
            name=PurePosixPath(obj.key).name,
            source_id=obj.key,
            last_modified=obj.last_modified,
            photo_loader=self.photo_loader,
        )

    def refresh(self) -> int:
        """Reload snippets modified within the lookback window.

        Returns:
            Number of stories in the current snapshot after the refresh
        """
        since = datetime.now(timezone.utc) - timedelta(days=self.lookback_days)
        try:
            objects = list_snippet_objects(self.bucket, self.prefix, since)
        except (BotoCoreError, ClientError) as exc:
            logger.error("Failed to list snippets in s3://%s/%s: %s", self.bucket, self.prefix, exc)
            with self._lock:
                return len(self._stories)

        stories = []
        for obj in objects:
            try:
                snippet = self._load_snippet(obj)
            except SnippetParseError as exc:
                logger.warning("Skipping unparseable snippet %s: %s", obj.key, exc)
                continue
            except (BotoCoreError, ClientError) as exc:
                logger.warning("Skipping snippet %s that could not be downloaded: %s", obj.key, exc)
                continue
            stories.append(build_listing(snippet))

        with self._lock:
            self._stories = stories

        logger.info("Catalog refreshed with %d stories", len(stories))
        return len(stories)

    def get_stories(self) -> list[StoryListing]:
        """Return a copy of the current snapshot."""
        with self._lock:
            return list(self._stories)

    def _run(self) -> None:
        while True:
            try:
                self.refresh()
            except Exception:
                logger.exception("Catalog refresh failed")
            if self._stop.wait(self.refresh_seconds):
                return

    def start(self) -> None:
        """Refresh now and then every ``refresh_seconds`` on a daemon thread."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="snippet-catalog", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
