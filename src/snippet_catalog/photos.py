"""Resolve placed-photo links from snippets to objects in the document store."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import unquote

from botocore.exceptions import BotoCoreError, ClientError

from common.aws import read_s3_bytes_if_exists
from common.config import StoreConfig

logger = logging.getLogger(__name__)


def resolve_photo_key(uri: str, root_marker: str, photos_prefix: str = "") -> Optional[str]:
    """
    Map a LinkResourceURI to a store key.

    InDesign records the absolute path of the placed file on the designer's
    machine, e.g. ``file:///Volumes/GoogleDrive/Team%20Drives/The%20Polytechnic/Photos/fire.jpg``.
    Everything after ``root_marker`` is the path inside the shared drive,
    which the store mirrors under ``photos_prefix``.

    Returns:
        The object key, or None when the URI is not under the shared root
    """
    unescaped = unquote(uri)
    idx = unescaped.find(root_marker)
    if idx == -1:
        return None

    relative = unescaped[idx + len(root_marker):].lstrip("/")
    if not relative:
        return None

    prefix = photos_prefix.strip("/")
    return f"{prefix}/{relative}" if prefix else relative


class S3PhotoLoader:
    """Callable that downloads the photo a snippet links to.

    Store failures are logged and yield b"", so a snippet whose photo cannot
    be fetched is reported by validation as a byline or caption without photo.
    """

    def __init__(self, bucket: str, photos_prefix: str, root_marker: str) -> None:
        self.bucket = bucket
        self.photos_prefix = photos_prefix
        self.root_marker = root_marker

    @classmethod
    def from_config(cls, config: StoreConfig) -> S3PhotoLoader:
        return cls(
            bucket=config.bucket,
            photos_prefix=config.photos_prefix,
            root_marker=config.photo_root_marker,
        )

    def __call__(self, uri: str) -> bytes:
        key = resolve_photo_key(uri, self.root_marker, self.photos_prefix)
        if key is None:
            logger.warning("Photo link is outside %s: %s", self.root_marker, uri)
            return b""

        try:
            data = read_s3_bytes_if_exists(self.bucket, key)
        except (BotoCoreError, ClientError) as exc:
            logger.error("Could not download photo s3://%s/%s: %s", self.bucket, key, exc)
            return b""
        if data is None:
            return b""

        logger.info("Loaded photo s3://%s/%s (%d bytes)", self.bucket, key, len(data))
        return data
