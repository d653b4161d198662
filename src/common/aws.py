import logging
from dataclasses import dataclass
from datetime import datetime

import boto3
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)

SNIPPET_SUFFIX = ".idms"


@dataclass
class StoreObject:
    """An object listed from the document store."""
    key: str
    last_modified: datetime


def get_s3_client():
    """Create S3 client."""
    return boto3.client("s3")


def list_snippet_objects(bucket: str, prefix: str, since: datetime) -> list[StoreObject]:
    """List snippet files under an S3 prefix modified at or after ``since``.

    Args:
        bucket: S3 bucket name
        prefix: Key prefix holding exported snippets
        since: Timezone-aware cutoff for LastModified

    Returns:
        Matching objects, most recently modified first
    """
    s3 = get_s3_client()
    objects = []
    paginator = s3.get_paginator("list_objects_v2")

    for page in paginator.paginate(Bucket=bucket, Prefix=prefix):
        for obj in page.get("Contents", []):
            key = obj["Key"]
            if not key.lower().endswith(SNIPPET_SUFFIX):
                continue
            if obj["LastModified"] < since:
                continue
            objects.append(StoreObject(key=key, last_modified=obj["LastModified"]))

    objects.sort(key=lambda o: o.last_modified, reverse=True)
    return objects


def read_s3_bytes(bucket: str, key: str) -> bytes:
    """Read an object from S3 as bytes."""
    s3 = get_s3_client()
    response = s3.get_object(Bucket=bucket, Key=key)
    return response["Body"].read()


def read_s3_bytes_if_exists(bucket: str, key: str) -> bytes | None:
    """Read an object from S3, returning None when the key does not exist."""
    try:
        return read_s3_bytes(bucket, key)
    except ClientError as exc:
        code = exc.response.get("Error", {}).get("Code")
        if code in ("NoSuchKey", "404"):
            logger.warning("Object not found: s3://%s/%s", bucket, key)
            return None
        raise
