"""Blob storage for profile photos and portfolio images.

Objects go to an S3-compatible bucket (AWS S3, Cloudflare R2, MinIO) and are
referenced afterwards by their public URL. Replaced or removed images are
left in the bucket; nothing here deletes objects.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
import time
from dataclasses import dataclass
from typing import Optional

import boto3
from botocore.config import Config

from ..core.config import settings

logger = logging.getLogger(__name__)

_DATA_URL_PREFIX = re.compile(r"^data:image/[\w.+-]+;base64,")


class StorageNotConfigured(RuntimeError):
    pass


class InvalidImageData(ValueError):
    pass


@dataclass(frozen=True)
class StoredObject:
    key: str
    url: str


class StorageConfig:
    def __init__(self) -> None:
        self.bucket = settings.STORAGE_BUCKET
        self.endpoint_url = settings.STORAGE_ENDPOINT or None
        self.region = settings.STORAGE_REGION or "auto"
        self.access_key_id = settings.STORAGE_ACCESS_KEY_ID
        self.secret_access_key = settings.STORAGE_SECRET_ACCESS_KEY
        # Public base used to reference objects. Falls back to the
        # path-style endpoint URL plus bucket.
        _public = (settings.STORAGE_PUBLIC_BASE_URL or "").rstrip("/")
        if not _public and self.endpoint_url and self.bucket:
            _public = f"{self.endpoint_url.rstrip('/')}/{self.bucket}"
        self.public_base_url = _public

    def is_configured(self) -> bool:
        return bool(self.bucket and self.access_key_id and self.secret_access_key and self.public_base_url)


def _client(cfg: StorageConfig):
    """Create an S3 client with path-style addressing (required by R2/MinIO)."""
    return boto3.client(
        "s3",
        aws_access_key_id=cfg.access_key_id,
        aws_secret_access_key=cfg.secret_access_key,
        endpoint_url=cfg.endpoint_url,
        region_name=cfg.region,
        config=Config(
            signature_version="s3v4",
            s3={"addressing_style": "path"},
        ),
    )


def decode_image_data(image_data: str) -> bytes:
    """Decode a base64 body, stripping a ``data:image/...;base64,`` prefix."""
    payload = _DATA_URL_PREFIX.sub("", image_data.strip(), count=1)
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidImageData("Image data is not valid base64") from exc


def extension_for(mime_type: str) -> str:
    # "image/png" -> "png", "image/svg+xml" -> "svg+xml"
    return mime_type.split("/", 1)[-1].lower()


def build_key(prefix: str, owner_id: int, mime_type: str, now_ms: Optional[int] = None) -> str:
    """Return ``{prefix}/{owner_id}-{millis}.{ext}``."""
    millis = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"{prefix.strip('/')}/{int(owner_id)}-{millis}.{extension_for(mime_type)}"


def storage_put(key: str, data: bytes, content_type: str) -> StoredObject:
    """Upload ``data`` under ``key`` and return its durable URL and key."""
    cfg = StorageConfig()
    if not cfg.is_configured():
        raise StorageNotConfigured("Blob storage is not configured")
    client = _client(cfg)
    client.put_object(Bucket=cfg.bucket, Key=key, Body=data, ContentType=content_type)
    url = f"{cfg.public_base_url}/{key}"
    logger.info("Stored object %s (%d bytes)", key, len(data))
    return StoredObject(key=key, url=url)


def store_image(prefix: str, owner_id: int, image_data: str, mime_type: str) -> StoredObject:
    """Decode a base64 image body and store it under ``prefix``."""
    data = decode_image_data(image_data)
    if not data:
        raise InvalidImageData("Image data is empty")
    if settings.MAX_IMAGE_BYTES and len(data) > settings.MAX_IMAGE_BYTES:
        raise InvalidImageData(f"Image too large. Max size is {settings.MAX_IMAGE_BYTES} bytes.")
    key = build_key(prefix, owner_id, mime_type)
    return storage_put(key, data, mime_type)
