from __future__ import annotations

import os
import uuid
from urllib.parse import urlparse

import boto3
from botocore.client import Config

IMAGE_KEY_PREFIX = "content-images"


def _required(name: str) -> str:
    v = os.getenv(name, "").strip()
    if not v:
        raise RuntimeError(f"{name} is not set")
    return v


def _spaces_client():
    key = _required("DO_SPACES_KEY")
    secret = _required("DO_SPACES_SECRET")
    endpoint = _required("DO_SPACES_ENDPOINT")

    return boto3.client(
        "s3",
        region_name=os.getenv("DO_SPACES_REGION", "fra1"),
        endpoint_url=endpoint,
        aws_access_key_id=key,
        aws_secret_access_key=secret,
        config=Config(signature_version="s3v4"),
    )


def random_object_key(filename: str, key_prefix: str = IMAGE_KEY_PREFIX) -> str:
    ext = os.path.splitext(filename or "")[1].lstrip(".").lower() or "bin"
    return f"{key_prefix}/{uuid.uuid4().hex}.{ext}"


class SpacesImageStore:
    """
    Public image bucket on DigitalOcean Spaces (any S3-compatible endpoint).
    Objects are written public-read and addressed through DO_SPACES_PUBLIC_BASE.
    """

    def __init__(self, client=None, bucket: str | None = None, public_base: str | None = None):
        self._client = client
        self._bucket = bucket
        self._public_base = public_base.rstrip("/") if public_base else None

    @property
    def bucket(self) -> str:
        if self._bucket is None:
            self._bucket = _required("DO_SPACES_BUCKET")
        return self._bucket

    @property
    def public_base(self) -> str:
        if self._public_base is None:
            self._public_base = _required("DO_SPACES_PUBLIC_BASE").rstrip("/")
        return self._public_base

    @property
    def client(self):
        if self._client is None:
            self._client = _spaces_client()
        return self._client

    def upload(self, *, content: bytes, content_type: str, filename: str) -> str:
        """Uploads bytes under a randomized key and returns the PUBLIC URL."""
        obj_key = random_object_key(filename)

        self.client.put_object(
            Bucket=self.bucket,
            Key=obj_key,
            Body=content,
            ACL="public-read",
            ContentType=content_type,
            CacheControl="max-age=3600",
        )

        return f"{self.public_base}/{obj_key}"

    def key_for_url(self, url: str) -> str:
        if url.startswith(self.public_base + "/"):
            return url[len(self.public_base) + 1:]
        path = urlparse(url).path.lstrip("/")
        # path-style URLs carry the bucket name as first segment
        if path.startswith(self.bucket + "/") and len(path) > len(self.bucket) + 1:
            return path[len(self.bucket) + 1:]
        raise ValueError(f"{url!r} is not an object in bucket {self.bucket}")

    def delete(self, url: str) -> None:
        self.client.delete_object(Bucket=self.bucket, Key=self.key_for_url(url))


def get_image_store() -> SpacesImageStore:
    return SpacesImageStore()
