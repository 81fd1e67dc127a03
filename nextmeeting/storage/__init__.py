"""Object storage for the page template and the published page."""

from __future__ import annotations

from ..config import StorageConfig
from .base import ObjectStore
from .local import LocalObjectStore
from .s3 import S3ObjectStore


def create_object_store(config: StorageConfig) -> ObjectStore:
    """Create the object store selected by ``config.backend``."""
    if config.backend == "local":
        return LocalObjectStore(config.local_root)
    return S3ObjectStore.create(region=config.region, endpoint_url=config.endpoint_url)


__all__ = [
    "ObjectStore",
    "LocalObjectStore",
    "S3ObjectStore",
    "create_object_store",
]
