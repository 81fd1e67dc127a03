"""S3 object storage backend."""

from __future__ import annotations

import asyncio
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger

from ..exceptions import TransportError


class S3ObjectStore:
    """Object store backed by S3, with containers mapped to buckets.

    boto3 is blocking, so each call runs in a worker thread.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    @classmethod
    def create(
        cls, region: str | None = None, endpoint_url: str | None = None
    ) -> S3ObjectStore:
        return cls(boto3.client("s3", region_name=region, endpoint_url=endpoint_url))

    async def read_text(self, container: str, key: str) -> str:
        """Read an object and decode it as UTF-8 text."""
        logger.debug(f"Reading s3://{container}/{key}")
        try:
            response = await asyncio.to_thread(
                self._client.get_object, Bucket=container, Key=key
            )
            body = await asyncio.to_thread(response["Body"].read)
            return body.decode("utf-8")
        except (BotoCoreError, ClientError, UnicodeDecodeError) as e:
            raise TransportError(f"Failed to read s3://{container}/{key}: {e}") from e

    async def write_text(
        self, container: str, key: str, content: str, content_type: str
    ) -> None:
        """Replace an object with ``content``."""
        logger.debug(f"Writing s3://{container}/{key} ({content_type})")
        try:
            await asyncio.to_thread(
                self._client.put_object,
                Bucket=container,
                Key=key,
                Body=content.encode("utf-8"),
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            raise TransportError(f"Failed to write s3://{container}/{key}: {e}") from e
