"""Filesystem object storage backend for local previews."""

from __future__ import annotations

import asyncio
from pathlib import Path

from loguru import logger

from ..exceptions import TransportError


class LocalObjectStore:
    """Object store keeping each object at ``root/container/key``.

    The content type is not stored; files are served by extension.
    """

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def object_path(self, container: str, key: str) -> Path:
        return self.root / container / key

    async def read_text(self, container: str, key: str) -> str:
        path = self.object_path(container, key)
        try:
            return await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TransportError(f"Failed to read {path}: {e}") from e

    async def write_text(
        self, container: str, key: str, content: str, content_type: str
    ) -> None:
        path = self.object_path(container, key)
        logger.debug(f"Writing {path} ({content_type})")
        try:
            await asyncio.to_thread(_write, path, content)
        except OSError as e:
            raise TransportError(f"Failed to write {path}: {e}") from e


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
