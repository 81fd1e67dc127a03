"""Read-only interface to the repository of dated agendas."""

from __future__ import annotations

from typing import Protocol

from ..core.models import DirectoryEntry


class DocumentRepository(Protocol):
    """Lists directories and reads files of a hierarchical document repository."""

    async def list_directory(self, path: str) -> list[DirectoryEntry]: ...

    async def read_file(self, path: str) -> str: ...
