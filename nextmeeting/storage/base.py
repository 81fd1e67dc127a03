"""Interface to the object storage holding the page template and output."""

from __future__ import annotations

from typing import Protocol


class ObjectStore(Protocol):
    """Reads and writes text objects addressed by container and key."""

    async def read_text(self, container: str, key: str) -> str: ...

    async def write_text(
        self, container: str, key: str, content: str, content_type: str
    ) -> None: ...
