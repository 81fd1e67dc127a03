"""GitHub contents API client for reading agenda documents."""

from __future__ import annotations

import base64
import binascii
from typing import Any

import httpx
from loguru import logger

from ..config import RepositoryConfig
from ..core.models import DirectoryEntry
from ..exceptions import TransportError


class GitHubRepository:
    """Async read-only access to a GitHub repository through the contents API.

    Every call is a single request; failures are not retried. Use as an
    async context manager so the underlying HTTP client is closed.

    Args:
        owner: Repository owner (user or organization).
        repo: Repository name.
        token: Optional API token sent as a bearer token.
        ref: Optional branch, tag or commit to read from.
        api_url: Base URL of the GitHub REST API.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport, mainly for tests.
    """

    def __init__(
        self,
        owner: str,
        repo: str,
        token: str | None = None,
        ref: str | None = None,
        api_url: str = "https://api.github.com",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.owner = owner
        self.repo = repo
        self.ref = ref
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "nextmeeting",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            base_url=api_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(
        cls, config: RepositoryConfig, token: str | None = None
    ) -> GitHubRepository:
        return cls(
            owner=config.owner,
            repo=config.repo,
            token=token,
            ref=config.branch,
            api_url=config.api_url,
            timeout=config.timeout,
        )

    async def __aenter__(self) -> GitHubRepository:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get_contents(self, path: str) -> Any:
        url = f"/repos/{self.owner}/{self.repo}/contents/{path.strip('/')}"
        params = {"ref": self.ref} if self.ref else None
        logger.debug(f"GET {url}")
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"GitHub returned {e.response.status_code} for '{path}'"
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Failed to fetch '{path}' from GitHub: {e}") from e
        except ValueError as e:
            raise TransportError(f"GitHub returned invalid JSON for '{path}'") from e

    async def list_directory(self, path: str) -> list[DirectoryEntry]:
        """List the entries of a directory in the repository."""
        data = await self._get_contents(path)
        if not isinstance(data, list):
            raise TransportError(f"'{path}' is not a directory")
        return [
            DirectoryEntry(
                name=item["name"],
                path=item.get("path", ""),
                type=item.get("type", "file"),
            )
            for item in data
            if isinstance(item, dict) and "name" in item
        ]

    async def read_file(self, path: str) -> str:
        """Read a file from the repository and return its decoded text."""
        data = await self._get_contents(path)
        if not isinstance(data, dict) or "content" not in data:
            raise TransportError(f"'{path}' is not a file")
        try:
            return base64.b64decode(data["content"]).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise TransportError(f"Could not decode contents of '{path}'") from e
