"""Shared fixtures: in-memory stand-ins for the repository and object storage."""

from __future__ import annotations

import os

import pytest

from nextmeeting.core.models import DirectoryEntry
from nextmeeting.exceptions import TransportError

AGENDA_TEMPLATE = """# Agenda

- **Dates**: {dates}
- **Location**: {location}
"""


def read_fixture(filename: str) -> str:
    """Helper function to read fixture files."""
    fixture_path = os.path.join(os.path.dirname(__file__), "fixtures", filename)
    with open(fixture_path, encoding="utf-8") as f:
        return f.read()


def make_agenda(dates: str = "12 - 15 June 2024", location: str = "Remote") -> str:
    return AGENDA_TEMPLATE.format(dates=dates, location=location)


class FakeRepository:
    """Repository backed by a dict of path -> file text."""

    def __init__(
        self, files: dict[str, str] | None = None, failing: set[str] | None = None
    ) -> None:
        self.files = dict(files or {})
        self.failing = set(failing or ())
        self.listed: list[str] = []
        self.read: list[str] = []

    async def list_directory(self, path: str) -> list[DirectoryEntry]:
        self.listed.append(path)
        if path in self.failing:
            raise TransportError(f"listing {path} failed")
        prefix = path.rstrip("/") + "/"
        names = sorted(
            p[len(prefix) :]
            for p in self.files
            if p.startswith(prefix) and "/" not in p[len(prefix) :]
        )
        if not names:
            raise TransportError(f"GitHub returned 404 for '{path}'")
        return [DirectoryEntry(name=name, path=prefix + name) for name in names]

    async def read_file(self, path: str) -> str:
        self.read.append(path)
        if path in self.failing or path not in self.files:
            raise TransportError(f"GitHub returned 404 for '{path}'")
        return self.files[path]


class MemoryObjectStore:
    """Object store keeping objects in a dict keyed by (container, key)."""

    def __init__(self, objects: dict[tuple[str, str], str] | None = None) -> None:
        self.objects = dict(objects or {})
        self.content_types: dict[tuple[str, str], str] = {}
        self.fail_writes = False

    async def read_text(self, container: str, key: str) -> str:
        try:
            return self.objects[(container, key)]
        except KeyError as e:
            raise TransportError(f"{container}/{key} does not exist") from e

    async def write_text(
        self, container: str, key: str, content: str, content_type: str
    ) -> None:
        if self.fail_writes:
            raise TransportError(f"Failed to write {container}/{key}")
        self.objects[(container, key)] = content
        self.content_types[(container, key)] = content_type


@pytest.fixture
def repository() -> FakeRepository:
    return FakeRepository(
        {
            "2024/02.md": make_agenda("6 - 8 February 2024", "San Diego, US"),
            "2024/04.md": make_agenda("8 - 11 April 2024", "Remote"),
            "2024/06.md": read_fixture("agenda_2024_06.md"),
            "2024/README.md": "# 2024 meetings",
        }
    )


@pytest.fixture
def store() -> MemoryObjectStore:
    return MemoryObjectStore(
        {
            ("site", "template.html"): (
                "<!DOCTYPE html><html><body>"
                "<p>{meeting-time}</p><p>{meeting-days-left}</p>"
                "<p>{meeting-location}</p><a href=\"{meeting-url}\">agenda</a>"
                "<p>{meeting-agenda-days-left}</p>"
                "</body></html>"
            ),
            ("site", "index.html"): "<p>previous page</p>",
        }
    )
