"""Access to the repository of dated agenda documents."""

from __future__ import annotations

from .base import DocumentRepository
from .github import GitHubRepository

__all__ = [
    "DocumentRepository",
    "GitHubRepository",
]
