"""Configuration schema for nextmeeting."""

from __future__ import annotations

from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field


class RepositoryConfig(BaseModel):
    """Where the dated agenda documents live."""

    owner: str = "tc39"
    repo: str = "agendas"
    branch: str = "master"
    api_url: str = "https://api.github.com"
    token_env: str = "GITHUB_TOKEN"
    timeout: float = 30.0


class StorageConfig(BaseModel):
    """Object storage holding the template and the published page."""

    backend: Literal["s3", "local"] = "s3"
    container: str = "site"
    template_key: str = "template.html"
    output_key: str = "index.html"
    content_type: str = "text/html"
    local_root: str = "site-data"
    region: str | None = None
    endpoint_url: str | None = None


class SiteConfig(BaseModel):
    """Values used while rendering the page."""

    # Agendas are due this many days before the meeting starts
    agenda_deadline_days: int = 10


class Config(BaseModel):
    """Main configuration class for nextmeeting."""

    repository: RepositoryConfig = Field(default_factory=RepositoryConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    site: SiteConfig = Field(default_factory=SiteConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for YAML serialization."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Create config from a dictionary, ignoring unknown top-level sections."""
        sections = ("repository", "storage", "site")
        known = {key: data[key] for key in sections if data.get(key)}
        return cls.model_validate(known)

    def to_yaml(self) -> str:
        """Convert config to YAML string."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False, default_flow_style=False)
