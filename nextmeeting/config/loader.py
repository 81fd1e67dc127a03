"""Configuration loader for nextmeeting."""

from __future__ import annotations

from pathlib import Path

import yaml

from .schema import Config

DEFAULT_CONFIG_NAME = "nextmeeting.yaml"


def load_config(config_path: Path) -> Config | None:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Config object if the file exists and is valid, None otherwise.
    """
    if not config_path.exists():
        return None

    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
            if data is None:
                return None
            return Config.from_dict(data)
    except (OSError, yaml.YAMLError, Exception):
        # Exception catches Pydantic validation errors; callers fall back to defaults
        return None


def save_config(config: Config, config_path: Path) -> None:
    """Save configuration to a YAML file, creating parent folders."""
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(config.to_yaml(), encoding="utf-8")
