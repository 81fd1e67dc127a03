"""Configuration management for nextmeeting.

This module handles loading and validating configuration from nextmeeting.yaml files.
"""

from .env_loader import load_env
from .loader import DEFAULT_CONFIG_NAME, load_config, save_config
from .schema import Config, RepositoryConfig, SiteConfig, StorageConfig

__all__ = [
    "Config",
    "RepositoryConfig",
    "StorageConfig",
    "SiteConfig",
    "DEFAULT_CONFIG_NAME",
    "load_config",
    "save_config",
    "load_env",
]
