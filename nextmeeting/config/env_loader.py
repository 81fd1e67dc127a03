"""Environment variable loader for the .env file next to the configuration."""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv


def load_env(config_path: Path | str | None) -> bool:
    """Load environment variables from a .env file beside the config file.

    Args:
        config_path: Path to the configuration file. If None, returns False
            without loading any environment variables.

    Returns:
        True if .env file was found and loaded, False otherwise.
    """
    if config_path is None:
        return False

    env_path = Path(config_path).resolve().parent / ".env"
    if not env_path.exists():
        return False

    load_dotenv(env_path, override=False)
    return True
