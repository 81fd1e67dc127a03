"""Command line interface for nextmeeting."""

from __future__ import annotations

import asyncio
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

import click
from loguru import logger

from . import __version__
from .config import DEFAULT_CONFIG_NAME, Config, load_config, load_env, save_config
from .core import build_render_context
from .repository import GitHubRepository
from .site import fetch_next_agenda, update_site
from .storage import create_object_store
from .utils import print_agenda


class DefaultCommandGroup(click.Group):
    """Group that falls back to a default command when none is provided."""

    def __init__(
        self,
        *args: Any,
        default_command: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.default_command = default_command

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if self.default_command:
            group_opts = {opt for param in self.get_params(ctx) for opt in param.opts}
            first = args[0] if args else None
            if first is None or (
                first not in group_opts and self.get_command(ctx, first) is None
            ):
                if self.get_command(ctx, self.default_command) is None:
                    raise click.UsageError(
                        f"Default command '{self.default_command}' not found."
                    )
                args = [self.default_command, *args]
        result: list[str] = super().parse_args(ctx, args)
        return result


def setup_logger(verbose: bool = False) -> Any:
    """Set up logger with appropriate level."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="{level}: {message}",
        level="DEBUG" if verbose else "INFO",
    )
    return logger


def get_config_or_default(config_path: Path) -> Config:
    """Load the .env file and config next to ``config_path``, or use defaults."""
    load_env(config_path)
    config = load_config(config_path)
    if config is None:
        logger.debug(f"No usable config at {config_path}, using defaults")
        return Config()
    return config


def create_repository(config: Config) -> GitHubRepository:
    token = os.environ.get(config.repository.token_env) or None
    return GitHubRepository.from_config(config.repository, token=token)


config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_NAME,
    show_default=True,
    help="Path to the YAML configuration file",
)
today_option = click.option(
    "--today",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Pretend the run happens at midnight of this date (YYYY-MM-DD)",
)
verbose_option = click.option(
    "--verbose", "-v", is_flag=True, help="Enable verbose output"
)


@click.group(cls=DefaultCommandGroup, default_command="publish")
@click.version_option(version=__version__, prog_name="nextmeeting")
def cli() -> None:
    """Publish a status page announcing the next scheduled meeting.

    This tool will:
    - Find the next dated agenda ({year}/{MM}.md) in the agendas repository
    - Read the meeting dates and location from it
    - Fill them into the page template from object storage
    - Upload the rendered page as index.html
    """


@cli.command()
@config_option
@today_option
@click.option(
    "--dry-run",
    "-n",
    is_flag=True,
    help="Render the page without uploading it",
)
@verbose_option
def publish(
    config_path: Path,
    today: datetime | None,
    dry_run: bool,
    verbose: bool,
) -> None:
    """Render and upload the page for the next meeting.

    Meant to run on a schedule. A failed run is logged and leaves the
    previously published page untouched; the command still exits cleanly.
    """
    logger = setup_logger(verbose)

    async def _run() -> None:
        config = get_config_or_default(config_path)
        store = create_object_store(config.storage)
        async with create_repository(config) as repository:
            result = await update_site(
                repository, store, config, now=today, dry_run=dry_run
            )
        if result.published:
            logger.info("Page update complete!")
        elif dry_run and result.content is not None:
            click.echo(result.content)

    try:
        asyncio.run(_run())
    except Exception as e:
        logger.error(f"Error publishing page: {e}")


@cli.command()
@config_option
@today_option
@verbose_option
def show(config_path: Path, today: datetime | None, verbose: bool) -> None:
    """Show the next meeting and the values that would be filled in."""
    logger = setup_logger(verbose)
    now = today or datetime.now()

    async def _run() -> None:
        config = get_config_or_default(config_path)
        async with create_repository(config) as repository:
            agenda = await fetch_next_agenda(repository, now.date(), config)
        context = build_render_context(
            agenda, now, config.site.agenda_deadline_days
        )
        print_agenda(agenda, context)

    try:
        asyncio.run(_run())
    except Exception as e:
        logger.error(f"Error finding next meeting: {e}")
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument(
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_NAME,
)
@click.option(
    "--overwrite",
    is_flag=True,
    help="Overwrite the configuration file if it exists",
)
@verbose_option
def init(config_path: Path, overwrite: bool, verbose: bool) -> None:
    """Write a configuration file with default values.

    CONFIG_PATH: Where to write the configuration (default: nextmeeting.yaml)
    """
    logger = setup_logger(verbose)

    if config_path.exists() and not overwrite:
        message = f"{config_path} already exists. Use --overwrite to replace it."
        logger.error(message)
        raise click.ClickException(message)

    try:
        save_config(Config(), config_path)
        logger.info(f"Created {config_path} with default values")
    except Exception as e:
        logger.error(f"Error writing configuration: {e}")
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    cli()
