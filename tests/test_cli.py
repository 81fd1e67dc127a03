"""Tests for the CLI module."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

import click.testing
import yaml

from conftest import FakeRepository, make_agenda
from nextmeeting.cli import cli
from nextmeeting.config import load_config
from nextmeeting.site import UpdateResult


class RepositoryContext:
    """Async context manager handing out a FakeRepository."""

    def __init__(self, repository: FakeRepository) -> None:
        self.repository = repository

    async def __aenter__(self) -> FakeRepository:
        return self.repository

    async def __aexit__(self, *exc_info: Any) -> None:
        return None


def write_local_site(tmp_path: Path, template: str = "<p>{meeting-time}</p>") -> Path:
    """Create a config using the local storage backend and a template."""
    site_root = tmp_path / "site-data"
    (site_root / "site").mkdir(parents=True)
    (site_root / "site" / "template.html").write_text(template, encoding="utf-8")
    (site_root / "site" / "index.html").write_text("previous", encoding="utf-8")

    config_path = tmp_path / "nextmeeting.yaml"
    config_path.write_text(
        yaml.safe_dump({"storage": {"backend": "local", "local_root": str(site_root)}}),
        encoding="utf-8",
    )
    return config_path


def agendas() -> RepositoryContext:
    return RepositoryContext(FakeRepository({"2024/06.md": make_agenda()}))


def read_page(tmp_path: Path) -> str:
    return (tmp_path / "site-data" / "site" / "index.html").read_text(encoding="utf-8")


class TestCLIHelp:
    """Test CLI help output."""

    def test_cli_help(self) -> None:
        runner = click.testing.CliRunner()
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "Publish a status page announcing the next" in result.output
        assert "publish" in result.output
        assert "show" in result.output
        assert "init" in result.output

    def test_publish_command_help(self) -> None:
        runner = click.testing.CliRunner()
        result = runner.invoke(cli, ["publish", "--help"])

        assert result.exit_code == 0
        assert "--config" in result.output
        assert "--today" in result.output
        assert "--dry-run" in result.output


class TestPublishCommand:
    """Test the publish command."""

    @patch("nextmeeting.cli.create_repository")
    def test_publish_writes_page(
        self, mock_create_repository: MagicMock, tmp_path: Path
    ) -> None:
        mock_create_repository.return_value = agendas()
        config_path = write_local_site(tmp_path)

        runner = click.testing.CliRunner()
        result = runner.invoke(
            cli, ["publish", "--config", str(config_path), "--today", "2024-05-01"]
        )

        assert result.exit_code == 0
        page = read_page(tmp_path)
        assert page == "<p>12-15 June 2024</p>"

    @patch("nextmeeting.cli.create_repository")
    def test_publish_failure_exits_cleanly(
        self, mock_create_repository: MagicMock, tmp_path: Path
    ) -> None:
        mock_create_repository.return_value = agendas()
        config_path = write_local_site(tmp_path)

        runner = click.testing.CliRunner()
        result = runner.invoke(
            cli, ["publish", "--config", str(config_path), "--today", "2024-12-20"]
        )

        assert result.exit_code == 0
        page = read_page(tmp_path)
        assert page == "previous"

    @patch("nextmeeting.cli.create_repository")
    def test_publish_setup_failure_exits_cleanly(
        self, mock_create_repository: MagicMock, tmp_path: Path
    ) -> None:
        mock_create_repository.side_effect = RuntimeError("no network")
        config_path = write_local_site(tmp_path)

        runner = click.testing.CliRunner()
        result = runner.invoke(cli, ["publish", "--config", str(config_path)])

        assert result.exit_code == 0

    @patch("nextmeeting.cli.create_repository")
    def test_publish_dry_run_prints_page(
        self, mock_create_repository: MagicMock, tmp_path: Path
    ) -> None:
        mock_create_repository.return_value = agendas()
        config_path = write_local_site(tmp_path)

        runner = click.testing.CliRunner()
        result = runner.invoke(
            cli,
            [
                "publish",
                "--config",
                str(config_path),
                "--today",
                "2024-05-01",
                "--dry-run",
            ],
        )

        assert result.exit_code == 0
        assert "<p>12-15 June 2024</p>" in result.output
        page = read_page(tmp_path)
        assert page == "previous"

    @patch("nextmeeting.cli.update_site")
    @patch("nextmeeting.cli.create_object_store")
    @patch("nextmeeting.cli.create_repository")
    def test_publish_is_default_command(
        self,
        mock_create_repository: MagicMock,
        mock_create_object_store: MagicMock,
        mock_update_site: MagicMock,
    ) -> None:
        mock_create_repository.return_value = agendas()
        mock_update_site.return_value = UpdateResult(published=True)

        runner = click.testing.CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, [])

        assert result.exit_code == 0
        mock_update_site.assert_called_once()
        kwargs = mock_update_site.call_args.kwargs
        assert kwargs["dry_run"] is False
        assert kwargs["now"] is None

    @patch("nextmeeting.cli.update_site")
    @patch("nextmeeting.cli.create_object_store")
    @patch("nextmeeting.cli.create_repository")
    def test_default_command_receives_options(
        self,
        mock_create_repository: MagicMock,
        mock_create_object_store: MagicMock,
        mock_update_site: MagicMock,
    ) -> None:
        mock_create_repository.return_value = agendas()
        mock_update_site.return_value = UpdateResult(published=False, content="<p/>")

        runner = click.testing.CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["--dry-run", "--today", "2024-05-01"])

        assert result.exit_code == 0
        kwargs = mock_update_site.call_args.kwargs
        assert kwargs["dry_run"] is True
        assert kwargs["now"] == datetime(2024, 5, 1)


class TestShowCommand:
    """Test the show command."""

    @patch("nextmeeting.cli.create_repository")
    def test_show_prints_agenda(
        self, mock_create_repository: MagicMock, tmp_path: Path
    ) -> None:
        mock_create_repository.return_value = agendas()
        config_path = write_local_site(tmp_path)

        with patch("nextmeeting.cli.print_agenda") as mock_print_agenda:
            runner = click.testing.CliRunner()
            result = runner.invoke(
                cli, ["show", "--config", str(config_path), "--today", "2024-05-01"]
            )

        assert result.exit_code == 0
        agenda, context = mock_print_agenda.call_args.args
        assert agenda.location == "Remote"
        assert context["meeting-days-left"] == "42"

    @patch("nextmeeting.cli.create_repository")
    def test_show_failure_exit_code(
        self, mock_create_repository: MagicMock, tmp_path: Path
    ) -> None:
        mock_create_repository.return_value = agendas()
        config_path = write_local_site(tmp_path)

        runner = click.testing.CliRunner()
        result = runner.invoke(
            cli, ["show", "--config", str(config_path), "--today", "2024-12-20"]
        )

        assert result.exit_code == 1
        assert "No upcoming meeting agenda" in result.output


class TestInitCommand:
    """Test the init command."""

    def test_init_writes_default_config(self, tmp_path: Path) -> None:
        config_path = tmp_path / "nextmeeting.yaml"

        runner = click.testing.CliRunner()
        result = runner.invoke(cli, ["init", str(config_path)])

        assert result.exit_code == 0
        config = load_config(config_path)
        assert config is not None
        assert config.repository.owner == "tc39"

    def test_init_refuses_to_overwrite(self, tmp_path: Path) -> None:
        config_path = tmp_path / "nextmeeting.yaml"
        config_path.write_text("site:\n  agenda_deadline_days: 3\n", encoding="utf-8")

        runner = click.testing.CliRunner()
        result = runner.invoke(cli, ["init", str(config_path)])

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_init_overwrite(self, tmp_path: Path) -> None:
        config_path = tmp_path / "nextmeeting.yaml"
        config_path.write_text("site:\n  agenda_deadline_days: 3\n", encoding="utf-8")

        runner = click.testing.CliRunner()
        result = runner.invoke(cli, ["init", str(config_path), "--overwrite"])

        assert result.exit_code == 0
        config = load_config(config_path)
        assert config is not None
        assert config.site.agenda_deadline_days == 10
