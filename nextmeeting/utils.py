"""Console output helpers for nextmeeting."""

from __future__ import annotations

from collections.abc import Mapping

from rich.console import Console
from rich.table import Table

from .core import Agenda

console = Console()


def print_agenda(agenda: Agenda, context: Mapping[str, str]) -> None:
    """Print the next meeting and its placeholder values using rich formatting."""
    console.print(
        f"[bold cyan]Next meeting[/]: {agenda.start_date:%Y-%m-%d} to "
        f"{agenda.end_date:%Y-%m-%d} in {agenda.location}"
    )
    console.print(f"[dim]{agenda.url}[/]")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Placeholder")
    table.add_column("Value")
    for key, value in context.items():
        table.add_row(f"{{{key}}}", value)
    console.print(table)
