"""Placeholder substitution and render context for the status page."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date, datetime, time, timedelta

from .models import Agenda

PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]*)\}")

PLACEHOLDERS = (
    "meeting-time",
    "meeting-days-left",
    "meeting-location",
    "meeting-url",
    "meeting-agenda-days-left",
)


def apply_template(context: Mapping[str, str], template: str) -> str:
    """Replace the first ``{key}`` token of every context key in ``template``.

    Tokens without a matching key, and later repeats of a key already
    replaced, are left untouched. Substituted values are inserted verbatim
    and never scanned again.
    """
    replaced: set[str] = set()

    def _substitute(match: re.Match[str]) -> str:
        key = match.group(1)
        if key in context and key not in replaced:
            replaced.add(key)
            return context[key]
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_substitute, template)


def format_date_span(start: date, end: date) -> str:
    """Format a meeting span as ``12-15 June 2024`` using the start month and year."""
    return f"{start.day}-{end.day} {start.strftime('%B')} {start.year}"


def days_until(target: date, now: datetime) -> int:
    """Whole days from ``now`` until local midnight of ``target``, rounded down."""
    midnight = datetime.combine(target, time(), tzinfo=now.tzinfo)
    return (midnight - now) // timedelta(days=1)


def build_render_context(
    agenda: Agenda, now: datetime, agenda_deadline_days: int = 10
) -> dict[str, str]:
    """Build the placeholder values for ``agenda`` as seen at ``now``."""
    deadline = agenda.start_date - timedelta(days=agenda_deadline_days)
    return {
        "meeting-time": format_date_span(agenda.start_date, agenda.end_date),
        "meeting-days-left": str(days_until(agenda.start_date, now)),
        "meeting-location": agenda.location,
        "meeting-url": agenda.url,
        "meeting-agenda-days-left": str(days_until(deadline, now)),
    }
