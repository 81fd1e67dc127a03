"""Agenda parsing for nextmeeting."""

from __future__ import annotations

import re
from datetime import date, timedelta

from loguru import logger

from ..exceptions import AgendaParseError
from .models import Agenda
from .months import index_to_month, month_document_path

LOCATION_PATTERN = re.compile(r"- \*\*Location\*\*: ([^\r\n]+)")
DATES_PATTERN = re.compile(r"- \*\*Dates\*\*: (\d+)\s*-\s*(\d+)\s*(\w+)\s*(\d{4})")


def blob_url(owner: str, repo: str, branch: str, path: str) -> str:
    """Return the GitHub web link of ``path`` in ``owner/repo`` at ``branch``."""
    return f"https://github.com/{owner}/{repo}/blob/{branch}/{path}"


def parse_agenda(
    text: str,
    month_index: int,
    owner: str = "tc39",
    repo: str = "agendas",
    branch: str = "master",
) -> Agenda:
    """Extract the location and date span of a meeting from its agenda.

    The agenda must contain a ``- **Location**: ...`` line and a
    ``- **Dates**: <start> - <end> <Month> <year>`` line. Dates are built
    from the captured days and year together with ``month_index``; the
    month name written in the dates line is not compared against it. Days past
    the end of the month roll over into the next one (June 31 is July 1) and
    day 0 is the last day of the previous month.

    Args:
        text: Raw markdown of the agenda document.
        month_index: Zero-based month of the document (see ``core.months``).
        owner: Repository owner used for the agenda link.
        repo: Repository name used for the agenda link.
        branch: Branch used for the agenda link.

    Returns:
        The parsed Agenda.

    Raises:
        AgendaParseError: If the location or dates line is missing.
    """
    location_match = LOCATION_PATTERN.search(text)
    if not location_match:
        raise AgendaParseError("Agenda has no '- **Location**:' line")

    dates_match = DATES_PATTERN.search(text)
    if not dates_match:
        raise AgendaParseError("Agenda has no '- **Dates**:' line")

    location = location_match.group(1)
    start_day, end_day, _month_name, year = dates_match.groups()
    month = index_to_month(month_index)

    first_of_month = date(int(year), month, 1)
    start_date = first_of_month + timedelta(days=int(start_day) - 1)
    end_date = first_of_month + timedelta(days=int(end_day) - 1)

    logger.debug(f"Start date: {start_date}")
    logger.debug(f"End date: {end_date}")
    logger.debug(f"Location: {location}")

    return Agenda(
        location=location,
        start_date=start_date,
        end_date=end_date,
        url=blob_url(
            owner, repo, branch, month_document_path(start_date.year, start_date.month)
        ),
    )
