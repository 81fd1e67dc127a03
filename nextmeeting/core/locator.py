"""Locate the agenda of the next meeting in a year/month repository layout."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from loguru import logger

from ..exceptions import AgendaNotFoundError
from .models import MeetingDocumentRef
from .months import month_document_path, month_from_filename, month_to_index

if TYPE_CHECKING:
    from ..repository.base import DocumentRepository


async def list_meeting_months(repository: DocumentRepository, year: int) -> list[int]:
    """Return the sorted calendar months that have an agenda in ``year``."""
    entries = await repository.list_directory(str(year))
    months = {month_from_filename(entry.name) for entry in entries}
    return sorted(month for month in months if month is not None)


def _document_ref(year: int, month: int) -> MeetingDocumentRef:
    return MeetingDocumentRef(
        path=month_document_path(year, month),
        year=year,
        month_index=month_to_index(month),
    )


async def locate_next_meeting(
    repository: DocumentRepository, today: date
) -> MeetingDocumentRef:
    """Find the agenda of the next meeting, searching this year then next year.

    Months are compared as a whole: an agenda for the current month is
    picked even if that meeting already took place earlier in the month.

    Args:
        repository: Repository holding ``{year}/{MM}.md`` agendas.
        today: The current local date.

    Returns:
        Reference to the chosen agenda document.

    Raises:
        AgendaNotFoundError: If neither this year nor next year has a
            matching agenda, or next year's listing fails.
        TransportError: If this year's listing fails.
    """
    year = today.year
    months = await list_meeting_months(repository, year)
    upcoming = [month for month in months if month >= today.month]
    if upcoming:
        return _document_ref(year, upcoming[0])

    next_year = year + 1
    logger.debug(f"No agenda left in {year}, looking in {next_year}")
    try:
        next_months = await list_meeting_months(repository, next_year)
    except Exception as e:
        logger.debug(f"Could not list agendas for {next_year}: {e}")
        next_months = []

    if not next_months:
        raise AgendaNotFoundError(
            f"No upcoming meeting agenda found in {year} or {next_year}"
        )
    return _document_ref(next_year, next_months[0])
