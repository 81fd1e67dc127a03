"""Month numbering shared by the locator and the agenda parser.

Agenda files are named with one-based, two-digit months (``2024/06.md``),
while the parser is handed a zero-based month index (June is ``5``).
"""

from __future__ import annotations

import re

MONTH_FILE_PATTERN = re.compile(r"^(0[1-9]|1[0-2])\.md$")


def month_to_index(month: int) -> int:
    """Convert a calendar month (1-12) to the zero-based index used by the parser."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    return month - 1


def index_to_month(index: int) -> int:
    """Convert a zero-based month index (0-11) back to a calendar month."""
    if not 0 <= index <= 11:
        raise ValueError(f"Month index must be between 0 and 11, got {index}")
    return index + 1


def month_document_path(year: int, month: int) -> str:
    """Return the repository path of the agenda for ``year`` and calendar ``month``."""
    return f"{year}/{month:02d}.md"


def month_from_filename(name: str) -> int | None:
    """Return the calendar month encoded in an agenda file name, or None."""
    match = MONTH_FILE_PATTERN.match(name)
    if not match:
        return None
    return int(match.group(1))
