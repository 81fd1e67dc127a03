"""Core logic for nextmeeting.

This module contains locating the next agenda, parsing its metadata and
rendering it into the page template.
"""

from .agenda import blob_url, parse_agenda
from .locator import list_meeting_months, locate_next_meeting
from .models import Agenda, DirectoryEntry, MeetingDocumentRef
from .months import (
    index_to_month,
    month_document_path,
    month_from_filename,
    month_to_index,
)
from .template import (
    PLACEHOLDERS,
    apply_template,
    build_render_context,
    days_until,
    format_date_span,
)

__all__ = [
    "Agenda",
    "DirectoryEntry",
    "MeetingDocumentRef",
    "PLACEHOLDERS",
    "apply_template",
    "blob_url",
    "build_render_context",
    "days_until",
    "format_date_span",
    "index_to_month",
    "list_meeting_months",
    "locate_next_meeting",
    "month_document_path",
    "month_from_filename",
    "month_to_index",
    "parse_agenda",
]
