"""Exceptions raised while building the next-meeting page."""

from __future__ import annotations


class NextMeetingError(Exception):
    """Base class for every failure of a page update."""


class AgendaNotFoundError(NextMeetingError):
    """No upcoming agenda document could be located."""


class AgendaParseError(NextMeetingError):
    """The located agenda lacks a usable location or date line."""


class TransportError(NextMeetingError):
    """Reading from the repository or talking to storage failed."""
