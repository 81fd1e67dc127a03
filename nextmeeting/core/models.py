"""Data types passed between the locator, parser and renderer."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict

from .months import index_to_month


class DirectoryEntry(BaseModel):
    """A single entry of a repository directory listing."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str = ""
    type: str = "file"


class MeetingDocumentRef(BaseModel):
    """Location of the agenda chosen as the next meeting."""

    model_config = ConfigDict(frozen=True)

    path: str
    year: int
    month_index: int

    @property
    def month(self) -> int:
        return index_to_month(self.month_index)


class Agenda(BaseModel):
    """The next meeting's location, date span and source link."""

    model_config = ConfigDict(frozen=True)

    location: str
    start_date: date
    end_date: date
    url: str
