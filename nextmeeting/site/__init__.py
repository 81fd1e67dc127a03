"""Status page publishing for nextmeeting."""

from .processor import UpdateResult, build_page, fetch_next_agenda, update_site

__all__ = ["UpdateResult", "build_page", "fetch_next_agenda", "update_site"]
