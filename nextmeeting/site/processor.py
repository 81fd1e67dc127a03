"""Update the status page with the next meeting."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from loguru import logger

from ..config import Config
from ..core import (
    Agenda,
    apply_template,
    build_render_context,
    locate_next_meeting,
    parse_agenda,
)
from ..repository import DocumentRepository
from ..storage import ObjectStore


@dataclass
class UpdateResult:
    """Outcome of a single page update."""

    published: bool
    agenda: Agenda | None = None
    content: str | None = None
    error: str | None = None


async def fetch_next_agenda(
    repository: DocumentRepository, today: date, config: Config | None = None
) -> Agenda:
    """Locate, read and parse the agenda of the next meeting."""
    config = config or Config()
    ref = await locate_next_meeting(repository, today)
    logger.info(f"Next meeting agenda: {ref.path}")
    text = await repository.read_file(ref.path)
    return parse_agenda(
        text,
        ref.month_index,
        owner=config.repository.owner,
        repo=config.repository.repo,
        branch=config.repository.branch,
    )


def build_page(
    agenda: Agenda, template: str, now: datetime, config: Config | None = None
) -> str:
    """Render ``template`` with the placeholder values for ``agenda``."""
    config = config or Config()
    context = build_render_context(agenda, now, config.site.agenda_deadline_days)
    return apply_template(context, template)


async def update_site(
    repository: DocumentRepository,
    store: ObjectStore,
    config: Config | None = None,
    now: datetime | None = None,
    dry_run: bool = False,
) -> UpdateResult:
    """Publish the page for the next meeting.

    Runs locate, parse, template fetch, render and upload in sequence and
    stops at the first failure. Failures are logged and returned, never
    raised, so the previously published page stays in place.

    Args:
        repository: Repository holding the dated agendas.
        store: Object store with the template and the published page.
        config: Optional configuration object.
        now: Time of the run; defaults to the current local time.
        dry_run: If True, render the page but don't upload it.

    Returns:
        UpdateResult describing what was published.
    """
    config = config or Config()
    now = now or datetime.now()
    storage = config.storage
    agenda: Agenda | None = None

    try:
        agenda = await fetch_next_agenda(repository, now.date(), config)
        template = await store.read_text(storage.container, storage.template_key)
        content = build_page(agenda, template, now, config)

        if dry_run:
            logger.info(
                f"[DRY RUN] Would write {storage.container}/{storage.output_key}"
            )
            return UpdateResult(published=False, agenda=agenda, content=content)

        await store.write_text(
            storage.container, storage.output_key, content, storage.content_type
        )
        logger.info(f"Published {storage.container}/{storage.output_key}")
        return UpdateResult(published=True, agenda=agenda, content=content)
    except Exception as e:
        logger.error(f"ERROR: {e}")
        return UpdateResult(published=False, agenda=agenda, error=str(e))
