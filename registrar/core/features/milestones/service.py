# (c) Copyright Datacraft, 2026
import logging

from registrar.core.exceptions import ValidationFailed
from registrar.core.features.audit import EventDispatcher, View
from registrar.core.features.files.schema import CaseFile, Milestone, to_record
from registrar.core.features.files.service import get_file, get_file_by_id
from registrar.core.store import RecordStore
from registrar.core.utils.tz import utc_now

from .progress import next_milestone, progress_percent
from .schema import Progress

logger = logging.getLogger(__name__)


def progress_for(file: CaseFile) -> Progress:
	return Progress(
		file_number=file.file_number,
		milestones=file.milestones,
		percent=progress_percent(file.milestones),
		next_milestone=next_milestone(file.milestones),
	)


async def get_progress(store: RecordStore, file_number: str) -> Progress:
	return progress_for(await get_file(store, file_number))


async def set_milestones(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	file_number: str,
	milestones: list[Milestone],
) -> Progress:
	"""Replace the whole checklist of ``file_number``."""
	ids = [m.id for m in milestones]
	if len(set(ids)) != len(ids):
		raise ValidationFailed("Milestone ids must be unique.")

	file = await get_file(store, file_number)
	await store.update_file(file.id, {
		"milestones": to_record(milestones),
		"last_activity_at": utc_now(),
	})
	updated = await get_file_by_id(store, file.id)
	progress = progress_for(updated)
	logger.info(f"{file_number} progress now {progress.percent:.0f}%")

	await events.audit(
		actor,
		"UPDATE_MILESTONES",
		f"Updated milestones for {file_number} ({progress.percent:.0f}% complete)",
	)
	await events.invalidate(View.FILES, View.PORTAL)
	return progress
