# (c) Copyright Datacraft, 2026
import logging

from uuid_extensions import uuid7str

from registrar.core.exceptions import NotFound
from registrar.core.features.audit import EventDispatcher, View
from registrar.core.features.files.schema import CaseFile, to_record
from registrar.core.store import RecordStore, UpdateFile
from registrar.core.utils.ids import access_id
from registrar.core.utils.tz import utc_now

from .rename import rename_patch
from .schema import Attorney, AttorneyCreate, AttorneyUpdate, RenameResult

logger = logging.getLogger(__name__)


async def get_attorney(store: RecordStore, attorney_id: str) -> Attorney:
	record = await store.get_attorney(attorney_id)
	if record is None:
		raise NotFound(f"Attorney {attorney_id} not found.")
	return Attorney.model_validate(record)


async def list_attorneys(store: RecordStore) -> list[Attorney]:
	attorneys = [Attorney.model_validate(r) for r in await store.list_attorneys()]
	return sorted(attorneys, key=lambda a: a.full_name.lower())


async def create_attorney(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	data: AttorneyCreate,
) -> Attorney:
	attorney = Attorney(id=uuid7str(), access_id=access_id(), **data.model_dump())
	await store.save_attorney(attorney.id, attorney.model_dump())
	logger.info(f"Created attorney {attorney.full_name} ({attorney.access_id})")

	await events.audit(actor, "CREATE_ATTORNEY", f"Added attorney {attorney.full_name}")
	await events.invalidate(View.ATTORNEYS)
	return attorney


async def propagate_name_change(
	store: RecordStore,
	old_name: str,
	new_name: str,
) -> RenameResult:
	"""Rename ``old_name`` to ``new_name`` across all case files in one batch."""
	now = utc_now()
	ops = []
	touched = []
	for record in await store.list_files():
		file = CaseFile.model_validate(record)
		patch = rename_patch(file, old_name, new_name)
		if not patch:
			continue
		patch["last_activity_at"] = now
		ops.append(UpdateFile(file.id, to_record(patch)))
		touched.append(file.file_number)
	if ops:
		await store.batch_write(ops)
	logger.info(f"Renamed {old_name} to {new_name} on {len(touched)} files")
	return RenameResult(old_name=old_name, new_name=new_name, files_updated=touched)


async def update_attorney(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	attorney_id: str,
	data: AttorneyUpdate,
) -> Attorney:
	"""Update an attorney; a changed full name is carried into every file."""
	current = await get_attorney(store, attorney_id)
	updated = current.model_copy(update=data.model_dump(exclude_unset=True))
	renamed = (
		data.full_name is not None
		and data.full_name != current.full_name
	)

	# the attorney record is saved first so files never carry a name it lacks
	await store.save_attorney(attorney_id, updated.model_dump())
	if renamed:
		result = await propagate_name_change(store, current.full_name, updated.full_name)
		await events.audit(
			actor,
			"RENAME_ATTORNEY",
			f"Renamed {current.full_name} to {updated.full_name} "
			f"across {len(result.files_updated)} files",
		)

	await events.audit(actor, "UPDATE_ATTORNEY", f"Updated attorney {updated.full_name}")
	await events.invalidate(View.ATTORNEYS, View.FILES, View.DASHBOARD, View.PORTAL)
	return updated
