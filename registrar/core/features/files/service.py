# (c) Copyright Datacraft, 2026
"""Case file lifecycle operations."""
import logging

from registrar.core.exceptions import Conflict, NotFound, ValidationFailed
from registrar.core.features.audit import EventDispatcher, View
from registrar.core.store import RecordStore
from registrar.core.types import FileStatus
from registrar.core.utils.ids import new_id
from registrar.core.utils.tz import utc_now

from .reassignment import apply_reassignment
from .schema import (
	CaseFile,
	CaseFileCreate,
	CaseFileUpdate,
	FileRequest,
	FileRequestCreate,
	default_milestones,
	merge_validated,
	to_record,
)

logger = logging.getLogger(__name__)


async def get_file(store: RecordStore, file_number: str) -> CaseFile:
	record = await store.get_file(file_number)
	if record is None:
		raise NotFound(f"File {file_number} not found.")
	return CaseFile.model_validate(record)


async def get_file_by_id(store: RecordStore, file_id: str) -> CaseFile:
	record = await store.get_file_by_id(file_id)
	if record is None:
		raise NotFound(f"File {file_id} not found.")
	return CaseFile.model_validate(record)


async def list_files(store: RecordStore) -> list[CaseFile]:
	return [CaseFile.model_validate(r) for r in await store.list_files()]


async def create_file(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	data: CaseFileCreate,
) -> CaseFile:
	"""Open a new case file.

	The file starts Active with the default milestone template and empty
	ledgers; its reportable date is its creation date.
	"""
	file_number = data.file_number.strip()
	if not file_number:
		raise ValidationFailed("File number is required.")

	now = utc_now()
	record = {
		**data.model_dump(),
		"file_number": file_number,
		"reportable_date": data.date_created,
		"status": FileStatus.ACTIVE.value,
		"completed_at": None,
		"last_activity_at": now,
		"viewed_by": {},
		"pinned_by": {},
		"letters": [],
		"movements": [],
		"reminders": [],
		"requests": [],
		"milestones": to_record(default_milestones()),
		"internal_drafts": [],
		"internal_instructions": [],
		"attachments": [],
	}
	file_id = await store.create_file(record)
	logger.info(f"Created file {file_number} ({file_id})")

	await events.audit(actor, "CREATE_FILE", f"Created file {file_number}: {data.subject}")
	await events.invalidate(View.DASHBOARD, View.FILES)
	return await get_file_by_id(store, file_id)


async def update_file(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	file_id: str,
	data: CaseFileUpdate,
) -> CaseFile:
	file = await get_file_by_id(store, file_id)
	patch = data.model_dump(exclude_unset=True, exclude={"treat_as_new"})
	if "file_number" in patch:
		new_number = (patch.pop("file_number") or "").strip()
		if not new_number:
			raise ValidationFailed("File number is required.")
		if new_number != file.file_number:
			if await store.get_file(new_number) is not None:
				raise Conflict(f"File number {new_number} already exists.")
			patch["file_number"] = new_number
			# attached items follow their owner
			patch["letters"] = [
				letter.model_copy(update={"file_number": new_number})
				for letter in file.letters
			]

	now = utc_now()
	patch = apply_reassignment(file, patch, now)
	if data.treat_as_new:
		patch["reportable_date"] = now
	patch["last_activity_at"] = now
	merge_validated(CaseFile, file, patch)

	await store.update_file(file_id, to_record(patch))
	logger.info(f"Updated file {file.file_number}")

	detail = f"Updated details for {file.file_number}"
	if data.assigned_to or data.group:
		lead = data.assigned_to or file.assigned_to or "Unassigned"
		group = data.group or file.group or "no group"
		detail += f" (lead: {lead}, group: {group})"
	await events.audit(actor, "UPDATE_FILE", detail)
	await events.invalidate(View.DASHBOARD, View.FILES)
	return await get_file_by_id(store, file_id)


async def set_status(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	file_id: str,
	status: FileStatus,
) -> CaseFile:
	file = await get_file_by_id(store, file_id)
	now = utc_now()
	patch = {
		"status": status.value,
		"completed_at": now if status == FileStatus.COMPLETED else None,
		"last_activity_at": now,
	}
	await store.update_file(file_id, patch)
	logger.info(f"File {file.file_number} is now {status.value}")

	await events.audit(
		actor, "TOGGLE_FILE_STATUS", f"Marked {file.file_number} as {status.value}"
	)
	await events.invalidate(View.DASHBOARD, View.FILES, View.PORTAL)
	return await get_file_by_id(store, file_id)


async def toggle_pin(store: RecordStore, file_id: str, attorney_id: str) -> CaseFile:
	"""Flip the viewer's pin; pins are personal and not audited."""
	if not attorney_id:
		raise ValidationFailed("An attorney id is required to pin a file.")
	file = await get_file_by_id(store, file_id)
	pinned = not file.is_pinned_by(attorney_id)
	await store.update_file(file_id, {f"pinned_by.{attorney_id}": pinned})
	return await get_file_by_id(store, file_id)


async def mark_viewed(store: RecordStore, file_id: str, viewer_id: str) -> None:
	if not viewer_id:
		raise ValidationFailed("A viewer id is required.")
	await store.update_file(file_id, {f"viewed_by.{viewer_id}": utc_now()})


async def delete_file(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	file_id: str,
) -> None:
	file = await get_file_by_id(store, file_id)
	await store.delete_file(file_id)
	logger.info(f"Deleted file {file.file_number}")

	await events.audit(actor, "DELETE_FILE", f"Deleted file {file.file_number}")
	await events.invalidate(View.DASHBOARD, View.FILES)


async def request_file(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	file_number: str,
	data: FileRequestCreate,
) -> CaseFile:
	file = await get_file(store, file_number)
	request = FileRequest(
		id=new_id("REQ"),
		requester_id=data.requester_id,
		requester_name=data.requester_name,
		requested_at=utc_now(),
	)
	await store.append_to_array_field(file.id, "requests", to_record(request))

	await events.audit(
		actor, "REQUEST_FILE", f"{data.requester_name} requested {file_number}"
	)
	await events.invalidate(View.DASHBOARD, View.PORTAL)
	return await get_file_by_id(store, file.id)


async def cancel_request(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	file_number: str,
	request_id: str,
) -> CaseFile:
	file = await get_file(store, file_number)
	remaining = [r for r in file.requests if r.id != request_id]
	if len(remaining) == len(file.requests):
		raise NotFound(f"Request {request_id} not found on {file_number}.")
	await store.update_file(file.id, {"requests": to_record(remaining)})

	await events.audit(actor, "CANCEL_REQUEST", f"Cancelled request on {file_number}")
	await events.invalidate(View.DASHBOARD, View.PORTAL)
	return await get_file_by_id(store, file.id)
