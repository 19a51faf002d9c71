# (c) Copyright Datacraft, 2026
"""Correspondence intake and transfer between the pool and case files.

An item lives either in the unassigned pool or on exactly one file.
Transfers go through a single ``batch_write`` so the store applies both
sides or neither.
"""
import logging

from registrar.core.exceptions import NotFound, ValidationFailed
from registrar.core.features.audit import EventDispatcher, View
from registrar.core.features.files.schema import CaseFile, Letter, merge_validated, to_record
from registrar.core.features.files.service import get_file, get_file_by_id
from registrar.core.store import (
	DeleteUnassignedItem,
	RecordStore,
	SetUnassignedItem,
	UpdateFile,
)
from registrar.core.types import CorrespondenceType
from registrar.core.utils.ids import new_id
from registrar.core.utils.tz import utc_now

from .schema import CorrespondenceCreate, LetterUpdate

logger = logging.getLogger(__name__)

REQUIRES_DOCUMENT_NO = (CorrespondenceType.INCOMING, CorrespondenceType.COURT_PROCESS)


def _views_for(letter: Letter) -> list[View]:
	views = [View.FILES]
	if letter.type == CorrespondenceType.INCOMING:
		views.append(View.INCOMING_MAIL)
	elif letter.type == CorrespondenceType.COURT_PROCESS:
		views.append(View.COURT_PROCESSES)
	return views


def _check_unassigned(letter: Letter) -> None:
	if letter.type in REQUIRES_DOCUMENT_NO and not letter.document_no.strip():
		raise ValidationFailed(
			f"A document number is required for {letter.type.value} items."
		)


def _pool_record(letter: Letter) -> dict:
	record = to_record(letter)
	record.pop("file_number", None)
	return record


async def get_unassigned(store: RecordStore, item_id: str) -> Letter:
	record = await store.get_unassigned_item(item_id)
	if record is None:
		raise NotFound(f"Item {item_id} not found.")
	return Letter.model_validate(record)


async def list_unassigned(
	store: RecordStore,
	type: CorrespondenceType | None = None,
) -> list[Letter]:
	letters = [Letter.model_validate(r) for r in await store.list_unassigned_items()]
	if type is not None:
		letters = [letter for letter in letters if letter.type == type]
	return sorted(letters, key=lambda letter: letter.date, reverse=True)


def _find_attached(file: CaseFile, item_id: str) -> Letter:
	letter = file.find_letter(item_id)
	if letter is None:
		raise NotFound(f"Item {item_id} is not attached to {file.file_number}.")
	return letter


async def add_correspondence(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	data: CorrespondenceCreate,
) -> Letter:
	letter = Letter(id=new_id("L"), **data.model_dump())
	kind = letter.type.value.lower()

	if data.file_number:
		file = await get_file(store, data.file_number)
		await store.update_file(file.id, {
			"letters": to_record([*file.letters, letter]),
			"last_activity_at": utc_now(),
		})
		detail = f'Added new {kind} item ("{letter.subject}") to file {file.file_number}'
	else:
		_check_unassigned(letter)
		await store.set_unassigned_item(letter.id, _pool_record(letter))
		detail = f'Logged new unassigned {kind} item: "{letter.subject}"'
	logger.info(detail)

	await events.audit(actor, "ADD_CORRESPONDENCE", detail)
	await events.invalidate(*_views_for(letter))
	return letter


async def attach(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	item_id: str,
	file_number: str,
) -> CaseFile:
	"""Move an item from the pool onto ``file_number``, keeping its id."""
	file = await get_file(store, file_number)
	item = await get_unassigned(store, item_id)
	attached = item.model_copy(update={"file_number": file.file_number})

	await store.batch_write([
		UpdateFile(file.id, {
			"letters": to_record([*file.letters, attached]),
			"last_activity_at": utc_now(),
		}),
		DeleteUnassignedItem(item_id),
	])
	logger.info(f"Attached {item_id} to {file_number}")

	await events.audit(
		actor,
		"ASSIGN_TO_FILE",
		f'Assigned item "{item.subject}" (Doc No: {item.document_no}) to file {file_number}',
	)
	await events.invalidate(*_views_for(item))
	return await get_file_by_id(store, file.id)


async def detach(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	file_number: str,
	item_id: str,
) -> Letter:
	"""Return an attached item to the pool without its ``file_number``."""
	file = await get_file(store, file_number)
	letter = _find_attached(file, item_id)
	released = letter.model_copy(update={"file_number": None})

	await store.batch_write([
		SetUnassignedItem(item_id, _pool_record(released)),
		UpdateFile(file.id, {
			"letters": to_record([l for l in file.letters if l.id != item_id]),
			"last_activity_at": utc_now(),
		}),
	])
	logger.info(f"Detached {item_id} from {file_number}")

	await events.audit(
		actor,
		"UNASSIGN_FROM_FILE",
		f'Un-assigned item "{letter.subject}" (Doc No: {letter.document_no}) from file {file_number}',
	)
	await events.invalidate(*_views_for(letter))
	return released


async def edit_attached(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	file_number: str,
	item_id: str,
	data: LetterUpdate,
) -> Letter:
	file = await get_file(store, file_number)
	current = _find_attached(file, item_id)
	updated = merge_validated(Letter, current, {
		**data.model_dump(exclude_unset=True),
		"id": current.id,
		"file_number": file.file_number,
	})
	letters = [updated if l.id == item_id else l for l in file.letters]
	await store.update_file(file.id, {
		"letters": to_record(letters),
		"last_activity_at": utc_now(),
	})

	await events.audit(
		actor, "UPDATE_LETTER", f"Updated letter {item_id} in file {file_number}"
	)
	await events.invalidate(*_views_for(updated))
	return updated


async def edit_unassigned(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	item_id: str,
	data: LetterUpdate,
) -> Letter:
	current = await get_unassigned(store, item_id)
	updated = merge_validated(Letter, current, {
		**data.model_dump(exclude_unset=True),
		"id": current.id,
		"file_number": None,
	})
	_check_unassigned(updated)
	await store.set_unassigned_item(item_id, _pool_record(updated))

	await events.audit(
		actor,
		"UPDATE_LETTER",
		f'Updated unassigned {updated.type.value.lower()} item: "{updated.subject}"',
	)
	await events.invalidate(*_views_for(updated))
	return updated


async def delete_attached(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	file_number: str,
	item_id: str,
) -> None:
	file = await get_file(store, file_number)
	letter = _find_attached(file, item_id)
	letters = [l for l in file.letters if l.id != item_id]
	await store.update_file(file.id, {
		"letters": to_record(letters),
		"last_activity_at": utc_now(),
	})

	await events.audit(
		actor, "DELETE_LETTER", f"Deleted letter {item_id} from file {file_number}"
	)
	await events.invalidate(*_views_for(letter))


async def delete_unassigned(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	item_id: str,
) -> None:
	letter = await get_unassigned(store, item_id)
	await store.delete_unassigned_item(item_id)

	await events.audit(
		actor, "DELETE_LETTER", f"Deleted unassigned correspondence: {item_id}"
	)
	await events.invalidate(*_views_for(letter))
