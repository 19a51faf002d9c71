# (c) Copyright Datacraft, 2026
"""Custody operations on a single file's movement ledger."""
import logging

from registrar.core.exceptions import NotFound
from registrar.core.features.audit import EventDispatcher, View
from registrar.core.features.files.schema import CaseFile, Movement, merge_validated, to_record
from registrar.core.features.files.service import get_file, get_file_by_id
from registrar.core.store import RecordStore
from registrar.core.utils.ids import new_id
from registrar.core.utils.names import names_match
from registrar.core.utils.tz import utc_now

from .ledger import acknowledge, resolve_custody
from .registry import custody_view
from .schema import Custody, MoveFile, MovementUpdate

logger = logging.getLogger(__name__)


async def get_custody(store: RecordStore, file_number: str, overdue_days: int) -> Custody:
	file = await get_file(store, file_number)
	return custody_view(file, resolve_custody(file.movements), overdue_days)


async def move_file(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	file_number: str,
	data: MoveFile,
) -> CaseFile:
	"""Send the physical file to ``data.moved_to``.

	Pending requests raised by the recipient are satisfied by the move
	and dropped.
	"""
	file = await get_file(store, file_number)
	movement = Movement(
		id=new_id("M"),
		date=data.date,
		moved_to=data.moved_to,
		status=data.status,
	)
	requests = [r for r in file.requests if not names_match(r.requester_name, data.moved_to)]
	await store.update_file(file.id, {
		"movements": to_record([*file.movements, movement]),
		"requests": to_record(requests),
		"last_activity_at": utc_now(),
	})
	logger.info(f"Moved {file_number} to {data.moved_to}")

	await events.audit(
		actor,
		"MOVE_FILE",
		f'Moved file {file_number} to {data.moved_to}. New status: "{data.status}"',
	)
	await events.invalidate(View.DASHBOARD, View.FILES, View.PORTAL)
	return await get_file_by_id(store, file.id)


async def confirm_receipt(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	file_number: str,
	movement_id: str,
	received_by: str,
) -> CaseFile:
	file = await get_file(store, file_number)
	now = utc_now()
	movements = acknowledge(file.movements, movement_id, received_by, now)
	await store.update_file(file.id, {
		"movements": to_record(movements),
		"last_activity_at": now,
	})
	logger.info(f"{received_by} acknowledged {file_number} ({movement_id})")

	await events.audit(
		actor, "CONFIRM_RECEIPT", f"Confirmed receipt of file {file_number} at destination."
	)
	custodian = resolve_custody(movements).custodian
	await events.notify(custodian, {
		"event": "receipt_confirmed",
		"file_number": file_number,
		"subject": file.subject,
		"movement_id": movement_id,
		"received_by": received_by,
		"received_at": now.isoformat(),
	})
	await events.invalidate(View.DASHBOARD, View.FILES, View.PORTAL)
	return await get_file_by_id(store, file.id)


def _replace_movement(
	movements: list[Movement],
	movement_id: str,
	changes: dict,
) -> list[Movement]:
	if not any(m.id == movement_id for m in movements):
		raise NotFound(f"Movement {movement_id} not found.")
	return [
		merge_validated(Movement, m, changes) if m.id == movement_id else m
		for m in movements
	]


async def update_movement(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	file_number: str,
	movement_id: str,
	data: MovementUpdate,
) -> CaseFile:
	file = await get_file(store, file_number)
	movements = _replace_movement(
		file.movements, movement_id, data.model_dump(exclude_unset=True)
	)
	await store.update_file(file.id, {
		"movements": to_record(movements),
		"last_activity_at": utc_now(),
	})

	await events.audit(
		actor, "UPDATE_MOVEMENT", f"Updated movement log {movement_id} for file {file_number}"
	)
	await events.invalidate(View.FILES)
	return await get_file_by_id(store, file.id)


async def delete_movement(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	file_number: str,
	movement_id: str,
) -> CaseFile:
	file = await get_file(store, file_number)
	movements = [m for m in file.movements if m.id != movement_id]
	if len(movements) == len(file.movements):
		raise NotFound(f"Movement {movement_id} not found.")
	await store.update_file(file.id, {
		"movements": to_record(movements),
		"last_activity_at": utc_now(),
	})

	await events.audit(
		actor, "DELETE_MOVEMENT", f"Deleted movement record {movement_id} from file {file_number}"
	)
	await events.invalidate(View.FILES)
	return await get_file_by_id(store, file.id)
