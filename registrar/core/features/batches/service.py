# (c) Copyright Datacraft, 2026
"""Operations applied to many files in one atomic store batch.

Unknown file numbers are skipped rather than failing the batch; they
are reported back in ``BatchResult.skipped``.
"""
import logging
from datetime import datetime

from registrar.core.exceptions import ValidationFailed
from registrar.core.features.audit import EventDispatcher, View
from registrar.core.features.custody.ledger import REGISTRY, resolve_custody
from registrar.core.features.files.schema import CaseFile, Movement, to_record
from registrar.core.store import RecordStore, UpdateFile
from registrar.core.utils.ids import new_id
from registrar.core.utils.names import names_match, normalize_name
from registrar.core.utils.tz import utc_now

from .schema import (
	BatchMoveRequest,
	BatchPickupResult,
	BatchResult,
	CustodianPickup,
	PickedUpFile,
)

logger = logging.getLogger(__name__)

PICKUP_STATUS = "Physically returned to Registry"


def _unique(file_numbers: list[str]) -> list[str]:
	seen = []
	for number in file_numbers:
		number = number.strip()
		if number and number not in seen:
			seen.append(number)
	if not seen:
		raise ValidationFailed("No files selected.")
	return seen


async def _load(
	store: RecordStore,
	file_numbers: list[str],
) -> tuple[list[CaseFile], list[str]]:
	found, skipped = [], []
	for number in file_numbers:
		record = await store.get_file(number)
		if record is None:
			logger.debug(f"Batch skipping unknown file {number}")
			skipped.append(number)
		else:
			found.append(CaseFile.model_validate(record))
	return found, skipped


def move_patch(file: CaseFile, data: BatchMoveRequest, now: datetime) -> dict:
	movement = Movement(
		id=new_id("M"),
		date=data.date,
		moved_to=data.moved_to,
		status=data.status,
	)
	patch = {
		"movements": [*file.movements, movement],
		"requests": [r for r in file.requests if not names_match(r.requester_name, data.moved_to)],
		"last_activity_at": now,
	}
	if data.group:
		patch["group"] = data.group
	if data.assigned_to:
		patch["assigned_to"] = data.assigned_to
	return patch


async def batch_move(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	data: BatchMoveRequest,
) -> BatchResult:
	"""Send every named file to the same destination in one batch."""
	files, skipped = await _load(store, _unique(data.file_numbers))
	now = utc_now()
	ops = [UpdateFile(f.id, to_record(move_patch(f, data, now))) for f in files]
	if ops:
		await store.batch_write(ops)
	processed = [f.file_number for f in files]
	logger.info(f"Batch moved {len(processed)} files to {data.moved_to}")

	details = [f"Batch moved {len(processed)} files to {data.moved_to}"]
	if data.assigned_to:
		details.append(f"Set lead: {data.assigned_to}")
	if data.group:
		details.append(f"Assigned group: {data.group}")
	await events.audit(
		actor,
		"BATCH_MOVE_FILES",
		f"{'. '.join(details)}. Files: {', '.join(processed)}",
	)
	await events.invalidate(View.DASHBOARD, View.FILES, View.PORTAL)
	return BatchResult(processed=processed, skipped=skipped)


def _attorney_for(attorneys: list[dict], name: str) -> dict | None:
	for attorney in attorneys:
		if names_match(attorney.get("full_name"), name):
			return attorney
	return None


async def batch_pickup(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	file_numbers: list[str],
	received_by: str,
) -> BatchPickupResult:
	"""Return files to the Registry, already acknowledged by ``received_by``.

	Pending requests on every picked-up file are cleared. The summary
	groups files by the custodian they were collected from so each one is
	notified once.
	"""
	files, skipped = await _load(store, _unique(file_numbers))
	attorneys = await store.list_attorneys()
	now = utc_now()

	summary: dict[str, CustodianPickup] = {}
	ops = []
	for file in files:
		custody = resolve_custody(file.movements, now)
		if not custody.at_registry:
			key = normalize_name(custody.custodian)
			if key not in summary:
				attorney = _attorney_for(attorneys, custody.custodian)
				summary[key] = CustodianPickup(
					custodian=attorney["full_name"] if attorney else custody.custodian,
					attorney_id=attorney.get("id") if attorney else None,
					phone_number=attorney.get("phone_number") if attorney else None,
				)
			summary[key].files.append(
				PickedUpFile(file_number=file.file_number, subject=file.subject)
			)

		movement = Movement(
			id=new_id("M"),
			date=now,
			moved_to=REGISTRY,
			status=PICKUP_STATUS,
			received_at=now,
			received_by=received_by,
		)
		ops.append(UpdateFile(file.id, to_record({
			"movements": [*file.movements, movement],
			"requests": [],
			"last_activity_at": now,
		})))

	if ops:
		await store.batch_write(ops)
	processed = [f.file_number for f in files]
	logger.info(f"{received_by} picked up {len(processed)} files")

	await events.audit(
		actor,
		"BATCH_PICKUP",
		f"Physically picked up {len(processed)} files from practitioners. Returned to Registry.",
	)
	for pickup in summary.values():
		await events.notify(pickup.custodian, {
			"event": "files_picked_up",
			"attorney_id": pickup.attorney_id,
			"phone_number": pickup.phone_number,
			"received_by": received_by,
			"files": [f.model_dump() for f in pickup.files],
		})
	await events.invalidate(View.DASHBOARD, View.FILES, View.PORTAL)
	return BatchPickupResult(
		processed=processed,
		skipped=skipped,
		summary=list(summary.values()),
	)
