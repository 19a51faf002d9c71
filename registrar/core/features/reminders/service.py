# (c) Copyright Datacraft, 2026
"""Case-file reminders and personal (general) reminders."""
import logging

from registrar.core.exceptions import NotFound
from registrar.core.features.audit import EventDispatcher, View
from registrar.core.features.files.schema import CaseFile, CaseReminder, to_record
from registrar.core.features.files.service import get_file, get_file_by_id
from registrar.core.store import RecordStore
from registrar.core.utils.ids import new_id
from registrar.core.utils.tz import utc_now

from .schema import GeneralReminder, GeneralReminderCreate, ReminderCreate

logger = logging.getLogger(__name__)


async def add_case_reminder(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	file_number: str,
	data: ReminderCreate,
) -> CaseFile:
	file = await get_file(store, file_number)
	reminder = CaseReminder(id=new_id("R"), text=data.text, date=data.date)
	await store.update_file(file.id, {
		"reminders": to_record([*file.reminders, reminder]),
		"last_activity_at": utc_now(),
	})

	await events.audit(
		actor, "ADD_REMINDER", f'Added reminder "{data.text}" to file {file_number}'
	)
	await events.invalidate(View.FILES, View.PORTAL)
	return await get_file_by_id(store, file.id)


async def toggle_case_reminder(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	file_number: str,
	reminder_id: str,
) -> CaseFile:
	file = await get_file(store, file_number)
	if not any(r.id == reminder_id for r in file.reminders):
		raise NotFound(f"Reminder {reminder_id} not found on {file_number}.")
	reminders = [
		r.model_copy(update={"is_completed": not r.is_completed}) if r.id == reminder_id else r
		for r in file.reminders
	]
	await store.update_file(file.id, {
		"reminders": to_record(reminders),
		"last_activity_at": utc_now(),
	})

	await events.audit(
		actor, "TOGGLE_REMINDER", f"Toggled reminder {reminder_id} on file {file_number}"
	)
	await events.invalidate(View.FILES, View.PORTAL)
	return await get_file_by_id(store, file.id)


async def get_general_reminder(store: RecordStore, reminder_id: str) -> GeneralReminder:
	record = await store.get_reminder(reminder_id)
	if record is None:
		raise NotFound(f"Reminder {reminder_id} not found.")
	return GeneralReminder.model_validate(record)


async def list_general_reminders(
	store: RecordStore,
	attorney_id: str | None = None,
) -> list[GeneralReminder]:
	records = await store.list_reminders(attorney_id)
	reminders = [GeneralReminder.model_validate(r) for r in records]
	return sorted(reminders, key=lambda r: r.date)


async def add_general_reminder(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	data: GeneralReminderCreate,
) -> GeneralReminder:
	reminder = GeneralReminder(id=new_id("GR"), is_completed=False, **data.model_dump())
	await store.add_reminder(to_record(reminder))
	logger.info(f"Added general reminder for {data.attorney_name}")

	await events.audit(actor, "ADD_REMINDER", f'Added personal reminder "{data.text}"')
	await events.invalidate(View.PORTAL)
	return reminder


async def toggle_general_reminder(
	store: RecordStore,
	events: EventDispatcher,
	actor: str,
	reminder_id: str,
) -> GeneralReminder:
	reminder = await get_general_reminder(store, reminder_id)
	await store.update_reminder(reminder_id, {"is_completed": not reminder.is_completed})

	await events.audit(actor, "TOGGLE_REMINDER", f"Toggled personal reminder {reminder_id}")
	await events.invalidate(View.PORTAL)
	return await get_general_reminder(store, reminder_id)
