# (c) Copyright Datacraft, 2026
from fastapi import APIRouter, status

from registrar.core.dependencies import Actor, CurrentViewer, Events, Store
from registrar.core.features.caseload.partition import partition
from registrar.core.features.files import service as files_service
from registrar.core.features.files.schema import CaseFile

from . import schema, service
from .upcoming import upcoming_reminders

router = APIRouter(
	prefix="/reminders",
	tags=["reminders"],
)


@router.get("/upcoming")
async def upcoming(store: Store, viewer: CurrentViewer) -> list[schema.UpcomingReminder]:
	"""Open deadlines and hearings on the viewer's files, plus personal reminders."""
	caseload = partition(await files_service.list_files(store), viewer)
	if viewer.is_executive:
		files = caseload.all
	else:
		files = [*caseload.active(), *caseload.oversight]
	general = await service.list_general_reminders(store, viewer.attorney_id)
	return upcoming_reminders(files, general)


@router.post("/files/{file_number}", status_code=status.HTTP_201_CREATED)
async def add_case_reminder(
	file_number: str,
	data: schema.ReminderCreate,
	store: Store,
	events: Events,
	actor: Actor,
) -> CaseFile:
	return await service.add_case_reminder(store, events, actor, file_number, data)


@router.post("/files/{file_number}/{reminder_id}/toggle")
async def toggle_case_reminder(
	file_number: str,
	reminder_id: str,
	store: Store,
	events: Events,
	actor: Actor,
) -> CaseFile:
	return await service.toggle_case_reminder(store, events, actor, file_number, reminder_id)


@router.get("/general")
async def list_general(
	store: Store,
	attorney_id: str | None = None,
) -> list[schema.GeneralReminder]:
	return await service.list_general_reminders(store, attorney_id)


@router.post("/general", status_code=status.HTTP_201_CREATED)
async def add_general(
	data: schema.GeneralReminderCreate,
	store: Store,
	events: Events,
	actor: Actor,
) -> schema.GeneralReminder:
	return await service.add_general_reminder(store, events, actor, data)


@router.post("/general/{reminder_id}/toggle")
async def toggle_general(
	reminder_id: str,
	store: Store,
	events: Events,
	actor: Actor,
) -> schema.GeneralReminder:
	return await service.toggle_general_reminder(store, events, actor, reminder_id)
