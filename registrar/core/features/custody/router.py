# (c) Copyright Datacraft, 2026
"""Custody ledger and registry desk endpoints."""
from fastapi import APIRouter

from registrar.core.dependencies import Actor, AppSettings, Events, Store
from registrar.core.features.files import service as files_service
from registrar.core.features.files.schema import CaseFile

from . import registry, schema, service

router = APIRouter(
	prefix="/custody",
	tags=["custody"],
)


@router.get("/in-transit")
async def in_transit(store: Store, settings: AppSettings) -> list[schema.InTransitGroup]:
	"""Unacknowledged files grouped by destination."""
	files = await files_service.list_files(store)
	return registry.in_transit_by_destination(files, settings.transit_overdue_days)


@router.get("/requests")
async def pending_requests(store: Store) -> list[schema.PendingRequest]:
	files = await files_service.list_files(store)
	return registry.pending_requests(files)


@router.get("/{file_number}")
async def get_custody(file_number: str, store: Store, settings: AppSettings) -> schema.Custody:
	return await service.get_custody(store, file_number, settings.transit_overdue_days)


@router.post("/{file_number}/movements")
async def move_file(
	file_number: str,
	data: schema.MoveFile,
	store: Store,
	events: Events,
	actor: Actor,
) -> CaseFile:
	return await service.move_file(store, events, actor, file_number, data)


@router.post("/{file_number}/movements/{movement_id}/receipt")
async def confirm_receipt(
	file_number: str,
	movement_id: str,
	data: schema.ConfirmReceipt,
	store: Store,
	events: Events,
	actor: Actor,
) -> CaseFile:
	return await service.confirm_receipt(
		store, events, actor, file_number, movement_id, data.received_by
	)


@router.patch("/{file_number}/movements/{movement_id}")
async def update_movement(
	file_number: str,
	movement_id: str,
	data: schema.MovementUpdate,
	store: Store,
	events: Events,
	actor: Actor,
) -> CaseFile:
	return await service.update_movement(store, events, actor, file_number, movement_id, data)


@router.delete("/{file_number}/movements/{movement_id}")
async def delete_movement(
	file_number: str,
	movement_id: str,
	store: Store,
	events: Events,
	actor: Actor,
) -> CaseFile:
	return await service.delete_movement(store, events, actor, file_number, movement_id)
