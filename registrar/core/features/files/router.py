# (c) Copyright Datacraft, 2026
"""Case file API endpoints."""
from fastapi import APIRouter, status

from registrar.core.dependencies import Actor, AttorneyId, Events, Store

from . import schema, service

router = APIRouter(
	prefix="/files",
	tags=["files"],
)


@router.get("")
async def list_files(store: Store) -> schema.CaseFileListResponse:
	"""All case files, newest first."""
	files = await service.list_files(store)
	return schema.CaseFileListResponse(items=files, total=len(files))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_file(
	data: schema.CaseFileCreate,
	store: Store,
	events: Events,
	actor: Actor,
) -> schema.CaseFile:
	return await service.create_file(store, events, actor, data)


@router.get("/by-number/{file_number}")
async def get_file_by_number(file_number: str, store: Store) -> schema.CaseFile:
	return await service.get_file(store, file_number)


@router.get("/{file_id}")
async def get_file(file_id: str, store: Store) -> schema.CaseFile:
	return await service.get_file_by_id(store, file_id)


@router.patch("/{file_id}")
async def update_file(
	file_id: str,
	data: schema.CaseFileUpdate,
	store: Store,
	events: Events,
	actor: Actor,
) -> schema.CaseFile:
	"""Edit file details; a new lead or group records a reassignment movement."""
	return await service.update_file(store, events, actor, file_id, data)


@router.put("/{file_id}/status")
async def set_status(
	file_id: str,
	data: schema.StatusChange,
	store: Store,
	events: Events,
	actor: Actor,
) -> schema.CaseFile:
	return await service.set_status(store, events, actor, file_id, data.status)


@router.post("/{file_id}/pin")
async def toggle_pin(
	file_id: str,
	store: Store,
	attorney_id: AttorneyId,
) -> schema.CaseFile:
	return await service.toggle_pin(store, file_id, attorney_id)


@router.post("/{file_id}/viewed", status_code=status.HTTP_204_NO_CONTENT)
async def mark_viewed(
	file_id: str,
	store: Store,
	attorney_id: AttorneyId,
) -> None:
	await service.mark_viewed(store, file_id, attorney_id)


@router.delete("/{file_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_file(
	file_id: str,
	store: Store,
	events: Events,
	actor: Actor,
) -> None:
	await service.delete_file(store, events, actor, file_id)


@router.post("/by-number/{file_number}/requests", status_code=status.HTTP_201_CREATED)
async def request_file(
	file_number: str,
	data: schema.FileRequestCreate,
	store: Store,
	events: Events,
	actor: Actor,
) -> schema.CaseFile:
	return await service.request_file(store, events, actor, file_number, data)


@router.delete("/by-number/{file_number}/requests/{request_id}")
async def cancel_request(
	file_number: str,
	request_id: str,
	store: Store,
	events: Events,
	actor: Actor,
) -> schema.CaseFile:
	return await service.cancel_request(store, events, actor, file_number, request_id)
