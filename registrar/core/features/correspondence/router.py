# (c) Copyright Datacraft, 2026
"""Correspondence intake and transfer endpoints."""
from fastapi import APIRouter, status

from registrar.core.dependencies import Actor, Events, Store
from registrar.core.features.files.schema import CaseFile, Letter
from registrar.core.types import CorrespondenceType

from . import schema, service

router = APIRouter(
	prefix="/correspondence",
	tags=["correspondence"],
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_correspondence(
	data: schema.CorrespondenceCreate,
	store: Store,
	events: Events,
	actor: Actor,
) -> Letter:
	return await service.add_correspondence(store, events, actor, data)


@router.get("/unassigned")
async def list_unassigned(
	store: Store,
	type: CorrespondenceType | None = None,
) -> list[Letter]:
	return await service.list_unassigned(store, type)


@router.get("/unassigned/{item_id}")
async def get_unassigned(item_id: str, store: Store) -> Letter:
	return await service.get_unassigned(store, item_id)


@router.patch("/unassigned/{item_id}")
async def edit_unassigned(
	item_id: str,
	data: schema.LetterUpdate,
	store: Store,
	events: Events,
	actor: Actor,
) -> Letter:
	return await service.edit_unassigned(store, events, actor, item_id, data)


@router.delete("/unassigned/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_unassigned(
	item_id: str,
	store: Store,
	events: Events,
	actor: Actor,
) -> None:
	await service.delete_unassigned(store, events, actor, item_id)


@router.post("/unassigned/{item_id}/attach")
async def attach(
	item_id: str,
	data: schema.AttachRequest,
	store: Store,
	events: Events,
	actor: Actor,
) -> CaseFile:
	return await service.attach(store, events, actor, item_id, data.file_number)


@router.post("/files/{file_number}/{item_id}/detach")
async def detach(
	file_number: str,
	item_id: str,
	store: Store,
	events: Events,
	actor: Actor,
) -> Letter:
	return await service.detach(store, events, actor, file_number, item_id)


@router.patch("/files/{file_number}/{item_id}")
async def edit_attached(
	file_number: str,
	item_id: str,
	data: schema.LetterUpdate,
	store: Store,
	events: Events,
	actor: Actor,
) -> Letter:
	return await service.edit_attached(store, events, actor, file_number, item_id, data)


@router.delete("/files/{file_number}/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_attached(
	file_number: str,
	item_id: str,
	store: Store,
	events: Events,
	actor: Actor,
) -> None:
	await service.delete_attached(store, events, actor, file_number, item_id)
