# (c) Copyright Datacraft, 2026
from fastapi import APIRouter, status

from registrar.core.dependencies import Actor, Events, Store

from . import schema, service

router = APIRouter(
	prefix="/attorneys",
	tags=["attorneys"],
)


@router.get("")
async def list_attorneys(store: Store) -> list[schema.Attorney]:
	return await service.list_attorneys(store)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_attorney(
	data: schema.AttorneyCreate,
	store: Store,
	events: Events,
	actor: Actor,
) -> schema.Attorney:
	return await service.create_attorney(store, events, actor, data)


@router.get("/{attorney_id}")
async def get_attorney(attorney_id: str, store: Store) -> schema.Attorney:
	return await service.get_attorney(store, attorney_id)


@router.patch("/{attorney_id}")
async def update_attorney(
	attorney_id: str,
	data: schema.AttorneyUpdate,
	store: Store,
	events: Events,
	actor: Actor,
) -> schema.Attorney:
	"""Update an attorney. Renames are propagated to every case file."""
	return await service.update_attorney(store, events, actor, attorney_id, data)
