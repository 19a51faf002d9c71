# (c) Copyright Datacraft, 2026
from fastapi import APIRouter

from registrar.core.dependencies import Actor, Events, Store

from . import schema, service

router = APIRouter(
	prefix="/milestones",
	tags=["milestones"],
)


@router.get("/{file_number}")
async def get_progress(file_number: str, store: Store) -> schema.Progress:
	return await service.get_progress(store, file_number)


@router.put("/{file_number}")
async def set_milestones(
	file_number: str,
	data: schema.MilestoneList,
	store: Store,
	events: Events,
	actor: Actor,
) -> schema.Progress:
	"""Replace the file's milestone checklist."""
	return await service.set_milestones(store, events, actor, file_number, data.milestones)
