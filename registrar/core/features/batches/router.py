# (c) Copyright Datacraft, 2026
"""
API router for multi-file custody operations.
"""
from fastapi import APIRouter

from registrar.core.dependencies import Actor, Events, Store

from . import schema, service

router = APIRouter(prefix="/batches", tags=["batches"])


@router.post("/move")
async def batch_move(
	data: schema.BatchMoveRequest,
	store: Store,
	events: Events,
	actor: Actor,
) -> schema.BatchResult:
	"""Move many files to one destination."""
	return await service.batch_move(store, events, actor, data)


@router.post("/pickup")
async def batch_pickup(
	data: schema.BatchPickupRequest,
	store: Store,
	events: Events,
	actor: Actor,
) -> schema.BatchPickupResult:
	"""Return files to the Registry; the acting user is recorded as receiver."""
	return await service.batch_pickup(store, events, actor, data.file_numbers, actor)
