# (c) Copyright Datacraft, 2026
"""Shared FastAPI dependencies.

Identity is asserted by the fronting proxy through request headers; this
service only reads it.
"""
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from registrar.core.config import Settings, get_settings
from registrar.core.features.attorneys.service import get_attorney
from registrar.core.features.audit import EventDispatcher, get_dispatcher
from registrar.core.features.caseload.partition import Viewer
from registrar.core.store import RecordStore, get_record_store

ANONYMOUS = "system"


def get_store() -> RecordStore:
	return get_record_store()


def get_events() -> EventDispatcher:
	return get_dispatcher()


def get_actor(
	request: Request,
	settings: Annotated[Settings, Depends(get_settings)],
) -> str:
	"""Display name of the acting user, used in audit events."""
	return request.headers.get(settings.remote_user_header) or ANONYMOUS


def get_attorney_id(
	request: Request,
	settings: Annotated[Settings, Depends(get_settings)],
) -> str:
	attorney_id = request.headers.get(settings.remote_attorney_header)
	if not attorney_id:
		raise HTTPException(
			status_code=status.HTTP_401_UNAUTHORIZED,
			detail=f"Missing {settings.remote_attorney_header} header",
		)
	return attorney_id


async def get_viewer(
	attorney_id: Annotated[str, Depends(get_attorney_id)],
	store: Annotated[RecordStore, Depends(get_store)],
) -> Viewer:
	return Viewer.from_attorney(await get_attorney(store, attorney_id))


Store = Annotated[RecordStore, Depends(get_store)]
Events = Annotated[EventDispatcher, Depends(get_events)]
Actor = Annotated[str, Depends(get_actor)]
AttorneyId = Annotated[str, Depends(get_attorney_id)]
CurrentViewer = Annotated[Viewer, Depends(get_viewer)]
AppSettings = Annotated[Settings, Depends(get_settings)]
