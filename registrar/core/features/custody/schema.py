# (c) Copyright Datacraft, 2026
from datetime import datetime

from pydantic import BaseModel, Field

from registrar.core.features.files.schema import FileRequest, Movement


class MoveFile(BaseModel):
	date: datetime
	moved_to: str = Field(min_length=1)
	status: str = Field(min_length=1)


class ConfirmReceipt(BaseModel):
	received_by: str = Field(min_length=1)


class MovementUpdate(BaseModel):
	date: datetime | None = None
	moved_to: str | None = None
	status: str | None = None
	received_at: datetime | None = None
	received_by: str | None = None


class Custody(BaseModel):
	"""Serialized view of a file's current custody."""
	file_number: str
	custodian: str
	at_registry: bool
	in_transit: bool
	transit_days: int
	overdue: bool
	latest: Movement | None = None


class InTransitGroup(BaseModel):
	destination: str
	files: list[Custody]


class PendingRequest(BaseModel):
	file_number: str
	subject: str
	request: FileRequest
