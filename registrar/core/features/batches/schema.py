# (c) Copyright Datacraft, 2026
from datetime import datetime

from pydantic import BaseModel, Field


class BatchMoveRequest(BaseModel):
	file_numbers: list[str] = Field(min_length=1)
	date: datetime
	moved_to: str = Field(min_length=1)
	status: str = Field(min_length=1)
	group: str | None = None
	assigned_to: str | None = None


class BatchPickupRequest(BaseModel):
	file_numbers: list[str] = Field(min_length=1)


class BatchResult(BaseModel):
	"""Files touched by a batch; unknown file numbers are listed in ``skipped``."""
	processed: list[str] = []
	skipped: list[str] = []


class PickedUpFile(BaseModel):
	file_number: str
	subject: str


class CustodianPickup(BaseModel):
	"""Files collected from one custodian, for a single notification."""
	custodian: str
	attorney_id: str | None = None
	phone_number: str | None = None
	files: list[PickedUpFile] = []


class BatchPickupResult(BatchResult):
	summary: list[CustodianPickup] = []
