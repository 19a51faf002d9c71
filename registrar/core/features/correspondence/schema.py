# (c) Copyright Datacraft, 2026
from datetime import datetime

from pydantic import BaseModel, Field

from registrar.core.types import CorrespondenceType


class CorrespondenceCreate(BaseModel):
	date: datetime
	type: CorrespondenceType
	subject: str = Field(min_length=1)
	recipient: str = Field(min_length=1)
	document_no: str = ""
	remarks: str = ""
	suit_number: str | None = None
	date_on_letter: datetime | None = None
	hearing_date: datetime | None = None
	signed_by: str | None = None
	process_type: str | None = None
	service_address: str | None = None
	scan_url: str | None = None
	# attach straight to this file instead of the unassigned pool
	file_number: str | None = None


class LetterUpdate(BaseModel):
	date: datetime | None = None
	type: CorrespondenceType | None = None
	subject: str | None = None
	recipient: str | None = None
	document_no: str | None = None
	remarks: str | None = None
	suit_number: str | None = None
	date_on_letter: datetime | None = None
	hearing_date: datetime | None = None
	signed_by: str | None = None
	process_type: str | None = None
	service_address: str | None = None
	scan_url: str | None = None


class AttachRequest(BaseModel):
	file_number: str = Field(min_length=1)
