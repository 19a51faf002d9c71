# (c) Copyright Datacraft, 2026
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from registrar.core.utils.tz import UtcDatetime


class ReminderCreate(BaseModel):
	text: str = Field(min_length=1)
	date: datetime


class GeneralReminderCreate(ReminderCreate):
	attorney_id: str
	attorney_name: str


class GeneralReminder(BaseModel):
	"""Personal reminder not tied to any case file."""
	id: str
	text: str
	date: UtcDatetime
	is_completed: bool = False
	attorney_id: str
	attorney_name: str = ""


class EventKind(str, Enum):
	DEADLINE = "deadline"
	COURT = "court"


class UpcomingReminder(BaseModel):
	id: str
	date: UtcDatetime
	text: str
	kind: EventKind
	file_number: str | None = None
	is_general: bool = False
