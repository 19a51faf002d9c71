# (c) Copyright Datacraft, 2026
"""Case file Pydantic schemas.

A case file owns its sub-records by value: movements, attached
correspondence, reminders, milestones, pending requests, drafts,
instructions and attachments.
"""
from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from registrar.core.exceptions import ValidationFailed
from registrar.core.types import CorrespondenceType, FileStatus
from registrar.core.utils.tz import UtcDatetime

ModelT = TypeVar("ModelT", bound=BaseModel)


class Movement(BaseModel):
	"""One custody ledger entry."""
	id: str
	date: UtcDatetime
	moved_to: str
	status: str = ""
	received_at: UtcDatetime | None = None
	received_by: str | None = None


class Letter(BaseModel):
	"""Correspondence item, either unassigned or attached to one file."""
	id: str
	date: UtcDatetime
	type: CorrespondenceType
	subject: str
	recipient: str
	document_no: str = ""
	remarks: str = ""
	suit_number: str | None = None
	date_on_letter: UtcDatetime | None = None
	hearing_date: UtcDatetime | None = None
	signed_by: str | None = None
	process_type: str | None = None
	service_address: str | None = None
	scan_url: str | None = None
	file_number: str | None = None


class CaseReminder(BaseModel):
	id: str
	text: str
	date: UtcDatetime
	is_completed: bool = False


class FileRequest(BaseModel):
	"""A practitioner waiting for the physical file."""
	id: str
	requester_id: str
	requester_name: str
	requested_at: UtcDatetime


class Milestone(BaseModel):
	id: str
	title: str
	is_completed: bool = False


class InternalDraft(BaseModel):
	model_config = ConfigDict(extra="allow")

	id: str
	title: str = ""
	type: str = ""
	content: str = ""
	date: UtcDatetime | None = None


class InternalInstruction(BaseModel):
	id: str
	text: str = ""
	from_: str = Field(default="", alias="from")
	to: str = ""
	date: UtcDatetime | None = None

	model_config = ConfigDict(extra="allow", populate_by_name=True)


class Attachment(BaseModel):
	model_config = ConfigDict(extra="allow")

	id: str
	name: str = ""
	path: str = ""
	type: str = ""
	size: int = 0
	uploaded_by: str = ""
	uploaded_at: UtcDatetime | None = None


DEFAULT_MILESTONES = (
	("m1", "Pleadings"),
	("m2", "Discovery / Pre-Trial"),
	("m3", "Trial"),
	("m4", "Judgment / Execution"),
)


def default_milestones() -> list[Milestone]:
	return [Milestone(id=mid, title=title) for mid, title in DEFAULT_MILESTONES]


class CaseFile(BaseModel):
	id: str
	file_number: str
	suit_number: str = ""
	category: str = ""
	group: str | None = None
	subject: str = ""
	date_created: UtcDatetime
	reportable_date: UtcDatetime
	last_activity_at: UtcDatetime | None = None
	viewed_by: dict[str, UtcDatetime] = {}
	pinned_by: dict[str, bool] = {}
	assigned_to: str | None = None
	co_assignees: list[str] = []
	status: FileStatus = FileStatus.ACTIVE
	completed_at: UtcDatetime | None = None
	is_judgment_debt: bool = False
	amount_ghc: float = 0
	amount_usd: float = 0

	letters: list[Letter] = []
	movements: list[Movement] = []
	reminders: list[CaseReminder] = []
	requests: list[FileRequest] = []
	milestones: list[Milestone] = Field(default_factory=default_milestones)
	internal_drafts: list[InternalDraft] = []
	internal_instructions: list[InternalInstruction] = []
	attachments: list[Attachment] = []

	@field_validator("milestones", mode="before")
	@classmethod
	def _template_when_missing(cls, value):
		if value is None:
			return default_milestones()
		return value

	@field_validator(
		"letters", "movements", "reminders", "requests", "co_assignees",
		"internal_drafts", "internal_instructions", "attachments",
		mode="before",
	)
	@classmethod
	def _empty_when_missing(cls, value):
		return [] if value is None else value

	@property
	def is_completed(self) -> bool:
		return self.status == FileStatus.COMPLETED

	def is_pinned_by(self, attorney_id: str | None) -> bool:
		return bool(attorney_id) and self.pinned_by.get(attorney_id, False)

	def find_letter(self, letter_id: str) -> Letter | None:
		for letter in self.letters:
			if letter.id == letter_id:
				return letter
		return None


class CaseFileCreate(BaseModel):
	"""Schema for opening a new case file."""
	file_number: str
	suit_number: str = ""
	category: str
	group: str | None = None
	subject: str
	date_created: datetime
	assigned_to: str | None = None
	co_assignees: list[str] = []
	is_judgment_debt: bool = False
	amount_ghc: float = 0
	amount_usd: float = 0


class CaseFileUpdate(BaseModel):
	"""Partial update; only fields that are set are merged."""
	file_number: str | None = None
	suit_number: str | None = None
	category: str | None = None
	group: str | None = None
	subject: str | None = None
	date_created: datetime | None = None
	assigned_to: str | None = None
	co_assignees: list[str] | None = None
	is_judgment_debt: bool | None = None
	amount_ghc: float | None = None
	amount_usd: float | None = None
	treat_as_new: bool = False


class StatusChange(BaseModel):
	status: FileStatus


class FileRequestCreate(BaseModel):
	requester_id: str
	requester_name: str = Field(min_length=1)


class CaseFileListResponse(BaseModel):
	items: list[CaseFile]
	total: int


def to_record(value: Any) -> Any:
	"""Dump models (also inside lists and dicts) to plain store values."""
	if isinstance(value, BaseModel):
		return value.model_dump(by_alias=True)
	if isinstance(value, list):
		return [to_record(v) for v in value]
	if isinstance(value, dict):
		return {k: to_record(v) for k, v in value.items()}
	return value


def merge_validated(model: type[ModelT], current: BaseModel, changes: dict[str, Any]) -> ModelT:
	"""Return ``current`` with ``changes`` merged in, checked against ``model``.

	Raises ``ValidationFailed`` so a bad patch (e.g. ``null`` for a required
	field) is refused before anything reaches the store.
	"""
	try:
		return model.model_validate({**to_record(current), **to_record(changes)})
	except ValidationError as e:
		error = e.errors()[0]
		field = ".".join(str(part) for part in error["loc"])
		raise ValidationFailed(f"Invalid value for {field}: {error['msg']}") from e
