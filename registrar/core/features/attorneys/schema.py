# (c) Copyright Datacraft, 2026
from pydantic import BaseModel, Field


class Attorney(BaseModel):
	id: str
	full_name: str
	email: str | None = None
	phone_number: str = ""
	access_id: str
	rank: str | None = None
	group: str | None = None
	is_group_head: bool = False
	# Solicitor-General's office: cross-group executive view
	is_sg: bool = False
	bound_uid: str | None = None


class AttorneyCreate(BaseModel):
	full_name: str = Field(min_length=1)
	email: str | None = None
	phone_number: str = ""
	rank: str | None = None
	group: str | None = None
	is_group_head: bool = False
	is_sg: bool = False


class AttorneyUpdate(BaseModel):
	full_name: str | None = Field(default=None, min_length=1)
	email: str | None = None
	phone_number: str | None = None
	rank: str | None = None
	group: str | None = None
	is_group_head: bool | None = None
	is_sg: bool | None = None
	bound_uid: str | None = None


class RenameResult(BaseModel):
	old_name: str
	new_name: str
	files_updated: list[str] = []
