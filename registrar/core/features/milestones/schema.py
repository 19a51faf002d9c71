# (c) Copyright Datacraft, 2026
from pydantic import BaseModel

from registrar.core.features.files.schema import Milestone


class MilestoneList(BaseModel):
	milestones: list[Milestone]


class Progress(BaseModel):
	file_number: str
	milestones: list[Milestone]
	percent: float
	next_milestone: Milestone | None = None
