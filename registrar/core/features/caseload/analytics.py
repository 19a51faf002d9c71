# (c) Copyright Datacraft, 2026
"""Workload counts for the executive and group-head dashboards."""
from pydantic import BaseModel, computed_field

from registrar.core.features.files.schema import CaseFile

from .partition import Caseload

SHARED_GROUP = "General / Shared"


class WorkloadEntry(BaseModel):
	name: str
	active: int = 0
	completed: int = 0

	@computed_field
	@property
	def total(self) -> int:
		return self.active + self.completed


def _count(names_per_file: list[tuple[list[str], CaseFile]]) -> list[WorkloadEntry]:
	counts: dict[str, WorkloadEntry] = {}
	for names, file in names_per_file:
		for name in names:
			entry = counts.setdefault(name, WorkloadEntry(name=name))
			if file.is_completed:
				entry.completed += 1
			else:
				entry.active += 1
	# stable sort keeps first-seen order among equal active counts
	return sorted(counts.values(), key=lambda e: e.active, reverse=True)


def executive_workload(files: list[CaseFile]) -> list[WorkloadEntry]:
	return _count([([file.group or SHARED_GROUP], file) for file in files])


def group_workload(caseload: Caseload) -> list[WorkloadEntry]:
	"""Per-practitioner counts over a group head's oversight and completed files."""
	rows = []
	for file in [*caseload.oversight, *caseload.completed]:
		names = [n for n in [file.assigned_to, *file.co_assignees] if n]
		rows.append((names, file))
	return _count(rows)
