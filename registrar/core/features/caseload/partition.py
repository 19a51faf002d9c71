# (c) Copyright Datacraft, 2026
"""Caseload partitioning.

Splits a file set into the disjoint buckets a practitioner sees on the
portal dashboard. Every function here is synchronous and works on
already-fetched files.
"""
import math
from dataclasses import dataclass, field
from datetime import datetime

from registrar.core.features.custody.ledger import latest_movement, was_ever_held_by
from registrar.core.features.files.schema import CaseFile
from registrar.core.utils.names import names_match, normalize_name
from registrar.core.utils.tz import days_between, utc_now

STAGNATION_THRESHOLD_DAYS = 14
PAGE_SIZE = 25


@dataclass
class Viewer:
	full_name: str
	attorney_id: str | None = None
	group: str | None = None
	is_group_head: bool = False
	is_executive: bool = False

	@classmethod
	def from_attorney(cls, attorney) -> "Viewer":
		return cls(
			full_name=attorney.full_name,
			attorney_id=attorney.id,
			group=attorney.group,
			is_group_head=attorney.is_group_head,
			is_executive=attorney.is_sg,
		)


@dataclass
class Caseload:
	pinned: list[CaseFile] = field(default_factory=list)
	primary: list[CaseFile] = field(default_factory=list)
	collaborative: list[CaseFile] = field(default_factory=list)
	action: list[CaseFile] = field(default_factory=list)
	oversight: list[CaseFile] = field(default_factory=list)
	completed: list[CaseFile] = field(default_factory=list)
	historical: list[CaseFile] = field(default_factory=list)
	# only filled for executives
	all: list[CaseFile] = field(default_factory=list)

	def active(self) -> list[CaseFile]:
		"""Files the viewer is working on, in bucket priority order."""
		return [*self.pinned, *self.primary, *self.collaborative, *self.action]


def matches_search(file: CaseFile, term: str | None) -> bool:
	term = (term or "").strip().lower()
	if not term:
		return True
	haystack = [
		file.file_number,
		file.subject,
		file.category,
		file.assigned_to or "",
		*file.co_assignees,
	]
	return any(term in value.lower() for value in haystack)


def _bucket_for(file: CaseFile, viewer: Viewer) -> str | None:
	is_lead = names_match(viewer.full_name, file.assigned_to)
	is_co_assignee = any(names_match(viewer.full_name, name) for name in file.co_assignees)
	latest = latest_movement(file.movements)
	is_at_my_desk = latest is not None and names_match(viewer.full_name, latest.moved_to)
	my_group = normalize_name(viewer.group)
	can_oversee = (
		viewer.is_group_head
		and bool(my_group)
		and normalize_name(file.group) == my_group
	)

	if not (is_lead or is_co_assignee or is_at_my_desk or can_oversee):
		if was_ever_held_by(file.movements, viewer.full_name):
			return "historical"
		return None

	if file.is_completed:
		return "completed"
	if file.is_pinned_by(viewer.attorney_id):
		return "pinned"
	if is_lead:
		return "primary"
	if is_co_assignee:
		return "collaborative"
	if is_at_my_desk:
		return "action"
	return "oversight"


def partition(
	files: list[CaseFile],
	viewer: Viewer,
	search: str | None = None,
) -> Caseload:
	"""Place each visible file in exactly one bucket.

	Priority, first match wins: completed, pinned, primary (lead),
	collaborative (co-assignee), action (currently holds the file),
	oversight (group head of the file's group). Files the viewer only held
	in the past are listed as historical. Executives get one flat ``all``
	list plus ``completed`` instead of role buckets.
	"""
	caseload = Caseload()
	for file in files:
		if not matches_search(file, search):
			continue
		if viewer.is_executive:
			caseload.all.append(file)
			if file.is_completed:
				caseload.completed.append(file)
			continue
		bucket = _bucket_for(file, viewer)
		if bucket is not None:
			getattr(caseload, bucket).append(file)
	return caseload


def last_activity(file: CaseFile) -> datetime:
	return file.last_activity_at or file.reportable_date or file.date_created


def stagnant_files(
	caseload: Caseload,
	viewer: Viewer,
	threshold_days: int = STAGNATION_THRESHOLD_DAYS,
	now: datetime | None = None,
) -> list[CaseFile]:
	source = caseload.all if viewer.is_executive else caseload.oversight
	now = now or utc_now()
	return [
		file for file in source
		if not file.is_completed
		and days_between(last_activity(file), now) >= threshold_days
	]


def paginate(
	files: list[CaseFile],
	page: int = 1,
	page_size: int = PAGE_SIZE,
) -> tuple[list[CaseFile], int]:
	"""Return one page (1-based) and the total page count."""
	page = max(page, 1)
	start = (page - 1) * page_size
	total_pages = math.ceil(len(files) / page_size)
	return files[start:start + page_size], total_pages
