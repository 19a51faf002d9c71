# (c) Copyright Datacraft, 2026
from registrar.core.features.files.schema import Milestone


def progress_percent(milestones: list[Milestone]) -> float:
	"""Share of completed milestones, 0 for an empty checklist.

	Order is not enforced; a later stage may be done before an earlier one.
	"""
	if not milestones:
		return 0
	done = sum(1 for m in milestones if m.is_completed)
	return done / len(milestones) * 100


def next_milestone(milestones: list[Milestone]) -> Milestone | None:
	for milestone in milestones:
		if not milestone.is_completed:
			return milestone
	return None
