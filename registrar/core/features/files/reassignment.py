# (c) Copyright Datacraft, 2026
"""Side effects of handing a file to a new lead or group."""
from datetime import datetime
from typing import Any

from registrar.core.utils.ids import new_id
from registrar.core.utils.tz import utc_now

from .schema import CaseFile, Movement

UNASSIGNED = "Unassigned"
NEW_GROUP = "New Group"


def reassignment_triggered(file: CaseFile, patch: dict[str, Any]) -> bool:
	"""True when the patch names a different lead or group.

	Raw string comparison: a change in case alone counts as a change.
	"""
	new_lead = patch.get("assigned_to")
	new_group = patch.get("group")
	if new_lead and new_lead != file.assigned_to:
		return True
	if new_group and new_group != file.group:
		return True
	return False


def reassignment_movement(file: CaseFile, patch: dict[str, Any], now: datetime) -> Movement:
	lead = patch.get("assigned_to") or file.assigned_to or UNASSIGNED
	group = patch.get("group") or file.group or NEW_GROUP
	return Movement(
		id=new_id("M"),
		date=now,
		moved_to=lead,
		status=f"Reassigned to {group}",
	)


def apply_reassignment(
	file: CaseFile,
	patch: dict[str, Any],
	now: datetime | None = None,
) -> dict[str, Any]:
	"""Return the patch to store, including any reassignment side effects.

	On a trigger one movement is appended and pending requests raised by
	the new lead are dropped. Other fields pass through untouched.
	"""
	result = dict(patch)
	if not reassignment_triggered(file, patch):
		return result

	movement = reassignment_movement(file, patch, now or utc_now())
	result["movements"] = [*file.movements, movement]
	new_lead = patch.get("assigned_to") or ""
	result["requests"] = [
		r for r in file.requests if r.requester_name != new_lead
	]
	return result
