# (c) Copyright Datacraft, 2026
"""Rewrite every reference to an attorney's old display name.

Files refer to attorneys by name, so a rename has to touch leads,
co-assignees, movements, instructions and pending requests.
"""
from typing import Any

from registrar.core.features.files.schema import CaseFile
from registrar.core.utils.names import names_match


def _rename(value: str | None, old_name: str, new_name: str) -> str | None:
	return new_name if names_match(value, old_name) else value


def rename_patch(file: CaseFile, old_name: str, new_name: str) -> dict[str, Any]:
	"""Fields of ``file`` that change under the rename; empty when none do."""
	patch: dict[str, Any] = {}

	if names_match(file.assigned_to, old_name):
		patch["assigned_to"] = new_name

	co_assignees = [_rename(n, old_name, new_name) for n in file.co_assignees]
	if co_assignees != file.co_assignees:
		patch["co_assignees"] = co_assignees

	movements = [
		m.model_copy(update={
			"moved_to": _rename(m.moved_to, old_name, new_name),
			"received_by": _rename(m.received_by, old_name, new_name),
		})
		for m in file.movements
	]
	if movements != file.movements:
		patch["movements"] = movements

	instructions = [
		i.model_copy(update={
			"from_": _rename(i.from_, old_name, new_name),
			"to": _rename(i.to, old_name, new_name),
		})
		for i in file.internal_instructions
	]
	if instructions != file.internal_instructions:
		patch["internal_instructions"] = instructions

	requests = [
		r.model_copy(update={"requester_name": _rename(r.requester_name, old_name, new_name)})
		for r in file.requests
	]
	if requests != file.requests:
		patch["requests"] = requests

	return patch
