# (c) Copyright Datacraft, 2026
"""
Attorney registry and rename propagation tests.
"""
import re
from unittest.mock import AsyncMock

import pytest

from registrar.core.exceptions import NotFound, StoreUnavailable
from registrar.core.features.attorneys import service
from registrar.core.features.attorneys.schema import AttorneyCreate, AttorneyUpdate
from registrar.core.features.caseload.partition import Viewer
from registrar.core.features.files.schema import InternalInstruction
from registrar.core.features.files.service import get_file


async def test_create_attorney_generates_access_id(store, events):
	attorney = await service.create_attorney(
		store, events, "Admin", AttorneyCreate(full_name="Jane Mensah", group="Civil")
	)

	assert re.fullmatch(r"AT-[A-Z0-9]{5}", attorney.access_id)
	assert (await service.get_attorney(store, attorney.id)).model_dump() == attorney.model_dump()
	assert events.action_codes() == ["CREATE_ATTORNEY"]


async def test_get_unknown_attorney(store):
	with pytest.raises(NotFound):
		await service.get_attorney(store, "missing")


async def test_update_without_rename_leaves_files(store, events, make_file):
	attorney = await service.create_attorney(
		store, events, "Admin", AttorneyCreate(full_name="Jane Mensah")
	)
	file = await make_file(assigned_to="Jane Mensah")

	updated = await service.update_attorney(
		store, events, "Admin", attorney.id, AttorneyUpdate(phone_number="+233201234567")
	)

	assert updated.phone_number == "+233201234567"
	assert "RENAME_ATTORNEY" not in events.action_codes()
	assert (await get_file(store, file.file_number)).assigned_to == "Jane Mensah"


async def test_rename_propagates_everywhere(store, events, make_file, make_movement, make_request):
	attorney = await service.create_attorney(
		store, events, "Admin", AttorneyCreate(full_name="Jane Mensah")
	)
	await make_file(
		"F1",
		assigned_to="jane mensah ",
		co_assignees=["Kofi", "JANE MENSAH"],
		movements=[make_movement("Jane Mensah", received=True)],
		requests=[make_request("Jane Mensah")],
		internal_instructions=[
			InternalInstruction(id="I1", text="Draft reply", **{"from": "Jane Mensah"}, to="Kofi"),
		],
	)
	untouched = await make_file("F2", assigned_to="Kofi")

	await service.update_attorney(
		store, events, "Admin", attorney.id, AttorneyUpdate(full_name="Jane Mensah-Owusu")
	)

	f1 = await get_file(store, "F1")
	assert f1.assigned_to == "Jane Mensah-Owusu"
	assert f1.co_assignees == ["Kofi", "Jane Mensah-Owusu"]
	assert f1.movements[0].moved_to == "Jane Mensah-Owusu"
	assert f1.movements[0].received_by == "Jane Mensah-Owusu"
	assert f1.requests[0].requester_name == "Jane Mensah-Owusu"
	assert f1.internal_instructions[0].from_ == "Jane Mensah-Owusu"
	assert f1.internal_instructions[0].to == "Kofi"

	f2 = await get_file(store, "F2")
	assert f2.last_activity_at == untouched.last_activity_at
	assert "RENAME_ATTORNEY" in events.action_codes()


async def test_rename_not_propagated_when_attorney_save_fails(store, events, make_file, monkeypatch):
	attorney = await service.create_attorney(
		store, events, "Admin", AttorneyCreate(full_name="Jane Mensah")
	)
	await make_file("F1", assigned_to="Jane Mensah")
	monkeypatch.setattr(
		store, "save_attorney", AsyncMock(side_effect=StoreUnavailable("down"))
	)

	with pytest.raises(StoreUnavailable):
		await service.update_attorney(
			store, events, "Admin", attorney.id, AttorneyUpdate(full_name="Jane Mensah-Owusu")
		)

	assert (await get_file(store, "F1")).assigned_to == "Jane Mensah"
	assert "RENAME_ATTORNEY" not in events.action_codes()


async def test_propagate_name_change_reports_files(store, make_file):
	await make_file("F1", assigned_to="Ama")
	await make_file("F2", assigned_to="Kofi")

	result = await service.propagate_name_change(store, "Ama", "Ama Owusu")

	assert result.files_updated == ["F1"]


async def test_viewer_from_attorney(store, events):
	attorney = await service.create_attorney(
		store,
		events,
		"Admin",
		AttorneyCreate(full_name="Solicitor General", is_sg=True, group="Executive"),
	)

	viewer = Viewer.from_attorney(attorney)

	assert viewer.is_executive
	assert viewer.attorney_id == attorney.id
	assert viewer.full_name == "Solicitor General"
