# (c) Copyright Datacraft, 2026
"""
Batch move and batch pickup tests.
"""
from unittest.mock import AsyncMock

import pytest

from registrar.core.exceptions import StoreUnavailable, ValidationFailed
from registrar.core.features.batches import service
from registrar.core.features.batches.schema import BatchMoveRequest
from registrar.core.features.custody.ledger import resolve_custody
from registrar.core.features.files.service import get_file


async def test_batch_move_shared_movement_distinct_ids(store, events, make_file, make_request, now):
	await make_file("F1", requests=[make_request("jane mensah")])
	await make_file("F2")

	result = await service.batch_move(
		store,
		events,
		"Clerk",
		BatchMoveRequest(
			file_numbers=["F1", "F2", "MISSING"],
			date=now,
			moved_to="Jane Mensah",
			status="For review",
			group="Land",
			assigned_to="Jane Mensah",
		),
	)

	assert result.processed == ["F1", "F2"]
	assert result.skipped == ["MISSING"]

	f1 = await get_file(store, "F1")
	f2 = await get_file(store, "F2")
	for file in (f1, f2):
		assert len(file.movements) == 1
		assert file.movements[0].moved_to == "Jane Mensah"
		assert file.movements[0].date == now
		assert file.movements[0].status == "For review"
		assert file.group == "Land"
		assert file.assigned_to == "Jane Mensah"
	assert f1.movements[0].id != f2.movements[0].id
	assert f1.requests == []
	assert events.action_codes() == ["BATCH_MOVE_FILES"]


async def test_batch_move_leaves_group_when_not_given(store, events, make_file, now):
	await make_file("F1", group="Civil", assigned_to="A")

	await service.batch_move(
		store,
		events,
		"Clerk",
		BatchMoveRequest(file_numbers=["F1"], date=now, moved_to="B", status="x"),
	)

	file = await get_file(store, "F1")
	assert file.group == "Civil"
	assert file.assigned_to == "A"


async def test_batch_move_is_all_or_nothing(store, events, make_file, now, monkeypatch):
	await make_file("F1")
	await make_file("F2")
	monkeypatch.setattr(store, "batch_write", AsyncMock(side_effect=StoreUnavailable("down")))

	with pytest.raises(StoreUnavailable):
		await service.batch_move(
			store,
			events,
			"Clerk",
			BatchMoveRequest(file_numbers=["F1", "F2"], date=now, moved_to="B", status="x"),
		)

	assert (await get_file(store, "F1")).movements == []
	assert (await get_file(store, "F2")).movements == []
	assert events.audits == []


async def test_batch_pickup_summary(store, events, make_file, make_attorney, make_movement, make_request):
	jane = await make_attorney("Jane Mensah", phone_number="+233244000111")
	for number in ("F1", "F2", "F3"):
		await make_file(
			number,
			movements=[make_movement("Jane Mensah", days_ago=2, received=True)],
			requests=[make_request("Kofi Boateng")],
		)
	await make_file("F4", movements=[make_movement("Registry", days_ago=1, received=True)])

	result = await service.batch_pickup(
		store, events, "Clerk", ["F1", "F2", "F3", "F4"], "Registry Clerk"
	)

	assert len(result.summary) == 1
	pickup = result.summary[0]
	assert pickup.custodian == "Jane Mensah"
	assert pickup.attorney_id == jane["id"]
	assert pickup.phone_number == "+233244000111"
	assert sorted(f.file_number for f in pickup.files) == ["F1", "F2", "F3"]

	for number in ("F1", "F2", "F3", "F4"):
		file = await get_file(store, number)
		custody = resolve_custody(file.movements)
		assert custody.custodian == "Registry"
		assert custody.in_transit is False
		assert custody.latest.received_by == "Registry Clerk"
		assert custody.latest.received_at is not None
		assert file.requests == []

	assert len(events.notifications) == 1
	assert events.notifications[0].custodian == "Jane Mensah"
	assert events.action_codes() == ["BATCH_PICKUP"]


async def test_batch_pickup_groups_name_variants(store, events, make_file, make_movement):
	await make_file("F1", movements=[make_movement("Kofi Boateng", days_ago=2)])
	await make_file("F2", movements=[make_movement(" kofi boateng", days_ago=2)])
	await make_file("F3")

	result = await service.batch_pickup(store, events, "Clerk", ["F1", "F2", "F3", "NOPE"], "Clerk")

	assert len(result.summary) == 1
	assert result.summary[0].attorney_id is None
	assert len(result.summary[0].files) == 2
	assert result.skipped == ["NOPE"]


async def test_batch_requires_file_numbers(store, events):
	with pytest.raises(ValidationFailed):
		await service.batch_pickup(store, events, "Clerk", ["  "], "Clerk")
