# (c) Copyright Datacraft, 2026
"""
Memory record store tests.
"""
import pytest

from registrar.core.exceptions import Conflict, NotFound
from registrar.core.store import AppendToArray, DeleteUnassignedItem, SetUnassignedItem, UpdateFile
from registrar.core.store.base import apply_patch
from registrar.core.store.memory import MemoryRecordStore


@pytest.fixture
def memory_store() -> MemoryRecordStore:
	return MemoryRecordStore()


def test_apply_patch_dotted_key():
	record = {"pinned_by": {"a": True}, "subject": "Old"}

	patched = apply_patch(record, {"pinned_by.b": True, "subject": "New"})

	assert patched == {"pinned_by": {"a": True, "b": True}, "subject": "New"}
	assert record == {"pinned_by": {"a": True}, "subject": "Old"}


async def test_create_and_lookup(memory_store):
	file_id = await memory_store.create_file({"file_number": "F1", "date_created": "2026-01-01T00:00:00Z"})

	assert (await memory_store.get_file("F1"))["id"] == file_id
	assert (await memory_store.get_file_by_id(file_id))["file_number"] == "F1"
	assert await memory_store.get_file("F2") is None


async def test_duplicate_file_number(memory_store):
	await memory_store.create_file({"file_number": "F1"})

	with pytest.raises(Conflict):
		await memory_store.create_file({"file_number": "F1"})


async def test_list_files_newest_first(memory_store):
	await memory_store.create_file({"file_number": "OLD", "date_created": "2025-01-01T00:00:00Z"})
	await memory_store.create_file({"file_number": "NEW", "date_created": "2026-01-01T00:00:00Z"})

	assert [r["file_number"] for r in await memory_store.list_files()] == ["NEW", "OLD"]


async def test_returned_records_are_copies(memory_store):
	file_id = await memory_store.create_file({"file_number": "F1", "movements": []})

	record = await memory_store.get_file_by_id(file_id)
	record["movements"].append({"id": "M1"})

	assert (await memory_store.get_file_by_id(file_id))["movements"] == []


async def test_append_to_array_field(memory_store):
	file_id = await memory_store.create_file({"file_number": "F1"})

	await memory_store.append_to_array_field(file_id, "requests", {"id": "REQ-1"})

	assert (await memory_store.get_file_by_id(file_id))["requests"] == [{"id": "REQ-1"}]


async def test_writes_to_missing_file(memory_store):
	with pytest.raises(NotFound):
		await memory_store.update_file("missing", {"subject": "x"})
	with pytest.raises(NotFound):
		await memory_store.delete_file("missing")


async def test_batch_write_applies_all(memory_store):
	file_id = await memory_store.create_file({"file_number": "F1", "letters": []})
	await memory_store.set_unassigned_item("L1", {"subject": "Writ"})

	await memory_store.batch_write([
		UpdateFile(file_id, {"letters": [{"id": "L1", "subject": "Writ"}]}),
		DeleteUnassignedItem("L1"),
		AppendToArray(file_id, "requests", {"id": "REQ-1"}),
		SetUnassignedItem("L2", {"subject": "Memo"}),
	])

	record = await memory_store.get_file_by_id(file_id)
	assert record["letters"] == [{"id": "L1", "subject": "Writ"}]
	assert record["requests"] == [{"id": "REQ-1"}]
	assert await memory_store.get_unassigned_item("L1") is None
	assert (await memory_store.get_unassigned_item("L2"))["id"] == "L2"


async def test_batch_write_is_all_or_nothing(memory_store):
	file_id = await memory_store.create_file({"file_number": "F1", "subject": "Old"})
	await memory_store.set_unassigned_item("L1", {"subject": "Writ"})

	with pytest.raises(NotFound):
		await memory_store.batch_write([
			UpdateFile(file_id, {"subject": "New"}),
			DeleteUnassignedItem("L1"),
			UpdateFile("missing", {"subject": "x"}),
		])

	assert (await memory_store.get_file_by_id(file_id))["subject"] == "Old"
	assert await memory_store.get_unassigned_item("L1") is not None


async def test_reminders_and_attorneys(memory_store):
	reminder_id = await memory_store.add_reminder({"text": "Call", "attorney_id": "a"})
	await memory_store.add_reminder({"text": "Other", "attorney_id": "b"})
	await memory_store.update_reminder(reminder_id, {"is_completed": True})

	assert [r["id"] for r in await memory_store.list_reminders("a")] == [reminder_id]
	assert (await memory_store.get_reminder(reminder_id))["is_completed"] is True
	assert len(await memory_store.list_reminders()) == 2

	await memory_store.save_attorney("att-1", {"full_name": "Jane"})
	assert (await memory_store.get_attorney("att-1"))["full_name"] == "Jane"
	assert len(await memory_store.list_attorneys()) == 1


async def test_update_cannot_reuse_file_number(memory_store):
	first = await memory_store.create_file({"file_number": "A1"})
	await memory_store.create_file({"file_number": "B1"})

	with pytest.raises(Conflict):
		await memory_store.update_file(first, {"file_number": "B1"})

	assert (await memory_store.get_file_by_id(first))["file_number"] == "A1"


async def test_batch_cannot_reuse_file_number(memory_store):
	first = await memory_store.create_file({"file_number": "A1", "subject": "Old"})
	await memory_store.create_file({"file_number": "B1"})

	with pytest.raises(Conflict):
		await memory_store.batch_write([
			UpdateFile(first, {"subject": "New"}),
			UpdateFile(first, {"file_number": "B1"}),
		])

	assert (await memory_store.get_file_by_id(first))["subject"] == "Old"


async def test_swapping_numbers_inside_one_batch(memory_store):
	first = await memory_store.create_file({"file_number": "A1"})
	second = await memory_store.create_file({"file_number": "B1"})

	await memory_store.batch_write([
		UpdateFile(first, {"file_number": "TMP"}),
		UpdateFile(second, {"file_number": "A1"}),
		UpdateFile(first, {"file_number": "B1"}),
	])

	assert (await memory_store.get_file("A1"))["id"] == second
	assert (await memory_store.get_file("B1"))["id"] == first
