# (c) Copyright Datacraft, 2026
"""In-process record store for development, tests and single-node use."""

import asyncio
import copy
from typing import Any, Sequence

from uuid_extensions import uuid7str

from registrar.core.exceptions import Conflict, NotFound

from .base import (
	AppendToArray,
	DeleteUnassignedItem,
	Record,
	RecordStore,
	SetUnassignedItem,
	UpdateFile,
	WriteOp,
	append_value,
	apply_patch,
	created_sort_key,
)


class MemoryRecordStore(RecordStore):
	"""Dict-backed store.

	Records are deep-copied on the way in and out so callers never share
	state with the store. A single lock serialises writes, which makes
	each call (including ``batch_write``) atomic.
	"""

	def __init__(self):
		self._files: dict[str, Record] = {}
		self._unassigned: dict[str, Record] = {}
		self._reminders: dict[str, Record] = {}
		self._attorneys: dict[str, Record] = {}
		self._lock = asyncio.Lock()

	def _require_file(self, files: dict[str, Record], file_id: str) -> Record:
		record = files.get(file_id)
		if record is None:
			raise NotFound(f"File {file_id} not found.")
		return record

	def _check_unique_number(
		self,
		files: dict[str, Record],
		file_id: str | None,
		record: Record,
	) -> None:
		file_number = record.get("file_number")
		if any(
			other_id != file_id and other.get("file_number") == file_number
			for other_id, other in files.items()
		):
			raise Conflict(f"File number {file_number} already exists.")

	# Case files

	async def get_file(self, file_number: str) -> Record | None:
		for record in self._files.values():
			if record.get("file_number") == file_number:
				return copy.deepcopy(record)
		return None

	async def get_file_by_id(self, file_id: str) -> Record | None:
		record = self._files.get(file_id)
		return copy.deepcopy(record) if record is not None else None

	async def list_files(self) -> list[Record]:
		records = sorted(self._files.values(), key=created_sort_key, reverse=True)
		return copy.deepcopy(records)

	async def create_file(self, record: Record) -> str:
		async with self._lock:
			self._check_unique_number(self._files, None, record)
			file_id = record.get("id") or uuid7str()
			self._files[file_id] = {**copy.deepcopy(record), "id": file_id}
			return file_id

	async def update_file(self, file_id: str, patch: Record) -> None:
		async with self._lock:
			updated = apply_patch(self._require_file(self._files, file_id), patch)
			self._check_unique_number(self._files, file_id, updated)
			self._files[file_id] = updated

	async def append_to_array_field(self, file_id: str, field: str, value: Any) -> None:
		async with self._lock:
			record = self._require_file(self._files, file_id)
			self._files[file_id] = append_value(record, field, value)

	async def delete_file(self, file_id: str) -> None:
		async with self._lock:
			self._require_file(self._files, file_id)
			del self._files[file_id]

	async def batch_write(self, ops: Sequence[WriteOp]) -> None:
		async with self._lock:
			files = dict(self._files)
			unassigned = dict(self._unassigned)
			for op in ops:
				if isinstance(op, UpdateFile):
					updated = apply_patch(self._require_file(files, op.file_id), op.patch)
					self._check_unique_number(files, op.file_id, updated)
					files[op.file_id] = updated
				elif isinstance(op, AppendToArray):
					files[op.file_id] = append_value(
						self._require_file(files, op.file_id), op.field, op.value
					)
				elif isinstance(op, SetUnassignedItem):
					unassigned[op.item_id] = {**copy.deepcopy(op.record), "id": op.item_id}
				elif isinstance(op, DeleteUnassignedItem):
					if op.item_id not in unassigned:
						raise NotFound(f"Item {op.item_id} not found.")
					del unassigned[op.item_id]
				else:
					raise TypeError(f"Unsupported write op: {op!r}")
			self._files = files
			self._unassigned = unassigned

	# Unassigned correspondence

	async def get_unassigned_item(self, item_id: str) -> Record | None:
		record = self._unassigned.get(item_id)
		return copy.deepcopy(record) if record is not None else None

	async def list_unassigned_items(self) -> list[Record]:
		return copy.deepcopy(list(self._unassigned.values()))

	async def set_unassigned_item(self, item_id: str, record: Record) -> None:
		async with self._lock:
			self._unassigned[item_id] = {**copy.deepcopy(record), "id": item_id}

	async def delete_unassigned_item(self, item_id: str) -> None:
		async with self._lock:
			if item_id not in self._unassigned:
				raise NotFound(f"Item {item_id} not found.")
			del self._unassigned[item_id]

	# General reminders

	async def add_reminder(self, record: Record) -> str:
		async with self._lock:
			reminder_id = record.get("id") or uuid7str()
			self._reminders[reminder_id] = {**copy.deepcopy(record), "id": reminder_id}
			return reminder_id

	async def get_reminder(self, reminder_id: str) -> Record | None:
		record = self._reminders.get(reminder_id)
		return copy.deepcopy(record) if record is not None else None

	async def update_reminder(self, reminder_id: str, patch: Record) -> None:
		async with self._lock:
			record = self._reminders.get(reminder_id)
			if record is None:
				raise NotFound(f"Reminder {reminder_id} not found.")
			self._reminders[reminder_id] = apply_patch(record, patch)

	async def list_reminders(self, attorney_id: str | None = None) -> list[Record]:
		records = [
			r for r in self._reminders.values()
			if attorney_id is None or r.get("attorney_id") == attorney_id
		]
		return copy.deepcopy(records)

	# Attorneys

	async def get_attorney(self, attorney_id: str) -> Record | None:
		record = self._attorneys.get(attorney_id)
		return copy.deepcopy(record) if record is not None else None

	async def list_attorneys(self) -> list[Record]:
		return copy.deepcopy(list(self._attorneys.values()))

	async def save_attorney(self, attorney_id: str, record: Record) -> None:
		async with self._lock:
			self._attorneys[attorney_id] = {**copy.deepcopy(record), "id": attorney_id}
