# (c) Copyright Datacraft, 2026
"""Abstract record store interface.

Case files, unassigned correspondence items, general reminders and
attorneys are stored as whole documents. Sub-lists (movements, letters,
requests, milestones, ...) live inside the case file document and are
always replaced or appended as a unit.
"""

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Sequence

Record = dict[str, Any]


@dataclass
class UpdateFile:
	"""Merge ``patch`` into the case file ``file_id``."""
	file_id: str
	patch: Record


@dataclass
class AppendToArray:
	"""Append ``value`` to the list field ``field`` of a case file."""
	file_id: str
	field: str
	value: Any


@dataclass
class SetUnassignedItem:
	item_id: str
	record: Record


@dataclass
class DeleteUnassignedItem:
	item_id: str


WriteOp = UpdateFile | AppendToArray | SetUnassignedItem | DeleteUnassignedItem


def apply_patch(record: Record, patch: Record) -> Record:
	"""Return a copy of ``record`` with ``patch`` merged in.

	Top-level keys replace the stored value. A dotted key such as
	``pinned_by.<attorney id>`` sets a single entry of a map field.
	"""
	result = copy.deepcopy(record)
	for key, value in patch.items():
		if "." in key:
			field, entry = key.split(".", 1)
			mapping = result.get(field) or {}
			mapping[entry] = copy.deepcopy(value)
			result[field] = mapping
		else:
			result[key] = copy.deepcopy(value)
	return result


def append_value(record: Record, field: str, value: Any) -> Record:
	result = copy.deepcopy(record)
	items = list(result.get(field) or [])
	items.append(copy.deepcopy(value))
	result[field] = items
	return result


def created_sort_key(record: Record) -> datetime:
	value = record.get("date_created")
	if isinstance(value, str):
		value = datetime.fromisoformat(value)
	if isinstance(value, datetime):
		return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
	return datetime.min.replace(tzinfo=timezone.utc)


class RecordStore(ABC):
	"""Abstract base class for record store adapters.

	Every method may suspend on I/O. Implementations raise
	``StoreUnavailable`` for transport failures, ``NotFound`` when a write
	targets a missing record and ``Conflict`` when a created or renumbered case
	file would reuse an existing file number.
	"""

	# Case files

	@abstractmethod
	async def get_file(self, file_number: str) -> Record | None:
		"""Look up a case file by its business key."""
		...

	@abstractmethod
	async def get_file_by_id(self, file_id: str) -> Record | None:
		...

	@abstractmethod
	async def list_files(self) -> list[Record]:
		"""All case files, newest ``date_created`` first."""
		...

	@abstractmethod
	async def create_file(self, record: Record) -> str:
		"""Insert a case file and return its storage id."""
		...

	@abstractmethod
	async def update_file(self, file_id: str, patch: Record) -> None:
		...

	@abstractmethod
	async def append_to_array_field(self, file_id: str, field: str, value: Any) -> None:
		...

	@abstractmethod
	async def delete_file(self, file_id: str) -> None:
		...

	@abstractmethod
	async def batch_write(self, ops: Sequence[WriteOp]) -> None:
		"""Apply every op or none of them."""
		...

	# Unassigned correspondence

	@abstractmethod
	async def get_unassigned_item(self, item_id: str) -> Record | None:
		...

	@abstractmethod
	async def list_unassigned_items(self) -> list[Record]:
		...

	@abstractmethod
	async def set_unassigned_item(self, item_id: str, record: Record) -> None:
		...

	@abstractmethod
	async def delete_unassigned_item(self, item_id: str) -> None:
		...

	# General reminders

	@abstractmethod
	async def add_reminder(self, record: Record) -> str:
		...

	@abstractmethod
	async def get_reminder(self, reminder_id: str) -> Record | None:
		...

	@abstractmethod
	async def update_reminder(self, reminder_id: str, patch: Record) -> None:
		...

	@abstractmethod
	async def list_reminders(self, attorney_id: str | None = None) -> list[Record]:
		...

	# Attorneys

	@abstractmethod
	async def get_attorney(self, attorney_id: str) -> Record | None:
		...

	@abstractmethod
	async def list_attorneys(self) -> list[Record]:
		...

	@abstractmethod
	async def save_attorney(self, attorney_id: str, record: Record) -> None:
		"""Create or replace an attorney record."""
		...
