# (c) Copyright Datacraft, 2026
"""SQLAlchemy-backed record store.

Documents are stored as JSON; datetimes are encoded as ISO-8601 strings
and parsed back by the pydantic schemas on read.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Sequence

from pydantic_core import to_jsonable_python
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from uuid_extensions import uuid7str

from registrar.core.exceptions import Conflict, NotFound, StoreUnavailable

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
from .db.orm import AttorneyRecord, CaseFileRecord, ReminderRecord, UnassignedItemRecord

logger = logging.getLogger(__name__)


def _encode(value: Any) -> Any:
	return to_jsonable_python(value)


def _document(row) -> Record:
	return {**row.data, "id": row.id}


class SqlRecordStore(RecordStore):
	"""Record store over an async SQLAlchemy session factory.

	Each public call runs in its own transaction; ``batch_write`` applies
	all of its ops inside one transaction.
	"""

	def __init__(self, session_factory: async_sessionmaker):
		self._session_factory = session_factory

	@asynccontextmanager
	async def _transaction(self) -> AsyncIterator[AsyncSession]:
		try:
			async with self._session_factory() as session:
				async with session.begin():
					yield session
		except IntegrityError as e:
			raise Conflict("A record with the same key already exists.") from e
		except SQLAlchemyError as e:
			logger.error(f"Record store failure: {e}")
			raise StoreUnavailable("Record store is unavailable.", cause=e) from e

	async def _require_file(self, session: AsyncSession, file_id: str) -> CaseFileRecord:
		row = await session.get(CaseFileRecord, file_id)
		if row is None:
			raise NotFound(f"File {file_id} not found.")
		return row

	def _write_file(self, row: CaseFileRecord, data: Record) -> None:
		data.pop("id", None)
		row.data = data
		row.file_number = data.get("file_number", row.file_number)

	# Case files

	async def get_file(self, file_number: str) -> Record | None:
		async with self._transaction() as session:
			result = await session.execute(
				select(CaseFileRecord).where(CaseFileRecord.file_number == file_number)
			)
			row = result.scalar_one_or_none()
			return _document(row) if row else None

	async def get_file_by_id(self, file_id: str) -> Record | None:
		async with self._transaction() as session:
			row = await session.get(CaseFileRecord, file_id)
			return _document(row) if row else None

	async def list_files(self) -> list[Record]:
		async with self._transaction() as session:
			result = await session.execute(select(CaseFileRecord))
			documents = [_document(row) for row in result.scalars().all()]
		return sorted(documents, key=created_sort_key, reverse=True)

	async def create_file(self, record: Record) -> str:
		file_number = record.get("file_number")
		async with self._transaction() as session:
			existing = await session.execute(
				select(CaseFileRecord.id).where(CaseFileRecord.file_number == file_number)
			)
			if existing.scalar_one_or_none() is not None:
				raise Conflict(f"File number {file_number} already exists.")
			file_id = record.get("id") or uuid7str()
			data = _encode(record)
			data.pop("id", None)
			session.add(CaseFileRecord(id=file_id, file_number=file_number, data=data))
		return file_id

	async def update_file(self, file_id: str, patch: Record) -> None:
		async with self._transaction() as session:
			row = await self._require_file(session, file_id)
			self._write_file(row, apply_patch(row.data, _encode(patch)))

	async def append_to_array_field(self, file_id: str, field: str, value: Any) -> None:
		async with self._transaction() as session:
			row = await self._require_file(session, file_id)
			self._write_file(row, append_value(row.data, field, _encode(value)))

	async def delete_file(self, file_id: str) -> None:
		async with self._transaction() as session:
			row = await self._require_file(session, file_id)
			await session.delete(row)

	async def batch_write(self, ops: Sequence[WriteOp]) -> None:
		async with self._transaction() as session:
			for op in ops:
				if isinstance(op, UpdateFile):
					row = await self._require_file(session, op.file_id)
					self._write_file(row, apply_patch(row.data, _encode(op.patch)))
				elif isinstance(op, AppendToArray):
					row = await self._require_file(session, op.file_id)
					self._write_file(row, append_value(row.data, op.field, _encode(op.value)))
				elif isinstance(op, SetUnassignedItem):
					await self._set_unassigned(session, op.item_id, op.record)
				elif isinstance(op, DeleteUnassignedItem):
					await self._delete_unassigned(session, op.item_id)
				else:
					raise TypeError(f"Unsupported write op: {op!r}")
				await session.flush()

	# Unassigned correspondence

	async def _set_unassigned(self, session: AsyncSession, item_id: str, record: Record) -> None:
		data = _encode(record)
		data.pop("id", None)
		row = await session.get(UnassignedItemRecord, item_id)
		if row is None:
			session.add(UnassignedItemRecord(id=item_id, data=data))
		else:
			row.data = data

	async def _delete_unassigned(self, session: AsyncSession, item_id: str) -> None:
		row = await session.get(UnassignedItemRecord, item_id)
		if row is None:
			raise NotFound(f"Item {item_id} not found.")
		await session.delete(row)

	async def get_unassigned_item(self, item_id: str) -> Record | None:
		async with self._transaction() as session:
			row = await session.get(UnassignedItemRecord, item_id)
			return _document(row) if row else None

	async def list_unassigned_items(self) -> list[Record]:
		async with self._transaction() as session:
			result = await session.execute(select(UnassignedItemRecord))
			return [_document(row) for row in result.scalars().all()]

	async def set_unassigned_item(self, item_id: str, record: Record) -> None:
		async with self._transaction() as session:
			await self._set_unassigned(session, item_id, record)

	async def delete_unassigned_item(self, item_id: str) -> None:
		async with self._transaction() as session:
			await self._delete_unassigned(session, item_id)

	# General reminders

	async def add_reminder(self, record: Record) -> str:
		reminder_id = record.get("id") or uuid7str()
		data = _encode(record)
		data.pop("id", None)
		async with self._transaction() as session:
			session.add(ReminderRecord(
				id=reminder_id,
				attorney_id=data.get("attorney_id"),
				data=data,
			))
		return reminder_id

	async def get_reminder(self, reminder_id: str) -> Record | None:
		async with self._transaction() as session:
			row = await session.get(ReminderRecord, reminder_id)
			return _document(row) if row else None

	async def update_reminder(self, reminder_id: str, patch: Record) -> None:
		async with self._transaction() as session:
			row = await session.get(ReminderRecord, reminder_id)
			if row is None:
				raise NotFound(f"Reminder {reminder_id} not found.")
			row.data = apply_patch(row.data, _encode(patch))

	async def list_reminders(self, attorney_id: str | None = None) -> list[Record]:
		stmt = select(ReminderRecord)
		if attorney_id is not None:
			stmt = stmt.where(ReminderRecord.attorney_id == attorney_id)
		async with self._transaction() as session:
			result = await session.execute(stmt)
			return [_document(row) for row in result.scalars().all()]

	# Attorneys

	async def get_attorney(self, attorney_id: str) -> Record | None:
		async with self._transaction() as session:
			row = await session.get(AttorneyRecord, attorney_id)
			return _document(row) if row else None

	async def list_attorneys(self) -> list[Record]:
		async with self._transaction() as session:
			result = await session.execute(select(AttorneyRecord))
			return [_document(row) for row in result.scalars().all()]

	async def save_attorney(self, attorney_id: str, record: Record) -> None:
		data = _encode(record)
		data.pop("id", None)
		async with self._transaction() as session:
			row = await session.get(AttorneyRecord, attorney_id)
			if row is None:
				session.add(AttorneyRecord(id=attorney_id, data=data))
			else:
				row.data = data
