# (c) Copyright Datacraft, 2026
"""Record store ORM models.

Each row holds one whole document in a JSON column; sub-lists are never
split into their own tables.
"""
from datetime import datetime

from sqlalchemy import JSON, String, TIMESTAMP, Index
from sqlalchemy.orm import Mapped, mapped_column

from registrar.core.db.base import Base
from registrar.core.utils.tz import utc_now


class CaseFileRecord(Base):
	__tablename__ = "case_files"

	id: Mapped[str] = mapped_column(String(64), primary_key=True)
	file_number: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
	data: Mapped[dict] = mapped_column(JSON, nullable=False)
	updated_at: Mapped[datetime] = mapped_column(
		TIMESTAMP(timezone=True), default=utc_now, onupdate=utc_now, nullable=False
	)


class UnassignedItemRecord(Base):
	__tablename__ = "unassigned_items"

	id: Mapped[str] = mapped_column(String(64), primary_key=True)
	data: Mapped[dict] = mapped_column(JSON, nullable=False)


class ReminderRecord(Base):
	__tablename__ = "general_reminders"

	id: Mapped[str] = mapped_column(String(64), primary_key=True)
	attorney_id: Mapped[str | None] = mapped_column(String(64))
	data: Mapped[dict] = mapped_column(JSON, nullable=False)

	__table_args__ = (
		Index("idx_general_reminders_attorney", "attorney_id"),
	)


class AttorneyRecord(Base):
	__tablename__ = "attorneys"

	id: Mapped[str] = mapped_column(String(64), primary_key=True)
	data: Mapped[dict] = mapped_column(JSON, nullable=False)
