# (c) Copyright Datacraft, 2026
"""Document tables backing the SQL record store."""

from .orm import AttorneyRecord, CaseFileRecord, ReminderRecord, UnassignedItemRecord

__all__ = [
	"AttorneyRecord",
	"CaseFileRecord",
	"ReminderRecord",
	"UnassignedItemRecord",
]
