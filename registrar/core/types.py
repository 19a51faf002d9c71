# (c) Copyright Datacraft, 2026
"""Shared enumerations."""
from enum import Enum


class FileStatus(str, Enum):
	ACTIVE = "Active"
	COMPLETED = "Completed"


class CorrespondenceType(str, Enum):
	INCOMING = "Incoming"
	OUTGOING = "Outgoing"
	FILING = "Filing"
	COURT_PROCESS = "Court Process"
	MEMO = "Memo"


class StoreBackend(str, Enum):
	MEMORY = "memory"
	SQL = "sql"
