# (c) Copyright Datacraft, 2026
"""Record store abstraction layer."""
from .base import (
	AppendToArray,
	DeleteUnassignedItem,
	Record,
	RecordStore,
	SetUnassignedItem,
	UpdateFile,
	WriteOp,
)
from .factory import create_record_store, get_record_store

__all__ = [
	"AppendToArray",
	"DeleteUnassignedItem",
	"Record",
	"RecordStore",
	"SetUnassignedItem",
	"UpdateFile",
	"WriteOp",
	"create_record_store",
	"get_record_store",
]
