# (c) Copyright Datacraft, 2026
"""Error taxonomy shared by every registrar operation."""
from enum import Enum


class ErrorKind(str, Enum):
	NOT_FOUND = "not_found"
	CONFLICT = "conflict"
	VALIDATION_FAILED = "validation_failed"
	STORE_UNAVAILABLE = "store_unavailable"


class RegistrarError(Exception):
	"""Base class for structured operation failures.

	Carries a machine-readable ``kind`` and a message meant to be shown
	to the end user verbatim.
	"""

	kind: ErrorKind

	def __init__(self, message: str):
		self.message = message
		super().__init__(message)

	def to_dict(self) -> dict[str, str]:
		return {"kind": self.kind.value, "message": self.message}


class NotFound(RegistrarError):
	"""A file, unassigned item or sub-record does not exist."""
	kind = ErrorKind.NOT_FOUND


class Conflict(RegistrarError):
	"""A record with the same business key already exists."""
	kind = ErrorKind.CONFLICT


class ValidationFailed(RegistrarError):
	"""Caller-supplied data is malformed."""
	kind = ErrorKind.VALIDATION_FAILED


class StoreUnavailable(RegistrarError):
	"""The record store could not complete the request."""
	kind = ErrorKind.STORE_UNAVAILABLE

	def __init__(self, message: str, cause: Exception | None = None):
		self.cause = cause
		super().__init__(message)
