# (c) Copyright Datacraft, 2026
"""Synthetic identifiers for embedded sub-records."""
import secrets
import string

from uuid_extensions import uuid7str


def new_id(prefix: str) -> str:
	"""Return a prefixed, time-ordered identifier, e.g. ``M-0190...``.

	UUID7 strings sort in creation order, which keeps ledger tie-breaks
	deterministic when two movements share a date.
	"""
	return f"{prefix}-{uuid7str()}"


def access_id() -> str:
	alphabet = string.ascii_uppercase + string.digits
	return "AT-" + "".join(secrets.choice(alphabet) for _ in range(5))
