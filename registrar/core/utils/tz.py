# (c) Copyright Datacraft, 2026
"""Timezone helpers."""
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator


def utc_now() -> datetime:
	return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
	"""Treat naive datetimes as UTC and convert aware ones to UTC."""
	if value.tzinfo is None:
		return value.replace(tzinfo=timezone.utc)
	return value.astimezone(timezone.utc)


def days_between(earlier: datetime, later: datetime) -> int:
	"""Whole days elapsed from ``earlier`` to ``later``."""
	return (as_utc(later) - as_utc(earlier)).days


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]
