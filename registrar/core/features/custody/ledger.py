# (c) Copyright Datacraft, 2026
"""Movement ledger and custody resolution.

Pure functions over an already-fetched ledger; nothing here touches the
record store.
"""
from dataclasses import dataclass
from datetime import datetime

from registrar.core.exceptions import NotFound
from registrar.core.features.files.schema import Movement
from registrar.core.utils.names import normalize_name
from registrar.core.utils.tz import days_between, utc_now

REGISTRY = "Registry"


@dataclass(frozen=True)
class AtRegistry:
	@property
	def name(self) -> str:
		return REGISTRY


@dataclass(frozen=True)
class WithCustodian:
	name: str


Holder = AtRegistry | WithCustodian


def is_registry(name: str | None) -> bool:
	return normalize_name(name) == REGISTRY.lower()


def holder_for(moved_to: str | None) -> Holder:
	if not moved_to or is_registry(moved_to):
		return AtRegistry()
	return WithCustodian(moved_to)


@dataclass(frozen=True)
class CustodyStatus:
	holder: Holder
	latest: Movement | None = None
	in_transit: bool = False
	transit_days: int = 0

	@property
	def custodian(self) -> str:
		# the stored spelling is kept, e.g. "registry" stays lowercase
		if self.latest is not None and self.latest.moved_to:
			return self.latest.moved_to
		return self.holder.name

	@property
	def at_registry(self) -> bool:
		return isinstance(self.holder, AtRegistry)


def sort_movements(movements: list[Movement]) -> list[Movement]:
	"""Newest first; the id breaks ties between movements sharing a date."""
	return sorted(movements, key=lambda m: (m.date, m.id), reverse=True)


def latest_movement(movements: list[Movement]) -> Movement | None:
	ordered = sort_movements(movements)
	return ordered[0] if ordered else None


def resolve_custody(movements: list[Movement], now: datetime | None = None) -> CustodyStatus:
	latest = latest_movement(movements)
	if latest is None:
		return CustodyStatus(holder=AtRegistry())

	holder = holder_for(latest.moved_to)
	in_transit = latest.received_at is None and not isinstance(holder, AtRegistry)
	transit_days = 0
	if in_transit:
		transit_days = max(0, days_between(latest.date, now or utc_now()))
	return CustodyStatus(
		holder=holder,
		latest=latest,
		in_transit=in_transit,
		transit_days=transit_days,
	)


def is_overdue(custody: CustodyStatus, threshold_days: int) -> bool:
	return custody.in_transit and custody.transit_days >= threshold_days


def acknowledge(
	movements: list[Movement],
	movement_id: str,
	received_by: str,
	now: datetime | None = None,
) -> list[Movement]:
	"""Mark one ledger entry as received.

	Re-acknowledging an entry overwrites the previous receipt.
	"""
	if not any(m.id == movement_id for m in movements):
		raise NotFound(f"Movement {movement_id} not found.")
	received_at = now or utc_now()
	return [
		m.model_copy(update={"received_at": received_at, "received_by": received_by})
		if m.id == movement_id else m
		for m in movements
	]


def was_ever_held_by(movements: list[Movement], name: str) -> bool:
	target = normalize_name(name)
	return bool(target) and any(normalize_name(m.moved_to) == target for m in movements)
