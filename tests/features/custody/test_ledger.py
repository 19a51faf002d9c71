# (c) Copyright Datacraft, 2026
"""
Custody resolution tests.
"""
from datetime import timedelta

import pytest

from registrar.core.exceptions import NotFound
from registrar.core.features.custody.ledger import (
	AtRegistry,
	WithCustodian,
	acknowledge,
	is_overdue,
	resolve_custody,
	sort_movements,
	was_ever_held_by,
)


def test_empty_ledger_is_at_registry(now):
	custody = resolve_custody([], now)

	assert custody.custodian == "Registry"
	assert custody.in_transit is False
	assert custody.latest is None
	assert custody.holder == AtRegistry()


def test_latest_movement_decides_custodian(now, make_movement):
	movements = [
		make_movement("Kofi Boateng", days_ago=5, received=True),
		make_movement("Jane Mensah", days_ago=2),
		make_movement("Registry", days_ago=9, received=True),
	]
	custody = resolve_custody(movements, now)

	assert custody.custodian == "Jane Mensah"
	assert custody.holder == WithCustodian("Jane Mensah")
	assert custody.in_transit is True
	assert custody.transit_days == 2


def test_date_tie_broken_by_id(now, make_movement):
	date = now - timedelta(days=1)
	first = make_movement("Ama Owusu", id="M-001", date=date)
	second = make_movement("Kofi Boateng", id="M-002", date=date)

	assert sort_movements([first, second])[0].id == "M-002"
	assert resolve_custody([first, second], now).custodian == "Kofi Boateng"


def test_acknowledged_movement_is_not_in_transit(now, make_movement):
	custody = resolve_custody([make_movement("Jane Mensah", days_ago=4, received=True)], now)

	assert custody.custodian == "Jane Mensah"
	assert custody.in_transit is False
	assert custody.transit_days == 0


def test_registry_destination_is_never_in_transit(now, make_movement):
	custody = resolve_custody([make_movement("registry", days_ago=6)], now)

	assert custody.in_transit is False
	assert custody.at_registry
	assert custody.custodian == "registry"


@pytest.mark.parametrize("days_ago,received", [(0, False), (3, True), (8, False), (1, True)])
def test_in_transit_implies_unreceived_and_away_from_registry(now, make_movement, days_ago, received):
	movements = [
		make_movement("Registry", days_ago=days_ago + 1, received=True),
		make_movement("Jane Mensah", days_ago=days_ago, received=received),
	]
	custody = resolve_custody(movements, now)

	if custody.in_transit:
		assert custody.custodian.lower() != "registry"
		assert custody.latest.received_at is None


def test_future_dated_transit_is_clamped_to_zero(now, make_movement):
	custody = resolve_custody([make_movement("Jane Mensah", days_ago=-2)], now)

	assert custody.in_transit is True
	assert custody.transit_days == 0


def test_is_overdue(now, make_movement):
	stale = resolve_custody([make_movement("Jane Mensah", days_ago=5)], now)
	fresh = resolve_custody([make_movement("Jane Mensah", days_ago=1)], now)

	assert is_overdue(stale, 3)
	assert not is_overdue(fresh, 3)


def test_acknowledge_sets_receipt_on_matching_entry_only(now, make_movement):
	target = make_movement("Jane Mensah", days_ago=1)
	other = make_movement("Kofi Boateng", days_ago=3)

	ledger = acknowledge([other, target], target.id, "Jane Mensah", now)

	acked = next(m for m in ledger if m.id == target.id)
	untouched = next(m for m in ledger if m.id == other.id)
	assert acked.received_at == now
	assert acked.received_by == "Jane Mensah"
	assert untouched.received_at is None
	assert resolve_custody(ledger, now).in_transit is False


def test_acknowledge_twice_overwrites(now, make_movement):
	movement = make_movement("Jane Mensah", days_ago=1)
	ledger = acknowledge([movement], movement.id, "Jane Mensah", now)
	later = now + timedelta(hours=3)

	ledger = acknowledge(ledger, movement.id, "Clerk", later)

	assert ledger[0].received_at == later
	assert ledger[0].received_by == "Clerk"


def test_acknowledge_unknown_movement(make_movement):
	with pytest.raises(NotFound):
		acknowledge([make_movement("Jane Mensah")], "M-missing", "Jane Mensah")


def test_was_ever_held_by_ignores_case_and_spaces(make_movement):
	movements = [make_movement("  JANE mensah "), make_movement("Registry")]

	assert was_ever_held_by(movements, "Jane Mensah")
	assert not was_ever_held_by(movements, "Kofi Boateng")
	assert not was_ever_held_by(movements, "")
