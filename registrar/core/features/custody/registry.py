# (c) Copyright Datacraft, 2026
"""Registry desk views: files on the move and files being asked for."""
from collections import OrderedDict
from datetime import datetime

from registrar.core.features.files.schema import CaseFile
from registrar.core.utils.names import normalize_name

from .ledger import CustodyStatus, is_overdue, resolve_custody
from .schema import Custody, InTransitGroup, PendingRequest


def custody_view(
	file: CaseFile,
	custody: CustodyStatus,
	overdue_days: int,
) -> Custody:
	return Custody(
		file_number=file.file_number,
		custodian=custody.custodian,
		at_registry=custody.at_registry,
		in_transit=custody.in_transit,
		transit_days=custody.transit_days,
		overdue=is_overdue(custody, overdue_days),
		latest=custody.latest,
	)


def in_transit_by_destination(
	files: list[CaseFile],
	overdue_days: int,
	now: datetime | None = None,
) -> list[InTransitGroup]:
	"""Unacknowledged files grouped by where they were sent.

	Newest dispatch first; groups appear in the order of their newest file.
	"""
	moving = []
	for file in files:
		custody = resolve_custody(file.movements, now)
		if custody.in_transit:
			moving.append((file, custody))
	moving.sort(key=lambda item: (item[1].latest.date, item[1].latest.id), reverse=True)

	# keyed by normalised name; the newest dispatch supplies the spelling shown
	groups: OrderedDict[str, InTransitGroup] = OrderedDict()
	for file, custody in moving:
		key = normalize_name(custody.custodian)
		if key not in groups:
			groups[key] = InTransitGroup(destination=custody.custodian, files=[])
		groups[key].files.append(custody_view(file, custody, overdue_days))
	return list(groups.values())


def pending_requests(files: list[CaseFile]) -> list[PendingRequest]:
	pending = [
		PendingRequest(file_number=file.file_number, subject=file.subject, request=request)
		for file in files
		for request in file.requests
	]
	pending.sort(key=lambda p: p.request.requested_at, reverse=True)
	return pending
