# (c) Copyright Datacraft, 2026
"""
Shared registrar test fixtures.
"""
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7str

from registrar.core.features.audit import EventDispatcher
from registrar.core.features.files.schema import (
	CaseFile,
	FileRequest,
	Movement,
	default_milestones,
	to_record,
)
from registrar.core.store.memory import MemoryRecordStore
from registrar.core.utils.ids import new_id

# a little in the past so service writes stamped with the real clock sort after it
NOW = datetime.now(timezone.utc).replace(microsecond=0) - timedelta(minutes=5)


class RecordingDispatcher(EventDispatcher):
	"""Dispatcher that keeps every event for assertions."""

	def __init__(self):
		super().__init__()
		self.audits = []
		self.invalidated = []
		self.notifications = []

	async def audit(self, actor, action_code, detail):
		event = await super().audit(actor, action_code, detail)
		self.audits.append(event)
		return event

	async def invalidate(self, *views):
		await super().invalidate(*views)
		self.invalidated.extend(views)

	async def notify(self, custodian, payload):
		notification = await super().notify(custodian, payload)
		self.notifications.append(notification)
		return notification

	def action_codes(self) -> list[str]:
		return [e.action_code for e in self.audits]


@pytest.fixture
def now() -> datetime:
	return NOW


@pytest.fixture
def store() -> MemoryRecordStore:
	return MemoryRecordStore()


@pytest.fixture
def events() -> RecordingDispatcher:
	return RecordingDispatcher()


@pytest.fixture
def make_movement():
	"""Factory for ledger entries dated ``days_ago`` before NOW."""
	def _make_movement(
		moved_to: str,
		days_ago: float = 0,
		received: bool = False,
		**kwargs,
	) -> Movement:
		date = kwargs.pop("date", NOW - timedelta(days=days_ago))
		return Movement(
			id=kwargs.pop("id", new_id("M")),
			date=date,
			moved_to=moved_to,
			status=kwargs.pop("status", "For action"),
			received_at=date if received else None,
			received_by=moved_to if received else None,
			**kwargs,
		)

	return _make_movement


@pytest.fixture
def make_request():
	def _make_request(requester_name: str, days_ago: float = 0) -> FileRequest:
		return FileRequest(
			id=new_id("REQ"),
			requester_id=uuid7str(),
			requester_name=requester_name,
			requested_at=NOW - timedelta(days=days_ago),
		)

	return _make_request


@pytest.fixture
def build_file():
	"""Build an unsaved case file for the pure derivation tests."""
	def _build_file(file_number: str = "AG/1/2026", **kwargs) -> CaseFile:
		created = kwargs.pop("date_created", NOW - timedelta(days=30))
		data = {
			"id": kwargs.pop("id", uuid7str()),
			"file_number": file_number,
			"category": "Civil",
			"subject": f"Subject of {file_number}",
			"date_created": created,
			"reportable_date": created,
			"last_activity_at": NOW,
			"milestones": default_milestones(),
		}
		data.update(kwargs)
		return CaseFile.model_validate(data)

	return _build_file


@pytest.fixture
def make_file(store, build_file):
	"""Factory fixture saving a case file to the memory store."""
	async def _make_file(file_number: str = "AG/1/2026", **kwargs) -> CaseFile:
		file = build_file(file_number, **kwargs)
		file_id = await store.create_file(to_record(file))
		return CaseFile.model_validate(await store.get_file_by_id(file_id))

	return _make_file


@pytest.fixture
def make_attorney(store):
	async def _make_attorney(full_name: str = "Jane Mensah", **kwargs) -> dict:
		attorney_id = kwargs.pop("id", uuid7str())
		record = {
			"full_name": full_name,
			"phone_number": kwargs.pop("phone_number", "+233200000000"),
			"access_id": kwargs.pop("access_id", "AT-TEST1"),
			**kwargs,
		}
		await store.save_attorney(attorney_id, record)
		return await store.get_attorney(attorney_id)

	return _make_attorney


@pytest.fixture
def api_client(store, events):
	from registrar.app import app
	from registrar.core.dependencies import get_events, get_store

	app.dependency_overrides[get_store] = lambda: store
	app.dependency_overrides[get_events] = lambda: events
	client = TestClient(app, headers={"X-Forwarded-User": "Registry Clerk"})
	yield client
	app.dependency_overrides.clear()
