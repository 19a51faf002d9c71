# (c) Copyright Datacraft, 2026
"""Post-mutation event fan-out.

Services call the dispatcher only after the store write succeeded.
Delivery (audit persistence, cache busting, chat notifications) belongs
to collaborators; the default implementation writes to loggers.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from registrar.core.utils.tz import utc_now


class View(str, Enum):
	DASHBOARD = "/"
	FILES = "/files"
	INCOMING_MAIL = "/incoming-mail"
	COURT_PROCESSES = "/court-processes"
	PORTAL = "/portal/dashboard"
	ATTORNEYS = "/attorneys"


@dataclass
class AuditEvent:
	actor: str
	action_code: str
	detail: str
	timestamp: datetime = field(default_factory=utc_now)


@dataclass
class Notification:
	"""Payload addressed to one custodian; message wording is left to the notifier."""
	custodian: str
	payload: dict[str, Any]


class EventDispatcher:
	"""Default dispatcher writing every event to a dedicated logger."""

	def __init__(self):
		self.audit_logger = logging.getLogger("registrar.audit")
		self.cache_logger = logging.getLogger("registrar.cache")
		self.notify_logger = logging.getLogger("registrar.notify")

	async def audit(self, actor: str, action_code: str, detail: str) -> AuditEvent:
		event = AuditEvent(actor=actor, action_code=action_code, detail=detail)
		self.audit_logger.info(f"{event.action_code} by {event.actor}: {event.detail}")
		return event

	async def invalidate(self, *views: View) -> None:
		for view in views:
			self.cache_logger.debug(f"Invalidate {view.value}")

	async def notify(self, custodian: str, payload: dict[str, Any]) -> Notification:
		notification = Notification(custodian=custodian, payload=payload)
		self.notify_logger.info(f"Notify {custodian}: {payload}")
		return notification


_dispatcher: EventDispatcher | None = None


def get_dispatcher() -> EventDispatcher:
	global _dispatcher
	if _dispatcher is None:
		_dispatcher = EventDispatcher()
	return _dispatcher
