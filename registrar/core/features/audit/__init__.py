# (c) Copyright Datacraft, 2026
"""Audit event contract and post-mutation signals."""
from .dispatch import AuditEvent, EventDispatcher, Notification, View, get_dispatcher

__all__ = [
	"AuditEvent",
	"EventDispatcher",
	"Notification",
	"View",
	"get_dispatcher",
]
