# (c) Copyright Datacraft, 2026
"""Record store factory."""
import logging

from registrar.core.config import get_settings
from registrar.core.types import StoreBackend

from .base import RecordStore

logger = logging.getLogger(__name__)

_store: RecordStore | None = None


def create_record_store(backend: StoreBackend) -> RecordStore:
	if backend == StoreBackend.SQL:
		from registrar.core.db.engine import get_session_factory
		from .sql import SqlRecordStore

		return SqlRecordStore(get_session_factory())

	from .memory import MemoryRecordStore

	return MemoryRecordStore()


def get_record_store() -> RecordStore:
	"""Process-wide record store selected by ``registrar_store_backend``."""
	global _store
	if _store is None:
		backend = get_settings().store_backend
		_store = create_record_store(backend)
		logger.info(f"Using {backend.value} record store")
	return _store
