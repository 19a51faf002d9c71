# (c) Copyright Datacraft, 2026
import logging
import ssl

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from registrar.core.config import get_settings

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None


def create_engine(url: str, use_ssl: bool = False) -> AsyncEngine:
	connect_args = {}
	if use_ssl:
		# asyncpg requires an SSL context, not sslmode
		ssl_context = ssl.create_default_context()
		ssl_context.check_hostname = False
		ssl_context.verify_mode = ssl.CERT_NONE
		connect_args["ssl"] = ssl_context

	return create_async_engine(
		url,
		poolclass=NullPool,
		connect_args=connect_args,
	)


def get_engine() -> AsyncEngine:
	global _engine
	if _engine is None:
		settings = get_settings()
		if settings.async_db_url is None:
			raise RuntimeError("registrar_db_url must be set for the sql store backend")
		_engine = create_engine(settings.async_db_url, settings.db_ssl)
		logger.info("Created database engine")
	return _engine


def get_session_factory() -> async_sessionmaker:
	return async_sessionmaker(get_engine(), expire_on_commit=False)


async def create_tables(engine: AsyncEngine | None = None) -> None:
	"""Create the record store tables if they do not exist yet."""
	from registrar.core.db.base import Base
	from registrar.core.store import db  # noqa: F401 registers the models

	engine = engine or get_engine()
	async with engine.begin() as conn:
		await conn.run_sync(Base.metadata.create_all)
