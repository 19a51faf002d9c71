# (c) Copyright Datacraft, 2026
"""Application settings configuration."""
from pathlib import Path

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from registrar.core.types import StoreBackend


class Settings(BaseSettings):
	db_url: str | None = None
	db_ssl: bool = False
	store_backend: StoreBackend = StoreBackend.MEMORY
	log_config: Path | None = Path("/app/log_config.yaml")
	api_prefix: str = ''

	# Caseload dashboards
	stagnation_threshold_days: int = Field(gt=0, default=14)
	transit_overdue_days: int = Field(gt=0, default=3)
	caseload_page_size: int = Field(gt=0, default=25)

	# Remote user config
	remote_user_header: str = "X-Forwarded-User"
	remote_attorney_header: str = "X-Forwarded-Attorney"

	@computed_field
	@property
	def async_db_url(self) -> str | None:
		if self.db_url is None:
			return None
		url = str(self.db_url)
		if "postgresql+psycopg://" in url:
			return url.replace("postgresql+psycopg://", "postgresql+asyncpg://", 1)
		elif "postgresql://" in url:
			return url.replace("postgresql://", "postgresql+asyncpg://", 1)
		return url

	model_config = SettingsConfigDict(
		env_prefix='registrar_',
		env_file='.env',
		env_file_encoding='utf-8',
		extra='ignore',
	)


_settings: Settings | None = None


def get_settings() -> Settings:
	global _settings
	if _settings is None:
		_settings = Settings()
	return _settings
