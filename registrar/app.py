# (c) Copyright Datacraft, 2026
import logging
from contextlib import asynccontextmanager
from logging.config import dictConfig

import yaml
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from registrar.core.config import get_settings
from registrar.core.exceptions import ErrorKind, RegistrarError
from registrar.core.features.attorneys.router import router as attorneys_router
from registrar.core.features.batches.router import router as batches_router
from registrar.core.features.caseload.router import router as caseload_router
from registrar.core.features.correspondence.router import router as correspondence_router
from registrar.core.features.custody.router import router as custody_router
from registrar.core.features.files.router import router as files_router
from registrar.core.features.milestones.router import router as milestones_router
from registrar.core.features.reminders.router import router as reminders_router
from registrar.core.routers.version import router as version_router
from registrar.core.types import StoreBackend
from registrar.core.version import __version__

logger = logging.getLogger(__name__)
config = get_settings()
prefix = config.api_prefix

ERROR_STATUS = {
	ErrorKind.NOT_FOUND: 404,
	ErrorKind.CONFLICT: 409,
	ErrorKind.VALIDATION_FAILED: 422,
	ErrorKind.STORE_UNAVAILABLE: 503,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
	"""Application lifespan handler for startup/shutdown events."""
	logger.info("Starting registrar API server...")

	if config.store_backend == StoreBackend.SQL:
		from registrar.core.db.engine import create_tables

		await create_tables()
		logger.info("Record store tables ready")

	yield

	logger.info("Shutting down registrar API server...")


app = FastAPI(
	title="Registrar REST API",
	version=__version__,
	lifespan=lifespan,
)

app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_credentials=True,
	allow_methods=["*"],
	allow_headers=["*"],
)


@app.exception_handler(RegistrarError)
async def registrar_error_handler(request: Request, exc: RegistrarError) -> JSONResponse:
	if exc.kind == ErrorKind.STORE_UNAVAILABLE:
		logger.error(f"{request.method} {request.url.path}: {exc.message}")
	return JSONResponse(status_code=ERROR_STATUS[exc.kind], content=exc.to_dict())


for router in (
	files_router,
	custody_router,
	correspondence_router,
	batches_router,
	caseload_router,
	milestones_router,
	reminders_router,
	attorneys_router,
	version_router,
):
	app.include_router(router, prefix=prefix)


if config.log_config and config.log_config.is_file():
	with open(config.log_config, "r") as stream:
		dictConfig(yaml.load(stream, Loader=yaml.FullLoader))
