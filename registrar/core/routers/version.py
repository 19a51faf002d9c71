# (c) Copyright Datacraft, 2026
from fastapi import APIRouter
from pydantic import BaseModel

from registrar.core.version import __version__

router = APIRouter(prefix="/version", tags=["version"])


class Version(BaseModel):
	version: str


@router.get("")
def get_version() -> Version:
	return Version(version=__version__)
