# (c) Copyright Datacraft, 2026
from pydantic import BaseModel

from registrar.core.features.files.schema import CaseFile

from .analytics import WorkloadEntry


class CaseloadResponse(BaseModel):
	viewer: str
	is_executive: bool
	pinned: list[CaseFile] = []
	primary: list[CaseFile] = []
	collaborative: list[CaseFile] = []
	action: list[CaseFile] = []
	oversight: list[CaseFile] = []
	completed: list[CaseFile] = []
	historical: list[CaseFile] = []
	# executive flat list, one page of it
	all: list[CaseFile] = []
	total_all: int = 0
	page: int = 1
	total_pages: int = 0
	stagnant: list[CaseFile] = []
	workload: list[WorkloadEntry] = []
