# (c) Copyright Datacraft, 2026
"""Portal dashboard endpoints."""
from fastapi import APIRouter, Query

from registrar.core.dependencies import AppSettings, CurrentViewer, Store
from registrar.core.features.files import service as files_service

from . import analytics, partition, schema

router = APIRouter(
	prefix="/caseload",
	tags=["caseload"],
)


@router.get("")
async def get_caseload(
	store: Store,
	viewer: CurrentViewer,
	settings: AppSettings,
	search: str | None = None,
	page: int = Query(default=1, ge=1),
) -> schema.CaseloadResponse:
	"""The viewer's files split into dashboard buckets."""
	files = await files_service.list_files(store)
	caseload = partition.partition(files, viewer, search)
	stagnant = partition.stagnant_files(
		caseload, viewer, settings.stagnation_threshold_days
	)

	if viewer.is_executive:
		workload = analytics.executive_workload(caseload.all)
	elif viewer.is_group_head:
		workload = analytics.group_workload(caseload)
	else:
		workload = []

	page_files, total_pages = partition.paginate(
		caseload.all, page, settings.caseload_page_size
	)
	return schema.CaseloadResponse(
		viewer=viewer.full_name,
		is_executive=viewer.is_executive,
		pinned=caseload.pinned,
		primary=caseload.primary,
		collaborative=caseload.collaborative,
		action=caseload.action,
		oversight=caseload.oversight,
		completed=caseload.completed,
		historical=caseload.historical,
		all=page_files,
		total_all=len(caseload.all),
		page=page,
		total_pages=total_pages,
		stagnant=stagnant,
		workload=workload,
	)
