# (c) Copyright Datacraft, 2026
"""
Milestone progress tests.
"""
import pytest

from registrar.core.exceptions import NotFound, ValidationFailed
from registrar.core.features.files.schema import Milestone, default_milestones
from registrar.core.features.milestones import service
from registrar.core.features.milestones.progress import next_milestone, progress_percent


def _milestones(*done: bool) -> list[Milestone]:
	return [Milestone(id=f"m{i}", title=f"Stage {i}", is_completed=d) for i, d in enumerate(done, 1)]


def test_progress_percent():
	assert progress_percent(_milestones(True, True, False, False)) == 50
	assert progress_percent([]) == 0
	assert progress_percent(_milestones(True, True, True)) == 100


def test_out_of_order_completion_is_accepted():
	milestones = _milestones(False, False, True, False)

	assert progress_percent(milestones) == 25
	assert next_milestone(milestones).id == "m1"


def test_next_milestone_none_when_done():
	assert next_milestone(_milestones(True, True)) is None


async def test_set_milestones_replaces_list(store, events, make_file):
	file = await make_file()
	milestones = default_milestones()
	milestones[0].is_completed = True
	milestones[1].is_completed = True

	progress = await service.set_milestones(store, events, "Jane", file.file_number, milestones)

	assert progress.percent == 50
	assert progress.next_milestone.title == "Trial"
	assert events.action_codes() == ["UPDATE_MILESTONES"]


async def test_set_empty_milestones(store, events, make_file):
	file = await make_file()

	progress = await service.set_milestones(store, events, "Jane", file.file_number, [])

	assert progress.milestones == []
	assert progress.percent == 0


async def test_set_milestones_rejects_duplicate_ids(store, events, make_file):
	file = await make_file()

	with pytest.raises(ValidationFailed):
		await service.set_milestones(
			store, events, "Jane", file.file_number, _milestones(True) + _milestones(False)
		)


async def test_set_milestones_unknown_file(store, events):
	with pytest.raises(NotFound):
		await service.set_milestones(store, events, "Jane", "NOPE", _milestones(True))


def test_missing_milestones_default_to_template(build_file):
	file = build_file(milestones=None)

	assert [m.id for m in file.milestones] == ["m1", "m2", "m3", "m4"]
	assert progress_percent(file.milestones) == 0
