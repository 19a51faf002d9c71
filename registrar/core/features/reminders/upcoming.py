# (c) Copyright Datacraft, 2026
"""Calendar of open reminders and hearing dates."""
from registrar.core.features.files.schema import CaseFile
from registrar.core.types import CorrespondenceType

from .schema import EventKind, GeneralReminder, UpcomingReminder


def upcoming_reminders(
	files: list[CaseFile],
	general: list[GeneralReminder],
) -> list[UpcomingReminder]:
	"""Open case and general reminders plus court hearings, soonest first."""
	events = []
	for file in files:
		for reminder in file.reminders:
			if reminder.is_completed:
				continue
			events.append(UpcomingReminder(
				id=reminder.id,
				date=reminder.date,
				text=reminder.text,
				kind=EventKind.DEADLINE,
				file_number=file.file_number,
			))
		for letter in file.letters:
			if letter.type == CorrespondenceType.COURT_PROCESS and letter.hearing_date:
				events.append(UpcomingReminder(
					id=letter.id,
					date=letter.hearing_date,
					text=f"HEARING: {letter.subject}",
					kind=EventKind.COURT,
					file_number=file.file_number,
				))

	for reminder in general:
		if reminder.is_completed:
			continue
		events.append(UpcomingReminder(
			id=reminder.id,
			date=reminder.date,
			text=reminder.text,
			kind=EventKind.DEADLINE,
			is_general=True,
		))
	return sorted(events, key=lambda e: e.date)
