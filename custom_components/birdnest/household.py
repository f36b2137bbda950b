from __future__ import annotations
from datetime import date
from typing import Any

from .calendar_map import CalendarMap
from .checklist import Checklist, CleaningChecklist
from .const import CHECKLISTS, EMPTY_NOTES, KEY_CLEANING
from .notes import NotesLog
from .settings import SettingsStore
from .store import BirdnestStore
from .week import current_week_assignment, local_today, week_strip


class Household:
    """All Birdnest components sharing one store handle."""

    def __init__(self, store: BirdnestStore) -> None:
        self.store = store
        self.settings = SettingsStore(store)
        self.calendar = CalendarMap(store)
        self.notes = NotesLog(store, self.calendar, self.settings)
        self.cleaning = CleaningChecklist(store)
        self.checklists: dict[str, Checklist] = {
            key: Checklist(store, key, empty_message) for key, empty_message in CHECKLISTS.items()
        }
        self.checklists[KEY_CLEANING] = self.cleaning

    def overview(self, today: date | None = None) -> dict[str, Any]:
        """Everything a dashboard needs to draw the page."""
        today = today or local_today()
        settings = self.settings.get()
        done, total = self.cleaning.progress()
        return {
            "settings": settings,
            "week": current_week_assignment(settings, today),
            "week_strip": week_strip(self.calendar, today),
            "notes": self.notes.decorated(),
            "notes_empty_message": EMPTY_NOTES,
            "checklists": {
                key: {"items": checklist.items(), "empty_message": checklist.empty_message}
                for key, checklist in self.checklists.items()
            },
            "cleaning_progress": {"done": done, "total": total, "all_done": total > 0 and done == total},
        }
