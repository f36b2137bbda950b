from __future__ import annotations
import logging
from datetime import date

import voluptuous as vol
from homeassistant.util import dt as dt_util

from .calendar_map import CalendarMap
from .checklist import new_id
from .config import parse_notes, valid_date
from .const import K_CREATED, K_DATE, K_ID, K_TEXT, KEY_NOTES
from .settings import SettingsStore
from .store import BirdnestStore
from .type_defs import DecoratedNote, Note

_LOGGER = logging.getLogger(__name__)


class NotesLog:
    """Dated free-text notes, newest date first."""

    def __init__(self, store: BirdnestStore, calendar: CalendarMap, settings: SettingsStore) -> None:
        self._store = store
        self._calendar = calendar
        self._settings = settings

    def notes(self) -> list[Note]:
        raw = self._store.load(KEY_NOTES)
        if raw is None:
            return []
        try:
            return parse_notes(raw)
        except ValueError as err:
            _LOGGER.warning("Ignoring stored notes: %s", err)
            return []

    def add(self, day: date | str, text: str) -> list[Note]:
        notes = self.notes()
        text = (text or "").strip()
        if not text or not day:
            _LOGGER.debug("Ignoring note without date or text")
            return notes
        try:
            key = valid_date(day)
        except vol.Invalid:
            _LOGGER.debug("Ignoring note with invalid date %r", day)
            return notes
        notes.append(
            {
                K_ID: new_id(),
                K_DATE: key,
                K_TEXT: text,
                K_CREATED: dt_util.utcnow().isoformat(),
            }
        )
        self._store.save(KEY_NOTES, notes)
        return notes

    def remove(self, note_id: str) -> list[Note]:
        notes = self.notes()
        kept = [note for note in notes if note[K_ID] != note_id]
        if len(kept) != len(notes):
            self._store.save(KEY_NOTES, kept)
        return kept

    def sorted_descending(self) -> list[Note]:
        # zero-padded YYYY-MM-DD: string order is date order
        return sorted(self.notes(), key=lambda note: note[K_DATE], reverse=True)

    def decorated(self) -> list[DecoratedNote]:
        """Sorted notes annotated with the parent on duty that day."""
        assignments = self._calendar.assignments()
        out: list[DecoratedNote] = []
        for note in self.sorted_descending():
            slot = assignments.get(note[K_DATE])
            out.append({**note, "parent": slot, "parent_name": self._settings.parent_name(slot)})
        return out
