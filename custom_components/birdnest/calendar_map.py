from __future__ import annotations
import logging
from datetime import date

import voluptuous as vol

from .config import parse_calendar, valid_date
from .const import KEY_CALENDAR, SLOT_A, SLOT_B, SLOTS
from .store import BirdnestStore
from .type_defs import Slot

_LOGGER = logging.getLogger(__name__)

_NEXT_SLOT: dict[str | None, str | None] = {None: SLOT_A, SLOT_A: SLOT_B, SLOT_B: None}


class CalendarMap:
    """Which parent is on duty per day; days without an entry are unset."""

    def __init__(self, store: BirdnestStore) -> None:
        self._store = store

    def assignments(self) -> dict[str, Slot]:
        raw = self._store.load(KEY_CALENDAR)
        if raw is None:
            return {}
        try:
            return parse_calendar(raw)
        except ValueError as err:
            _LOGGER.warning("Ignoring stored calendar: %s", err)
            return {}

    def get_assignment(self, day: date | str) -> Slot | None:
        try:
            key = valid_date(day)
        except vol.Invalid:
            return None
        return self.assignments().get(key)

    def set_assignment(self, day: date | str, slot: str | None) -> dict[str, Slot]:
        """Assign a parent to a day, or clear the day when slot is None."""
        data = self.assignments()
        try:
            key = valid_date(day)
        except vol.Invalid:
            _LOGGER.debug("Ignoring assignment for invalid date %r", day)
            return data
        if slot is None:
            data.pop(key, None)
        elif slot in SLOTS:
            data[key] = slot
        else:
            _LOGGER.debug("Ignoring unknown parent slot %r", slot)
            return data
        self._store.save(KEY_CALENDAR, data)
        return data

    def cycle_assignment(self, day: date | str) -> Slot | None:
        """Step a day through unset -> A -> B -> unset and return the new slot."""
        try:
            key = valid_date(day)
        except vol.Invalid:
            _LOGGER.debug("Ignoring cycle for invalid date %r", day)
            return None
        slot = _NEXT_SLOT[self.get_assignment(key)]
        self.set_assignment(key, slot)
        return slot
