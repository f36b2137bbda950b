from __future__ import annotations
from datetime import date, datetime, timedelta

from homeassistant.components.calendar import CalendarEntity, CalendarEvent
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.util import dt as dt_util

from .const import DATE_FMT, DOMAIN, KEY_CALENDAR, KEY_NOTES, KEY_SETTINGS
from .entity import BirdnestEntity
from .week import local_today

NOTES_SUMMARY = "Notitie"


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback) -> None:
    async_add_entities([BirdnestDutyCalendar(hass.data[DOMAIN][entry.entry_id], entry, "duty_calendar")])


class BirdnestDutyCalendar(BirdnestEntity, CalendarEntity):
    """Read-only view: one all-day event per assigned or annotated day."""

    _attr_translation_key = "duty_calendar"
    watched_keys = (KEY_CALENDAR, KEY_NOTES, KEY_SETTINGS)

    def _events(self) -> list[CalendarEvent]:
        assignments = self._household.calendar.assignments()
        notes_by_day: dict[str, list[str]] = {}
        for note in self._household.notes.notes():
            notes_by_day.setdefault(note["date"], []).append(note["text"])

        events = []
        for key in sorted(set(assignments) | set(notes_by_day)):
            day = datetime.strptime(key, DATE_FMT).date()
            events.append(
                CalendarEvent(
                    start=day,
                    end=day + timedelta(days=1),
                    summary=self._household.settings.parent_name(assignments.get(key)) or NOTES_SUMMARY,
                    description="\n".join(notes_by_day.get(key, [])) or None,
                    uid=key,
                )
            )
        return events

    @property
    def event(self) -> CalendarEvent | None:
        today = local_today()
        return next((event for event in self._events() if event.end > today), None)

    async def async_get_events(self, hass: HomeAssistant, start_date: datetime, end_date: datetime) -> list[CalendarEvent]:
        start = dt_util.as_local(start_date).date()
        end = dt_util.as_local(end_date).date()
        return [event for event in self._events() if _overlaps(event, start, end)]


def _overlaps(event: CalendarEvent, start: date, end: date) -> bool:
    return event.start < end and event.end > start
