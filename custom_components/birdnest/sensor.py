from __future__ import annotations
from datetime import datetime, timedelta
from typing import Any, Callable

from homeassistant.components.sensor import SensorEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.event import async_track_point_in_utc_time
from homeassistant.util import dt as dt_util

from .const import DOMAIN, KEY_CALENDAR, KEY_CLEANING, KEY_SETTINGS
from .entity import BirdnestEntity
from .week import current_week_assignment, week_strip


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback) -> None:
    household = hass.data[DOMAIN][entry.entry_id]
    async_add_entities(
        [
            BirdnestWeekParentSensor(household, entry, "week_parent"),
            BirdnestCleaningProgressSensor(household, entry, "cleaning_progress"),
        ]
    )


class BirdnestWeekParentSensor(BirdnestEntity, SensorEntity):
    _attr_translation_key = "week_parent"
    _attr_icon = "mdi:account-switch"
    watched_keys = (KEY_SETTINGS, KEY_CALENDAR)
    _cancel_midnight: Callable[[], None] | None = None

    async def async_added_to_hass(self) -> None:
        await super().async_added_to_hass()
        self._schedule_midnight()
        self.async_on_remove(self._cancel)

    @callback
    def _schedule_midnight(self) -> None:
        next_local_midnight = dt_util.start_of_local_day(dt_util.now() + timedelta(days=1))
        self._cancel_midnight = async_track_point_in_utc_time(
            self.hass, self._on_midnight, dt_util.as_utc(next_local_midnight)
        )

    @callback
    def _on_midnight(self, _now_utc: datetime) -> None:
        self.async_write_ha_state()
        self._schedule_midnight()

    @callback
    def _cancel(self) -> None:
        if self._cancel_midnight:
            self._cancel_midnight()
            self._cancel_midnight = None

    @property
    def native_value(self) -> str:
        return current_week_assignment(self._household.settings.get())["parent_name"]

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        week = current_week_assignment(self._household.settings.get())
        return {
            "week_number": week["week_number"],
            "parity": week["parity"],
            "slot": week["slot"],
            "week_strip": week_strip(self._household.calendar),
        }


class BirdnestCleaningProgressSensor(BirdnestEntity, SensorEntity):
    _attr_translation_key = "cleaning_progress"
    _attr_icon = "mdi:broom"
    watched_keys = (KEY_CLEANING,)

    @property
    def native_value(self) -> int:
        return self._household.cleaning.progress()[0]

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        done, total = self._household.cleaning.progress()
        return {"done": done, "total": total, "all_done": total > 0 and done == total}
