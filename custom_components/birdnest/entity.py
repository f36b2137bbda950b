from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import callback
from homeassistant.helpers.device_registry import DeviceInfo
from homeassistant.helpers.dispatcher import async_dispatcher_connect
from homeassistant.helpers.entity import Entity

from .const import DOMAIN, SIGNAL_DOCUMENT_SAVED
from .household import Household


class BirdnestEntity(Entity):
    """Base entity that re-renders whenever one of its documents is saved."""

    _attr_has_entity_name = True
    _attr_should_poll = False
    watched_keys: tuple[str, ...] = ()

    def __init__(self, household: Household, entry: ConfigEntry, suffix: str) -> None:
        self._household = household
        self._attr_unique_id = f"{entry.entry_id}_{suffix}"
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, entry.entry_id)},
            name="Birdnest",
            manufacturer="Birdnest",
        )

    async def async_added_to_hass(self) -> None:
        await super().async_added_to_hass()
        self.async_on_remove(
            async_dispatcher_connect(self.hass, SIGNAL_DOCUMENT_SAVED, self._on_document_saved)
        )

    @callback
    def _on_document_saved(self, key: str) -> None:
        if key in self.watched_keys:
            self.async_write_ha_state()
