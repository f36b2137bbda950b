from __future__ import annotations

from homeassistant.components.button import ButtonEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .const import DOMAIN
from .entity import BirdnestEntity


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback) -> None:
    async_add_entities([BirdnestResetCleaningButton(hass.data[DOMAIN][entry.entry_id], entry, "reset_cleaning")])


class BirdnestResetCleaningButton(BirdnestEntity, ButtonEntity):
    _attr_translation_key = "reset_cleaning"
    _attr_icon = "mdi:broom"

    async def async_press(self) -> None:
        self._household.cleaning.reset_all()
