from __future__ import annotations
from typing import Any

from homeassistant import config_entries
from homeassistant.config_entries import ConfigFlowResult
from homeassistant.core import callback
import voluptuous as vol

from .const import DEFAULT_SETTINGS, DOMAIN


def _settings_schema(current: dict[str, str]) -> vol.Schema:
    return vol.Schema(
        {vol.Optional(key, default=current.get(key, default)): str for key, default in DEFAULT_SETTINGS.items()}
    )


class BirdnestConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    VERSION = 1

    async def async_step_user(self, user_input: dict[str, Any] | None = None) -> ConfigFlowResult:
        # One household per Home Assistant instance; all data lives in one store.
        await self.async_set_unique_id(DOMAIN)
        self._abort_if_unique_id_configured()
        if user_input is not None:
            return self.async_create_entry(title="Birdnest", data={})
        return self.async_show_form(step_id="user", data_schema=vol.Schema({}))

    @staticmethod
    @callback
    def async_get_options_flow(config_entry: config_entries.ConfigEntry) -> BirdnestOptionsFlowHandler:
        return BirdnestOptionsFlowHandler(config_entry)


class BirdnestOptionsFlowHandler(config_entries.OptionsFlow):
    """Edit the parent and child names."""

    def __init__(self, entry: config_entries.ConfigEntry) -> None:
        self._entry = entry

    async def async_step_init(self, user_input: dict[str, Any] | None = None) -> ConfigFlowResult:
        household = self.hass.data.get(DOMAIN, {}).get(self._entry.entry_id)
        if household is None:
            return self.async_abort(reason="not_loaded")
        if user_input is not None:
            household.settings.save(user_input)
            return self.async_create_entry(title="", data={})

        return self.async_show_form(
            step_id="init",
            data_schema=_settings_schema(household.settings.get()),
        )
