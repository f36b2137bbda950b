from __future__ import annotations
import logging

from homeassistant.components import websocket_api
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import Platform
from homeassistant.core import HomeAssistant, ServiceCall
from homeassistant.helpers import config_validation as cv
from homeassistant.helpers.typing import ConfigType
import voluptuous as vol

from .config import valid_date
from .const import (
    DOMAIN,
    SERVICE_ADD_NOTE,
    SERVICE_REMOVE_NOTE,
    SERVICE_RESET_CLEANING,
    SERVICE_SET_DAY_PARENT,
    SLOT_NONE,
    SLOTS,
)
from .household import Household
from .store import BirdnestStore

_LOGGER = logging.getLogger(__name__)
PLATFORMS = [Platform.BUTTON, Platform.CALENDAR, Platform.SENSOR, Platform.TODO]
CONFIG_SCHEMA = cv.config_entry_only_config_schema(DOMAIN)

ENTRY_SCHEMA = {vol.Optional("entry_id"): str}
SERVICE_SCHEMAS = {
    SERVICE_ADD_NOTE: vol.Schema(
        {**ENTRY_SCHEMA, vol.Required("date"): valid_date, vol.Required("text"): str}
    ),
    SERVICE_REMOVE_NOTE: vol.Schema({**ENTRY_SCHEMA, vol.Required("note_id"): str}),
    SERVICE_SET_DAY_PARENT: vol.Schema(
        {
            **ENTRY_SCHEMA,
            vol.Required("date"): valid_date,
            vol.Required("parent"): vol.In([*SLOTS, SLOT_NONE]),
        }
    ),
    SERVICE_RESET_CLEANING: vol.Schema(ENTRY_SCHEMA),
}


async def async_setup(hass: HomeAssistant, config: ConfigType) -> bool:
    # No YAML support; config entries only.
    for service, schema in SERVICE_SCHEMAS.items():
        if not hass.services.has_service(DOMAIN, service):
            hass.services.async_register(DOMAIN, service, _async_handle(hass, service), schema)
    _register_ws(hass)
    return True


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    store = BirdnestStore(hass)
    await store.async_load()
    household = Household(store)
    household.settings.migrate()
    household.cleaning.items()  # seed default chores before entities render
    hass.data.setdefault(DOMAIN, {})[entry.entry_id] = household
    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    _LOGGER.info("Birdnest loaded for %s", household.settings.get()["parentA"])
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    unloaded = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    household: Household | None = hass.data.get(DOMAIN, {}).pop(entry.entry_id, None)
    if household:
        await household.store.async_flush()
    if DOMAIN in hass.data and not hass.data[DOMAIN]:
        hass.data.pop(DOMAIN)
    return unloaded


def _targets(hass: HomeAssistant, entry_id: str | None) -> list[Household]:
    entries: dict[str, Household] = hass.data.get(DOMAIN, {})
    if not entries:
        _LOGGER.warning("Birdnest: no active config entries")
        return []
    if entry_id is None:
        return list(entries.values())
    if entry_id not in entries:
        _LOGGER.warning("Birdnest: entry_id %s not found", entry_id)
        return []
    return [entries[entry_id]]


def _async_handle(hass: HomeAssistant, service: str):
    async def handler(call: ServiceCall) -> None:
        for household in _targets(hass, call.data.get("entry_id")):
            if service == SERVICE_ADD_NOTE:
                household.notes.add(call.data["date"], call.data["text"])
            elif service == SERVICE_REMOVE_NOTE:
                household.notes.remove(call.data["note_id"])
            elif service == SERVICE_SET_DAY_PARENT:
                parent = call.data["parent"]
                household.calendar.set_assignment(
                    call.data["date"], None if parent == SLOT_NONE else parent
                )
            elif service == SERVICE_RESET_CLEANING:
                household.cleaning.reset_all()

    return handler


def _register_ws(hass: HomeAssistant) -> None:
    @websocket_api.websocket_command(
        {
            vol.Required("type"): "birdnest/overview",
            vol.Required("entry_id"): str,
        }
    )
    @websocket_api.async_response
    async def ws_overview(hass: HomeAssistant, connection, msg):
        household: Household | None = hass.data.get(DOMAIN, {}).get(msg["entry_id"])
        if not household:
            connection.send_error(msg["id"], "not_found", "entry not loaded")
            return
        connection.send_result(msg["id"], household.overview())

    @websocket_api.websocket_command(
        {
            vol.Required("type"): "birdnest/day/cycle",
            vol.Required("entry_id"): str,
            vol.Required("date"): valid_date,
        }
    )
    @websocket_api.async_response
    async def ws_cycle_day(hass: HomeAssistant, connection, msg):
        household: Household | None = hass.data.get(DOMAIN, {}).get(msg["entry_id"])
        if not household:
            connection.send_error(msg["id"], "not_found", "entry not loaded")
            return
        slot = household.calendar.cycle_assignment(msg["date"])
        connection.send_result(msg["id"], {"date": msg["date"], "parent": slot})

    websocket_api.async_register_command(hass, ws_overview)
    websocket_api.async_register_command(hass, ws_cycle_day)
