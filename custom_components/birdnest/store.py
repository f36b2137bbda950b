"""Synchronous key-value store over Home Assistant's Storage helper.

Every document lives under one key inside a single storage file. The file is
read once at setup; afterwards reads and writes hit the in-memory copy and
disk writes are batched with ``async_delay_save``.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from homeassistant.core import HomeAssistant, callback
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.dispatcher import async_dispatcher_send
from homeassistant.helpers.storage import Store

from .const import SAVE_DELAY, SIGNAL_DOCUMENT_SAVED, STORAGE_KEY, STORAGE_VERSION

_LOGGER = logging.getLogger(__name__)


class BirdnestStore:
    def __init__(self, hass: HomeAssistant, storage_key: str = STORAGE_KEY) -> None:
        self.hass = hass
        self._store: Store[dict[str, Any]] = Store(hass, STORAGE_VERSION, storage_key)
        self._data: dict[str, Any] = {}

    async def async_load(self) -> None:
        try:
            data = await self._store.async_load()
        except HomeAssistantError as err:
            _LOGGER.warning("Birdnest storage unreadable, starting empty: %s", err)
            data = None
        if not isinstance(data, dict):
            data = {}
        self._data = data
        _LOGGER.debug("Birdnest storage loaded with %d document(s)", len(data))

    def load(self, key: str) -> Any | None:
        """Return a private copy of the document under key, or None."""
        value = self._data.get(key)
        if value is None:
            return None
        return copy.deepcopy(value)

    @callback
    def save(self, key: str, document: Any) -> None:
        self._data[key] = copy.deepcopy(document)
        self._changed(key)

    @callback
    def remove(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self._changed(key)

    @callback
    def _changed(self, key: str) -> None:
        self._store.async_delay_save(lambda: self._data, SAVE_DELAY)
        async_dispatcher_send(self.hass, SIGNAL_DOCUMENT_SAVED, key)

    async def async_flush(self) -> None:
        await self._store.async_save(self._data)
