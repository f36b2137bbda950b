from __future__ import annotations
import logging
from typing import Any, Mapping

from .config import parse_settings
from .const import (
    DEFAULT_SETTINGS,
    K_PARENT_A,
    K_PARENT_B,
    KEY_SETTINGS,
    KEY_SETTINGS_MIGRATED,
    SLOT_A,
    SLOTS,
)
from .store import BirdnestStore
from .type_defs import Settings

_LOGGER = logging.getLogger(__name__)


class SettingsStore:
    """Display names for both parents and both children."""

    def __init__(self, store: BirdnestStore) -> None:
        self._store = store

    def migrate(self) -> None:
        # Older installs stored wrong default names; drop them exactly once.
        if self._store.load(KEY_SETTINGS_MIGRATED):
            return
        if self._store.load(KEY_SETTINGS) is not None:
            _LOGGER.info("Discarding previously stored Birdnest settings")
        self._store.remove(KEY_SETTINGS)
        self._store.save(KEY_SETTINGS_MIGRATED, True)

    def get(self) -> Settings:
        self.migrate()
        raw = self._store.load(KEY_SETTINGS)
        if raw is None:
            return dict(DEFAULT_SETTINGS)
        try:
            return parse_settings(raw)
        except ValueError as err:
            _LOGGER.warning("Ignoring stored settings: %s", err)
            return dict(DEFAULT_SETTINGS)

    def save(self, record: Mapping[str, Any]) -> Settings:
        self.migrate()
        settings: Settings = {
            key: str(record.get(key) or "").strip() or default
            for key, default in DEFAULT_SETTINGS.items()
        }
        self._store.save(KEY_SETTINGS, settings)
        return settings

    def parent_name(self, slot: str | None) -> str | None:
        if slot not in SLOTS:
            return None
        settings = self.get()
        return settings[K_PARENT_A] if slot == SLOT_A else settings[K_PARENT_B]
