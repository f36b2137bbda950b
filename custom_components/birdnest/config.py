from __future__ import annotations
import logging
from datetime import date, datetime
from typing import Any

import voluptuous as vol

from .const import (
    DATE_FMT,
    DEFAULT_SETTINGS,
    K_CHECKED,
    K_CREATED,
    K_DATE,
    K_ID,
    K_TEXT,
    SLOTS,
)
from .type_defs import ChecklistItem, Note, Settings

_LOGGER = logging.getLogger(__name__)


def valid_date(value: Any) -> str:
    """Coerce a date or "YYYY-MM-DD" string to the canonical date string."""
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.strftime(DATE_FMT)
    if not isinstance(value, str):
        raise vol.Invalid("expected a date")
    try:
        return datetime.strptime(value.strip(), DATE_FMT).date().strftime(DATE_FMT)
    except ValueError as err:
        raise vol.Invalid(f"invalid date {value!r}") from err


ITEM_SCHEMA = vol.Schema(
    {
        vol.Required(K_ID): vol.Coerce(str),
        vol.Required(K_TEXT): str,
        vol.Optional(K_CHECKED, default=False): bool,
    },
    extra=vol.REMOVE_EXTRA,
)

NOTE_SCHEMA = vol.Schema(
    {
        vol.Required(K_ID): vol.Coerce(str),
        vol.Required(K_DATE): valid_date,
        vol.Required(K_TEXT): str,
        vol.Optional(K_CREATED, default=""): str,
    },
    extra=vol.REMOVE_EXTRA,
)

SETTINGS_SCHEMA = vol.Schema(
    {vol.Optional(key, default=value): str for key, value in DEFAULT_SETTINGS.items()},
    extra=vol.REMOVE_EXTRA,
)

SLOT_SCHEMA = vol.In(SLOTS)


def _parse(schema: vol.Schema, raw: Any, what: str) -> Any:
    try:
        return schema(raw)
    except vol.Invalid as e:
        raise ValueError(f"Invalid {what}: {e}") from e


def _parse_entries(schema: vol.Schema, raw: Any, what: str) -> list[Any]:
    """Validate a list entry by entry, skipping the entries that fail."""
    if not isinstance(raw, list):
        raise ValueError(f"Invalid {what}: expected a list")
    out = []
    for i, entry in enumerate(raw):
        try:
            out.append(schema(entry))
        except vol.Invalid as e:
            _LOGGER.warning("Skipping invalid %s entry at index %d: %s", what, i, e)
    return out


def parse_items(raw: Any) -> list[ChecklistItem]:
    return _parse_entries(ITEM_SCHEMA, raw, "checklist")


def parse_notes(raw: Any) -> list[Note]:
    return _parse_entries(NOTE_SCHEMA, raw, "notes")


def parse_settings(raw: Any) -> Settings:
    return _parse(SETTINGS_SCHEMA, raw, "settings")


def parse_calendar(raw: Any) -> dict[str, str]:
    if not isinstance(raw, dict):
        raise ValueError("Invalid calendar: expected a mapping")
    out = {}
    for day, slot in raw.items():
        try:
            out[valid_date(day)] = SLOT_SCHEMA(slot)
        except vol.Invalid as e:
            _LOGGER.warning("Skipping invalid calendar entry %r: %s", day, e)
    return out
