"""Checklist engine shared by the transfer, house and cleaning lists.

A checklist is one stored document: an ordered list of
``{"id", "text", "checked"}`` items. Every command reads the whole list,
changes it, writes it back and returns the new list.
"""

from __future__ import annotations
import logging
import uuid
from typing import Callable

from .config import parse_items
from .const import DEFAULT_CLEANING_TASKS, EMPTY_CLEANING, K_CHECKED, K_ID, K_TEXT, KEY_CLEANING
from .store import BirdnestStore
from .type_defs import ChecklistItem

_LOGGER = logging.getLogger(__name__)


def new_id() -> str:
    """Time-based id; uuid1 never repeats within a process, even in a tight loop."""
    return uuid.uuid1().hex


class Checklist:
    def __init__(self, store: BirdnestStore, key: str, empty_message: str) -> None:
        self._store = store
        self.key = key
        self.empty_message = empty_message

    def _load(self) -> list[ChecklistItem] | None:
        raw = self._store.load(self.key)
        if raw is None:
            return None
        try:
            return parse_items(raw)
        except ValueError as err:
            _LOGGER.warning("Ignoring stored checklist %s: %s", self.key, err)
            return None

    def _save(self, items: list[ChecklistItem]) -> list[ChecklistItem]:
        self._store.save(self.key, items)
        return items

    def items(self) -> list[ChecklistItem]:
        return self._load() or []

    def add(self, text: str) -> list[ChecklistItem]:
        items = self.items()
        text = (text or "").strip()
        if not text:
            _LOGGER.debug("Ignoring empty item for %s", self.key)
            return items
        items.append({K_ID: new_id(), K_TEXT: text, K_CHECKED: False})
        return self._save(items)

    def _update(self, item_id: str, change: Callable[[ChecklistItem], None]) -> list[ChecklistItem]:
        items = self.items()
        found = next((item for item in items if item[K_ID] == item_id), None)
        if found is None:
            _LOGGER.debug("No item %s in %s", item_id, self.key)
            return items
        change(found)
        return self._save(items)

    def toggle(self, item_id: str) -> list[ChecklistItem]:
        return self._update(item_id, lambda item: item.update(checked=not item[K_CHECKED]))

    def set_checked(self, item_id: str, checked: bool) -> list[ChecklistItem]:
        return self._update(item_id, lambda item: item.update(checked=bool(checked)))

    def rename(self, item_id: str, text: str) -> list[ChecklistItem]:
        text = (text or "").strip()
        if not text:
            return self.items()
        return self._update(item_id, lambda item: item.update(text=text))

    def remove(self, item_id: str) -> list[ChecklistItem]:
        items = self.items()
        kept = [item for item in items if item[K_ID] != item_id]
        if len(kept) == len(items):
            return items
        return self._save(kept)


class CleaningChecklist(Checklist):
    """Cleaning rota, seeded with the default household chores."""

    def __init__(self, store: BirdnestStore) -> None:
        super().__init__(store, KEY_CLEANING, EMPTY_CLEANING)

    def items(self) -> list[ChecklistItem]:
        items = self._load()
        if items:
            return items
        _LOGGER.info("Seeding %d default cleaning tasks", len(DEFAULT_CLEANING_TASKS))
        return self._save(
            [{K_ID: new_id(), K_TEXT: text, K_CHECKED: False} for text in DEFAULT_CLEANING_TASKS]
        )

    def progress(self) -> tuple[int, int]:
        items = self.items()
        return sum(1 for item in items if item[K_CHECKED]), len(items)

    def all_done(self) -> bool:
        done, total = self.progress()
        return total > 0 and done == total

    def reset_all(self) -> list[ChecklistItem]:
        items = self.items()
        for item in items:
            item[K_CHECKED] = False
        return self._save(items)
