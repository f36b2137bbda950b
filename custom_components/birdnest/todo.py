from __future__ import annotations

from homeassistant.components.todo import (
    TodoItem,
    TodoItemStatus,
    TodoListEntity,
    TodoListEntityFeature,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.typing import UndefinedType

from .checklist import Checklist
from .const import DOMAIN, K_CHILD_1, K_CHILD_2, KEY_SETTINGS, KEY_TRANSFER_CHILD1, KEY_TRANSFER_CHILD2
from .entity import BirdnestEntity
from .household import Household

CHILD_KEYS = {KEY_TRANSFER_CHILD1: K_CHILD_1, KEY_TRANSFER_CHILD2: K_CHILD_2}


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry, async_add_entities: AddEntitiesCallback) -> None:
    household: Household = hass.data[DOMAIN][entry.entry_id]
    async_add_entities(
        BirdnestChecklistEntity(household, entry, checklist)
        for checklist in household.checklists.values()
    )


class BirdnestChecklistEntity(BirdnestEntity, TodoListEntity):
    """One checklist shown as a Home Assistant to-do list."""

    _attr_supported_features = (
        TodoListEntityFeature.CREATE_TODO_ITEM
        | TodoListEntityFeature.UPDATE_TODO_ITEM
        | TodoListEntityFeature.DELETE_TODO_ITEM
    )

    def __init__(self, household: Household, entry: ConfigEntry, checklist: Checklist) -> None:
        super().__init__(household, entry, checklist.key)
        self._checklist = checklist
        self._attr_translation_key = checklist.key
        self._child_key = CHILD_KEYS.get(checklist.key)
        if self._child_key:
            # transfer lists are named after the child; follow renames
            self.watched_keys = (checklist.key, KEY_SETTINGS)
            self._attr_translation_placeholders = {"child": self._child_name()}
        else:
            self.watched_keys = (checklist.key,)

    def _child_name(self) -> str:
        return self._household.settings.get()[self._child_key]

    @property
    def name(self) -> str | UndefinedType | None:
        if not self._child_key:
            return super().name
        child = self._child_name()
        template = None
        if (platform := getattr(self, "platform", None)) is not None:
            template = platform.platform_translations.get(
                f"component.{DOMAIN}.entity.todo.{self._checklist.key}.name"
            )
        return (template or "Transfer {child}").replace("{child}", child)

    @callback
    def _on_document_saved(self, key: str) -> None:
        if key == KEY_SETTINGS and self._child_key:
            self._attr_translation_placeholders = {"child": self._child_name()}
        super()._on_document_saved(key)

    @property
    def todo_items(self) -> list[TodoItem]:
        return [
            TodoItem(
                uid=item["id"],
                summary=item["text"],
                status=TodoItemStatus.COMPLETED if item["checked"] else TodoItemStatus.NEEDS_ACTION,
            )
            for item in self._checklist.items()
        ]

    async def async_create_todo_item(self, item: TodoItem) -> None:
        self._checklist.add(item.summary or "")

    async def async_update_todo_item(self, item: TodoItem) -> None:
        if item.uid is None:
            return
        if item.summary:
            self._checklist.rename(item.uid, item.summary)
        if item.status is not None:
            self._checklist.set_checked(item.uid, item.status == TodoItemStatus.COMPLETED)

    async def async_delete_todo_items(self, uids: list[str]) -> None:
        for uid in uids:
            self._checklist.remove(uid)
