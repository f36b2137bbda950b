"""Record shapes for the documents kept in the Birdnest store.

Keys mirror the stored JSON exactly, so these are TypedDicts rather than
classes: a loaded document is usable as-is once it passed its schema in
config.py.
"""

from __future__ import annotations

from typing import Literal, TypedDict

Slot = Literal["A", "B"]
ISODate = str  # "2024-03-01"

Settings = TypedDict(
    "Settings",
    {"parentA": str, "parentB": str, "child1": str, "child2": str},
)


class ChecklistItem(TypedDict):
    id: str
    text: str
    checked: bool


class Note(TypedDict):
    id: str
    date: ISODate
    text: str
    created: str


class DecoratedNote(Note):
    parent: Slot | None
    parent_name: str | None


class WeekAssignment(TypedDict):
    week_number: int
    parity: Literal["odd", "even"]
    slot: Slot
    parent_name: str


class WeekDay(TypedDict):
    date: ISODate
    label: str
    day: int
    slot: Slot | None
    is_today: bool
