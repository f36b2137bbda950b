"""Tests for the dated notes log."""

from datetime import date

from homeassistant.util import dt as dt_util

from custom_components.birdnest.household import Household


async def test_add_note(household: Household) -> None:
    notes = household.notes.add("2024-03-01", "  Zwemles verplaatst ")
    assert len(notes) == 1
    note = notes[0]
    assert note["date"] == "2024-03-01"
    assert note["text"] == "Zwemles verplaatst"
    assert note["id"]
    assert dt_util.parse_datetime(note["created"]) is not None
    assert household.store.load("notes") == notes


async def test_add_requires_date_and_text(household: Household) -> None:
    household.notes.add("", "text")
    household.notes.add("2024-03-01", "   ")
    household.notes.add("01-03-2024", "wrong format")
    assert household.notes.notes() == []
    assert household.store.load("notes") is None


async def test_add_accepts_date_objects(household: Household) -> None:
    (note,) = household.notes.add(date(2024, 3, 1), "text")
    assert note["date"] == "2024-03-01"


async def test_sorted_descending(household: Household) -> None:
    for day in ("2024-03-01", "2024-01-15", "2024-02-20"):
        household.notes.add(day, f"note {day}")
    assert [n["date"] for n in household.notes.sorted_descending()] == [
        "2024-03-01",
        "2024-02-20",
        "2024-01-15",
    ]
    # stored order is insertion order
    assert [n["date"] for n in household.notes.notes()] == ["2024-03-01", "2024-01-15", "2024-02-20"]


async def test_remove_note(household: Household) -> None:
    household.notes.add("2024-03-01", "a")
    first, second = household.notes.add("2024-03-02", "b")
    assert household.notes.remove(first["id"]) == [second]
    assert household.notes.remove(first["id"]) == [second]


async def test_decorated_with_parent_on_duty(household: Household) -> None:
    household.settings.save({"parentA": "Anna"})
    household.calendar.set_assignment("2024-03-01", "A")
    household.calendar.set_assignment("2024-03-02", "B")
    household.notes.add("2024-03-01", "a")
    household.notes.add("2024-03-02", "b")
    household.notes.add("2024-03-03", "c")

    decorated = household.notes.decorated()
    assert [(n["date"], n["parent"], n["parent_name"]) for n in decorated] == [
        ("2024-03-03", None, None),
        ("2024-03-02", "B", "Koen"),
        ("2024-03-01", "A", "Anna"),
    ]
    assert "parent" not in household.store.load("notes")[0]


async def test_malformed_notes_are_empty(household: Household) -> None:
    household.store.save("notes", {"not": "a list"})
    assert household.notes.notes() == []


async def test_malformed_note_is_skipped_and_valid_notes_survive(household: Household) -> None:
    household.store.save(
        "notes",
        [
            {"id": "1", "date": "2024-03-01", "text": "a", "created": ""},
            {"id": "2", "date": "not a date", "text": "b"},
        ],
    )
    assert [n["id"] for n in household.notes.notes()] == ["1"]

    notes = household.notes.add("2024-03-02", "c")
    assert [n["text"] for n in notes] == ["a", "c"]
