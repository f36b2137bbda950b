"""Tests for the per-day duty calendar."""

from datetime import date

from custom_components.birdnest.calendar_map import CalendarMap
from custom_components.birdnest.store import BirdnestStore


async def test_unset_day(store: BirdnestStore) -> None:
    assert CalendarMap(store).get_assignment("2024-03-01") is None


async def test_set_and_clear(store: BirdnestStore) -> None:
    calendar = CalendarMap(store)
    calendar.set_assignment("2024-03-01", "A")
    calendar.set_assignment(date(2024, 3, 2), "B")

    assert calendar.get_assignment(date(2024, 3, 1)) == "A"
    assert calendar.get_assignment("2024-03-02") == "B"
    assert store.load("calendar") == {"2024-03-01": "A", "2024-03-02": "B"}

    calendar.set_assignment("2024-03-01", None)
    assert calendar.assignments() == {"2024-03-02": "B"}


async def test_invalid_input_is_ignored(store: BirdnestStore) -> None:
    calendar = CalendarMap(store)
    calendar.set_assignment("2024-03-01", "C")
    calendar.set_assignment("not a date", "A")
    assert store.load("calendar") is None
    assert calendar.get_assignment("not a date") is None


async def test_cycle(store: BirdnestStore) -> None:
    calendar = CalendarMap(store)
    assert [calendar.cycle_assignment("2024-03-01") for _ in range(4)] == ["A", "B", None, "A"]
    assert calendar.cycle_assignment("2024-13-01") is None


async def test_malformed_calendar_is_empty(store: BirdnestStore) -> None:
    store.save("calendar", {"2024-03-01": "X"})
    calendar = CalendarMap(store)
    assert calendar.assignments() == {}
    assert calendar.get_assignment("2024-03-01") is None


async def test_malformed_day_is_skipped_and_valid_days_survive(store: BirdnestStore) -> None:
    store.save("calendar", {"2024-03-01": "A", "2024-03-02": "X", "garbage": "B"})
    calendar = CalendarMap(store)
    assert calendar.assignments() == {"2024-03-01": "A"}

    calendar.set_assignment("2024-03-03", "B")
    assert store.load("calendar") == {"2024-03-01": "A", "2024-03-03": "B"}


async def test_non_mapping_calendar_is_empty(store: BirdnestStore) -> None:
    store.save("calendar", ["2024-03-01"])
    assert CalendarMap(store).assignments() == {}
