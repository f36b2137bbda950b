"""Week rotation: ISO week numbers and the odd/even parent rule."""

from __future__ import annotations
from datetime import date, timedelta

from homeassistant.util import dt as dt_util

from .calendar_map import CalendarMap
from .const import DATE_FMT, DAY_LABELS, K_PARENT_A, K_PARENT_B, SLOT_A, SLOT_B
from .type_defs import Settings, WeekAssignment, WeekDay


def local_today() -> date:
    return dt_util.now().date()


def iso_week_number(day: date) -> int:
    return day.isocalendar()[1]


def current_week_assignment(settings: Settings, today: date | None = None) -> WeekAssignment:
    """Odd ISO weeks belong to parent A, even weeks to parent B."""
    week = iso_week_number(today or local_today())
    odd = week % 2 != 0
    return {
        "week_number": week,
        "parity": "odd" if odd else "even",
        "slot": SLOT_A if odd else SLOT_B,
        "parent_name": settings[K_PARENT_A] if odd else settings[K_PARENT_B],
    }


def monday_of_week(today: date | None = None) -> date:
    today = today or local_today()
    weekday = today.isoweekday()  # Monday=1 .. Sunday=7
    return today - timedelta(days=weekday - 1)


def week_strip(calendar: CalendarMap, today: date | None = None) -> list[WeekDay]:
    """Monday..Sunday of today's week with each day's assigned parent."""
    today = today or local_today()
    monday = monday_of_week(today)
    assignments = calendar.assignments()
    days: list[WeekDay] = []
    for offset, label in enumerate(DAY_LABELS):
        day = monday + timedelta(days=offset)
        key = day.strftime(DATE_FMT)
        days.append(
            {
                "date": key,
                "label": label,
                "day": day.day,
                "slot": assignments.get(key),
                "is_today": day == today,
            }
        )
    return days
