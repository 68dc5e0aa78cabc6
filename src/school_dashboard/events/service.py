from __future__ import annotations

import calendar
import uuid
from collections import defaultdict
from datetime import date
from typing import Callable, Optional

from ..common.text import collation_key
from ..common.validators import require_choice, require_non_empty
from ..core.constants import MAX_EVENTS_PER_DAY_CELL
from ..core.enums import EventCategory
from ..core.exceptions import ValidationError
from ..roster import state as roster_state
from ..roster.repository import RosterRepository
from .model import CalendarDay, CalendarEvent


def new_event_id() -> str:
    return uuid.uuid4().hex


class CalendarService:
    def __init__(self, roster: RosterRepository, *, id_factory: Optional[Callable[[], str]] = None):
        self._roster = roster
        self._new_id = id_factory or new_event_id

    def add_event(self, *, title: str, category, day: date) -> CalendarEvent:
        title = require_non_empty(title, "Título")
        category = require_choice(category, EventCategory, "Categoría")
        event = CalendarEvent(event_id=self._new_id(), title=title, category=category, date=day)
        self._roster.dispatch(roster_state.add_event, event)
        return event

    def events_on(self, day: date) -> list[CalendarEvent]:
        """Events of one day, alphabetical by title."""
        return sorted((e for e in self._roster.events() if e.date == day), key=lambda e: collation_key(e.title))

    def month_grid(self, year: int, month: int) -> list[list[CalendarDay]]:
        """Monday-first weeks covering the month; each cell shows at most a few events."""
        if not 1 <= month <= 12:
            raise ValidationError(f"Mes no válido: {month}")

        by_day: dict[date, list[CalendarEvent]] = defaultdict(list)
        for e in self._roster.events():
            by_day[e.date].append(e)

        weeks = []
        for week in calendar.Calendar(firstweekday=calendar.MONDAY).monthdatescalendar(year, month):
            row = []
            for d in week:
                day_events = by_day.get(d, [])
                row.append(
                    CalendarDay(
                        day=d,
                        in_month=d.month == month,
                        events=tuple(day_events[:MAX_EVENTS_PER_DAY_CELL]),
                        overflow=max(0, len(day_events) - MAX_EVENTS_PER_DAY_CELL),
                    )
                )
            weeks.append(row)
        return weeks
