from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import EventCategory


@dataclass(frozen=True)
class CalendarEvent:
    """Domain entity: Evento del calendario académico.

    ``event_id`` is assigned when the event is created and never changes.
    """

    event_id: str
    title: str
    category: EventCategory
    date: date

    def to_dict(self) -> dict:
        return {
            "id": self.event_id,
            "title": self.title,
            "category": self.category.value,
            "date": self.date.strftime("%Y-%m-%d"),
        }


@dataclass(frozen=True)
class CalendarDay:
    """One cell of the month grid."""

    day: date
    in_month: bool
    events: tuple[CalendarEvent, ...]
    overflow: int = 0

    def to_dict(self) -> dict:
        return {
            "date": self.day.strftime("%Y-%m-%d"),
            "in_month": self.in_month,
            "events": [e.to_dict() for e in self.events],
            "overflow": self.overflow,
        }
