from __future__ import annotations

from datetime import date

from ..core.enums import EventCategory
from .model import CalendarEvent

_EVENTS_2025 = (
    ("Inicio del año escolar", EventCategory.MANAGEMENT, date(2025, 3, 10)),
    ("Jornada de reflexión docente", EventCategory.MEETING, date(2025, 3, 10)),
    ("Semana Santa", EventCategory.HOLIDAY, date(2025, 4, 17)),
    ("Evaluación diagnóstica", EventCategory.EXAM, date(2025, 4, 21)),
    ("Día de la Madre", EventCategory.ACTIVITY, date(2025, 5, 9)),
    ("Simulacro de sismo", EventCategory.CIVIC, date(2025, 5, 30)),
    ("Reunión de coordinación UGEL", EventCategory.UGEL, date(2025, 6, 12)),
    ("Día del Maestro", EventCategory.CIVIC, date(2025, 7, 4)),
    ("Exámenes del segundo bimestre", EventCategory.EXAM, date(2025, 7, 14)),
    ("Fiestas Patrias", EventCategory.HOLIDAY, date(2025, 7, 28)),
    ("Vacaciones de medio año", EventCategory.MANAGEMENT, date(2025, 7, 28)),
    ("Aniversario de la institución", EventCategory.ACTIVITY, date(2025, 9, 15)),
    ("Reunión de padres de familia", EventCategory.MEETING, date(2025, 10, 3)),
    ("Clausura del año escolar", EventCategory.MANAGEMENT, date(2025, 12, 19)),
)


def initial_events() -> list[CalendarEvent]:
    return [
        CalendarEvent(event_id=f"seed-{i:03d}", title=title, category=category, date=day)
        for i, (title, category, day) in enumerate(_EVENTS_2025, start=1)
    ]
