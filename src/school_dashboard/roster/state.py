"""Roster state and its mutation entry points.

``RosterState`` is immutable; every mutation is a pure function taking the
current state and returning a new one, so services and tests can reason
about state transitions without a live store.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Sequence

from ..core.enums import PersonKind
from ..core.exceptions import NotFoundError, ValidationError
from ..events.model import CalendarEvent
from ..people.model import ParentTutor, Person, Staff, Student, person_key


@dataclass(frozen=True)
class RosterState:
    students: tuple[Student, ...] = ()
    staff: tuple[Staff, ...] = ()
    parents: tuple[ParentTutor, ...] = ()
    events: tuple[CalendarEvent, ...] = ()

    @property
    def all_people(self) -> tuple[Person, ...]:
        return self.students + self.staff + self.parents


def _ensure_unique(people: Sequence[Person], label: str) -> None:
    seen: set[str] = set()
    for p in people:
        if p.document_number in seen:
            raise ValidationError(f"DNI duplicado en {label}: {p.document_number}")
        seen.add(p.document_number)


def _sorted_by_date(events: Iterable[CalendarEvent]) -> tuple[CalendarEvent, ...]:
    return tuple(sorted(events, key=lambda e: e.date))


def build_state(
    *,
    students: Sequence[Student] = (),
    staff: Sequence[Staff] = (),
    parents: Sequence[ParentTutor] = (),
    events: Sequence[CalendarEvent] = (),
) -> RosterState:
    _ensure_unique(students, "estudiantes")
    _ensure_unique(staff, "personal")
    _ensure_unique(parents, "apoderados")
    return RosterState(
        students=tuple(students),
        staff=tuple(staff),
        parents=tuple(parents),
        events=_sorted_by_date(events),
    )


def replace_people(state: RosterState, people: Iterable[Person]) -> RosterState:
    """Replace every person collection at once, partitioning by ``kind``."""
    people = list(people)
    return build_state(
        students=[p for p in people if p.kind == PersonKind.STUDENT],
        staff=[p for p in people if p.kind == PersonKind.STAFF],
        parents=[p for p in people if p.kind == PersonKind.PARENT],
        events=state.events,
    )


def find_student(state: RosterState, document_number: str) -> Optional[Student]:
    for s in state.students:
        if s.document_number == document_number:
            return s
    return None


def add_student(state: RosterState, student: Student) -> RosterState:
    if find_student(state, student.document_number):
        raise ValidationError(f"Ya existe un estudiante con DNI {student.document_number}")
    return replace(state, students=state.students + (student,))


def update_student(state: RosterState, document_number: str, **changes) -> RosterState:
    if not find_student(state, document_number):
        raise NotFoundError(f"Estudiante no encontrado: {document_number}")
    return replace(
        state,
        students=tuple(replace(s, **changes) if s.document_number == document_number else s for s in state.students),
    )


def remove_people(state: RosterState, keys: Iterable[tuple[PersonKind, str]]) -> RosterState:
    """Remove people by ``(kind, document_number)``.

    DNIs are only unique within one kind, so the kind is part of the key.
    Parents keep links only to students that are still on the roster.
    """
    doomed = {(PersonKind(kind), dni) for kind, dni in keys}
    students = tuple(p for p in state.students if person_key(p) not in doomed)
    remaining = {s.document_number for s in students}
    parents = tuple(
        replace(p, student_document_numbers=tuple(d for d in p.student_document_numbers if d in remaining))
        for p in state.parents
        if person_key(p) not in doomed
    )
    return replace(
        state,
        students=students,
        staff=tuple(p for p in state.staff if person_key(p) not in doomed),
        parents=parents,
    )


def add_event(state: RosterState, event: CalendarEvent) -> RosterState:
    if any(e.event_id == event.event_id for e in state.events):
        raise ValidationError(f"Evento duplicado: {event.event_id}")
    return replace(state, events=_sorted_by_date(state.events + (event,)))
