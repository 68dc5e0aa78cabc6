from __future__ import annotations

from datetime import date

import pytest

from school_dashboard.core.enums import EnrollmentStatus, EventCategory, PersonKind
from school_dashboard.core.exceptions import NotFoundError, ValidationError
from school_dashboard.events.model import CalendarEvent
from school_dashboard.roster import state as roster_state
from school_dashboard.roster.store import RosterStore


def test_build_state_rejects_duplicate_document_numbers(make_student):
    twins = [make_student("70000001", "A B, C"), make_student("70000001", "D E, F")]

    with pytest.raises(ValidationError):
        roster_state.build_state(students=twins)


def test_all_people_is_students_then_staff_then_parents(roster):
    kinds = [p.kind for p in roster.all_people()]

    assert kinds == [PersonKind.STUDENT] * 10 + [PersonKind.STAFF] * 3 + [PersonKind.PARENT]


def test_update_student_returns_new_state(roster):
    before = roster.state

    after = roster.dispatch(roster_state.update_student, "70000002", enrollment_status=EnrollmentStatus.ENROLLED)

    assert roster_state.find_student(before, "70000002").enrollment_status == EnrollmentStatus.PENDING
    assert roster.find_student("70000002").enrollment_status == EnrollmentStatus.ENROLLED
    assert after is roster.state


def test_update_unknown_student(roster):
    with pytest.raises(NotFoundError):
        roster.dispatch(roster_state.update_student, "99999999", section="B")


def test_add_student_rejects_existing_dni(roster, make_student):
    with pytest.raises(ValidationError):
        roster.dispatch(roster_state.add_student, make_student("70000001", "OTRO NOMBRE, X"))


def test_replace_people_partitions_by_kind(roster):
    people = [p for p in roster.all_people() if p.document_number != "45480502"]

    roster.dispatch(roster_state.replace_people, people)

    assert len(roster.students()) == 10
    assert [s.document_number for s in roster.staff()] == ["10203040", "08046665"]
    assert len(roster.parents()) == 1


def test_events_stay_sorted_and_ids_unique(roster):
    event = CalendarEvent("new-1", "Olimpiada", EventCategory.ACTIVITY, date(2025, 1, 5))

    roster.dispatch(roster_state.add_event, event)

    assert roster.events()[0] is event
    with pytest.raises(ValidationError):
        roster.dispatch(roster_state.add_event, event)


def test_seeded_store_is_reproducible():
    a = RosterStore.seeded(seed=42, student_count=30, staff_count=10)
    b = RosterStore.seeded(seed=42, student_count=30, staff_count=10)

    assert a.state == b.state
    assert len(a.students()) == 30
    assert len(a.staff()) == 10
    assert len(a.events()) > 0
