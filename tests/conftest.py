from __future__ import annotations

from datetime import date

import pytest

from school_dashboard.core.enums import (
    EnrollmentCondition,
    EnrollmentStatus,
    EnrollmentType,
    StaffCategory,
    UserStatus,
)
from school_dashboard.events.seed import initial_events
from school_dashboard.main import create_app
from school_dashboard.people.model import ParentTutor, Staff, Student
from school_dashboard.people.seed import user_status_for
from school_dashboard.roster.state import build_state
from school_dashboard.roster.store import RosterStore


def _student(
    document_number: str,
    full_name: str,
    *,
    enrollment_status: EnrollmentStatus = EnrollmentStatus.ENROLLED,
    enrollment_type: EnrollmentType = EnrollmentType.CONTINUING,
    grade: str = "5° Año",
    section: str = "A",
) -> Student:
    last_names, _, names = full_name.partition(", ")
    paternal, _, maternal = last_names.partition(" ")
    return Student(
        document_number=document_number,
        student_code=f"S2025{document_number}",
        paternal_last_name=paternal,
        maternal_last_name=maternal,
        names=names,
        full_name=full_name,
        gender="Mujer",
        birth_date=date(2010, 5, 14),
        grade=grade,
        section=section,
        enrollment_status=enrollment_status,
        enrollment_type=enrollment_type,
        condition=EnrollmentCondition.PROMOTED,
        status=user_status_for(enrollment_status),
    )


@pytest.fixture
def make_student():
    return _student


@pytest.fixture
def students():
    """Ten students, three of them Pendiente, listed out of name order."""
    return [
        _student("70000001", "TORRES DIAZ, MARIA"),
        _student("70000002", "QUISPE MAMANI, JUAN", enrollment_status=EnrollmentStatus.PENDING),
        _student("70000003", "ÁLVAREZ ROJAS, LUCIA", enrollment_type=EnrollmentType.NEW_ENTRANT),
        _student("70000004", "FLORES SOTO, CARLOS", enrollment_status=EnrollmentStatus.TRANSFERRED,
                 enrollment_type=EnrollmentType.TRANSFER),
        _student("70000005", "CASTRO LUNA, ANA", enrollment_status=EnrollmentStatus.PENDING),
        _student("70000006", "MENDOZA RAMOS, PEDRO", enrollment_status=EnrollmentStatus.WITHDRAWN),
        _student("70000007", "BARRETO VEGA, SOFIA", enrollment_status=EnrollmentStatus.PENDING,
                 enrollment_type=EnrollmentType.NEW_ENTRANT),
        _student("70000008", "GARCIA PEREZ, DIEGO"),
        _student("70000009", "ROJAS HUAMAN, CAMILA", enrollment_status=EnrollmentStatus.PRE_ENROLLED),
        _student("70000010", "ALVAREZ CHAVEZ, LUIS", grade="3° Grado", section="B"),
    ]


@pytest.fixture
def staff():
    return [
        Staff("10203040", "GOMEZ PEREZ, MARIA ELENA", "Secretaría Académica", "Secretaria",
              StaffCategory.ADMINISTRATIVE, UserStatus.ACTIVE),
        Staff("45480502", "DIAZ ROMERO, MIRELLA MARTHA", "Matemática", "Docente_Secundaria",
              StaffCategory.TEACHER, UserStatus.ACTIVE),
        Staff("08046665", "VEGA MARÓN, GREGORIO", "PIP", "Docente_Primaria",
              StaffCategory.SUPPORT, UserStatus.INACTIVE),
    ]


@pytest.fixture
def parents():
    return [
        ParentTutor("40000001", "QUISPE LOPEZ, ROSA", "Madre", UserStatus.ACTIVE, ("70000002",)),
    ]


@pytest.fixture
def roster(students, staff, parents):
    return RosterStore(build_state(students=students, staff=staff, parents=parents, events=initial_events()))


@pytest.fixture
def app(roster):
    app = create_app("school_dashboard.config.testing", roster=roster)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
