from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Union

from ..core.enums import (
    EnrollmentCondition,
    EnrollmentStatus,
    EnrollmentType,
    PersonKind,
    StaffCategory,
    UserStatus,
)


@dataclass(frozen=True)
class Student:
    """Domain entity: Estudiante.

    ``kind`` is the named discriminant of the person sum type; it is fixed per
    class and cannot be passed by callers.
    """

    document_number: str
    student_code: str
    paternal_last_name: str
    maternal_last_name: str
    names: str
    full_name: str
    gender: str
    birth_date: date
    grade: str
    section: str
    enrollment_status: EnrollmentStatus
    enrollment_type: EnrollmentType
    condition: EnrollmentCondition
    status: UserStatus
    sede: str = "Norte"
    shift: str = "Mañana"
    last_login: Optional[datetime] = None
    attendance_percentage: float = 100.0
    average_grade: float = 0.0
    academic_risk: bool = False
    kind: PersonKind = field(default=PersonKind.STUDENT, init=False)


@dataclass(frozen=True)
class Staff:
    """Domain entity: Personal (docentes, administrativos, apoyo)."""

    document_number: str
    full_name: str
    area: str
    role: str
    category: StaffCategory
    status: UserStatus
    sede: str = "Norte"
    last_login: Optional[datetime] = None
    tags: tuple[str, ...] = ()
    attendance_percentage: float = 100.0
    kind: PersonKind = field(default=PersonKind.STAFF, init=False)


@dataclass(frozen=True)
class ParentTutor:
    """Domain entity: Apoderado."""

    document_number: str
    full_name: str
    relation: str
    status: UserStatus
    student_document_numbers: tuple[str, ...] = ()
    phone: Optional[str] = None
    kind: PersonKind = field(default=PersonKind.PARENT, init=False)


Person = Union[Student, Staff, ParentTutor]


def is_student(person: Person) -> bool:
    return person.kind == PersonKind.STUDENT


def person_key(person: Person) -> tuple[PersonKind, str]:
    """Row identity across the whole roster; a DNI alone may repeat across kinds."""
    return person.kind, person.document_number


def role_label(person: Person) -> str:
    if person.kind == PersonKind.STUDENT:
        return "Estudiante"
    if person.kind == PersonKind.PARENT:
        return "Apoderado"
    return person.category.value


def level_label(person: Person) -> str:
    """Nivel educativo derived from the grade text (students) or role (staff)."""
    if person.kind == PersonKind.STUDENT:
        if "AÑOS" in person.grade:
            return "Inicial"
        if "Grado" in person.grade:
            return "Primaria"
        if "Año" in person.grade:
            return "Secundaria"
    elif person.kind == PersonKind.STAFF:
        for level in ("Inicial", "Primaria", "Secundaria"):
            if level in person.role:
                return level
    return "N/A"


def grade_section_label(person: Person) -> str:
    if person.kind != PersonKind.STUDENT:
        return "N/A"
    if "Grado" in person.grade or "Año" in person.grade:
        # "5° Año" + "A" -> "5°A"
        return f"{person.grade.split(' ')[0]}{person.section}"
    return f"{person.grade} {person.section}"


def to_dict(person: Person) -> dict:
    """Flatten a person into the row shape used by tables and JSON responses."""
    row = {
        "kind": person.kind.value,
        "document_number": person.document_number,
        "full_name": person.full_name,
        "role": role_label(person),
        "level": level_label(person),
        "grade_section": grade_section_label(person),
        "status": person.status.value,
    }
    if person.kind == PersonKind.STUDENT:
        row.update(
            {
                "student_code": person.student_code,
                "grade": person.grade,
                "section": person.section,
                "enrollment_status": person.enrollment_status.value,
                "enrollment_type": person.enrollment_type.value,
                "condition": person.condition.value,
                "birth_date": person.birth_date.strftime("%Y-%m-%d"),
            }
        )
    elif person.kind == PersonKind.STAFF:
        row.update({"area": person.area, "staff_role": person.role.replace("_", "-")})
    else:
        row.update({"relation": person.relation, "students": list(person.student_document_numbers)})
    return row
