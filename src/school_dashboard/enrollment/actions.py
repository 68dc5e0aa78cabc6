"""Enrollment row actions as pure roster mutations.

Each function takes a ``RosterState`` and returns the next one; dispatch
them through ``RosterStore.dispatch``.
"""

from __future__ import annotations

from ..common.datetime_utils import parse_iso_date
from ..core.enums import EnrollmentStatus, EnrollmentType, UserStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..people.model import Student
from ..roster.state import RosterState, add_student, find_student, update_student
from .catalogue import require_placement
from .wizard import EnrollmentDraft


def _require_student(state: RosterState, document_number: str) -> Student:
    student = find_student(state, document_number)
    if not student:
        raise NotFoundError(f"Estudiante no encontrado: {document_number}")
    return student


def transfer_student(state: RosterState, document_number: str) -> RosterState:
    student = _require_student(state, document_number)
    if student.enrollment_status == EnrollmentStatus.TRANSFERRED:
        raise ValidationError("El estudiante ya fue trasladado")
    return update_student(
        state,
        document_number,
        enrollment_status=EnrollmentStatus.TRANSFERRED,
        enrollment_type=EnrollmentType.TRANSFER,
        status=UserStatus.INACTIVE,
    )


def withdraw_student(state: RosterState, document_number: str) -> RosterState:
    student = _require_student(state, document_number)
    if student.enrollment_status == EnrollmentStatus.WITHDRAWN:
        raise ValidationError("El estudiante ya fue retirado")
    return update_student(
        state,
        document_number,
        enrollment_status=EnrollmentStatus.WITHDRAWN,
        status=UserStatus.INACTIVE,
    )


def assign_vacancy(state: RosterState, document_number: str) -> RosterState:
    student = _require_student(state, document_number)
    if student.enrollment_status != EnrollmentStatus.PRE_ENROLLED:
        raise ValidationError("Solo se asigna vacante a estudiantes pre-matriculados")
    return update_student(
        state,
        document_number,
        enrollment_status=EnrollmentStatus.ENROLLED,
        status=UserStatus.ACTIVE,
    )


def change_section(state: RosterState, document_number: str, grade: str, section: str, shift: str = "") -> RosterState:
    student = _require_student(state, document_number)
    require_placement(grade, section)
    return update_student(state, document_number, grade=grade, section=section, shift=shift or student.shift)


def split_full_name(full_name: str) -> tuple[str, str, str]:
    """Split 'PATERNO MATERNO, NOMBRES' into its three parts."""
    last_names, sep, names = full_name.partition(",")
    parts = last_names.split()
    if not sep or not parts or not names.strip():
        raise ValidationError("Nombre completo debe tener el formato APELLIDOS, NOMBRES")
    return parts[0], " ".join(parts[1:]), names.strip()


def enroll_from_draft(state: RosterState, draft: EnrollmentDraft, year: int) -> RosterState:
    """Enroll the draft's student: update an existing record or add a new one."""
    existing = find_student(state, draft.document_number)
    if existing:
        return update_student(
            state,
            draft.document_number,
            grade=draft.grade,
            section=draft.section,
            shift=draft.shift,
            enrollment_type=draft.enrollment_type,
            condition=draft.condition,
            enrollment_status=EnrollmentStatus.ENROLLED,
            status=UserStatus.ACTIVE,
        )

    full_name = draft.full_name.upper()
    paternal, maternal, names = split_full_name(full_name)
    student = Student(
        document_number=draft.document_number,
        student_code=f"S{year}{draft.document_number}",
        paternal_last_name=paternal,
        maternal_last_name=maternal,
        names=names,
        full_name=full_name,
        gender=draft.gender or "No especificado",
        birth_date=parse_iso_date(draft.birth_date),
        grade=draft.grade,
        section=draft.section,
        enrollment_status=EnrollmentStatus.ENROLLED,
        enrollment_type=draft.enrollment_type,
        condition=draft.condition,
        status=UserStatus.ACTIVE,
        shift=draft.shift,
    )
    return add_student(state, student)
