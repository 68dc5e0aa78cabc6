"""Mock roster generation.

Everything is regenerated in memory on process start; pass a seeded
``random.Random`` to get a reproducible roster (tests do).
"""

from __future__ import annotations

import random
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.constants import ACADEMIC_YEAR, GRADES_AND_SECTIONS
from ..core.enums import EnrollmentCondition, EnrollmentStatus, EnrollmentType, StaffCategory, UserStatus
from .model import ParentTutor, Staff, Student

STUDENT_LAST_NAMES = (
    "QUISPE", "FLORES", "RODRIGUEZ", "SANCHEZ", "GARCIA", "ROJAS", "DIAZ", "TORRES", "LOPEZ",
    "GONZALES", "PEREZ", "CHAVEZ", "VASQUEZ", "MENDOZA", "RAMOS", "RAMIREZ", "CASTILLO", "CASTRO",
    "VARGAS", "RIVERA", "MAMANI", "GUTIERREZ", "MARTINEZ", "SOTO", "HUAMAN",
)
MALE_NAMES = (
    "JUAN", "CARLOS", "LUIS", "MIGUEL", "JOSE", "ANGEL", "PEDRO", "JORGE", "ALEJANDRO", "RICARDO",
    "DAVID", "FERNANDO", "VICTOR", "MARTIN", "RAUL", "MATEO", "DANIEL", "DIEGO", "NICOLAS", "SANTIAGO",
)
FEMALE_NAMES = (
    "MARIA", "ANA", "ROSA", "SOFIA", "CAMILA", "CARMEN", "JUANA", "VICTORIA", "ISABEL", "PATRICIA",
    "MONICA", "ELIZABETH", "LAURA", "ANDREA", "DANIELA", "VALENTINA", "LUCIA", "MARTINA", "PAULA", "SARA",
)

STAFF_LAST_NAMES = (
    "GOMEZ", "PEREZ", "RAMIREZ", "SOTO", "CORDOVA", "MONTERO", "VEGA", "MARÓN", "DIAZ", "ROMERO",
    "ZUÑIGA", "CUYUBAMBA", "FLORES", "RIVERA", "ALLAUCA", "VALENZUELA", "BARRETO", "BARRÓN", "BUENDIA",
    "SANTIAGO", "AQUINO", "POMA", "SOTELO", "RODRÍGUEZ", "VIZCARRA", "HERRERA", "CHONTA", "DE LA CRUZ",
    "VILLEGAS", "VALDIVIA", "ZAPATA", "LUNA", "PAREDES", "MANSILLA", "CASTRO", "MONTES", "FIESTAS",
    "POLO", "PUERTA", "REYNA", "TORRES", "ROJAS", "MENDOZA", "CASTILLO",
)
STAFF_MALE_NAMES = (
    "JUAN CARLOS", "ANGEL ROSARIO", "GREGORIO", "MARCO ANTONIO", "JHOSSEL ANDERSON", "VLADIMIR",
    "FREDDY", "FELIX YVAN", "GUSTAVO ALEJANDRO", "LUIS HUMBERTO", "JAVIER", "DANIEL", "ALEJANDRO",
    "MANUEL", "RICARDO", "ROBERTO", "FERNANDO", "JORGE", "EDUARDO",
)
STAFF_FEMALE_NAMES = (
    "MARIA ELENA", "NATALY", "AURIA CAROLINE", "LUZ MARÍA", "PATRICIA MARIBEL", "GLORIA LUZ",
    "CINTHIA MAYURI", "MARILYN FANNY", "LILI", "ANAMARIA ESTHER", "LAURA", "SOFIA", "CARMEN",
    "ISABEL", "ANA", "VERONICA", "SANDRA", "ELIZABETH", "PAOLA",
)
TEACHING_AREAS = (
    "Inicial", "Primaria", "Secundaria", "CIENCIA Y TECNOLOGÍA", "COMUNICACIÓN", "EDUCACIÓN FÍSICA",
    "ARTE Y CULTURA", "Matemática", "Ciencias Sociales", "Inglés",
)

FIXED_STAFF: tuple[Staff, ...] = (
    Staff("10203040", "GOMEZ PEREZ, MARIA ELENA", "Secretaría Académica", "Secretaria",
          StaffCategory.ADMINISTRATIVE, UserStatus.ACTIVE, "Norte", datetime(2025, 7, 28, 10, 0),
          ("admin-principal",), 98),
    Staff("20304050", "RAMIREZ SOTO, JUAN CARLOS", "Administración", "Jefe de Administración",
          StaffCategory.ADMINISTRATIVE, UserStatus.ACTIVE, "Sur", datetime(2025, 7, 27, 11, 30), (), 100),
    Staff("07673115", "CORDOVA MONTERO, ANGEL ROSARIO", "PIP", "Docente_Secundaria",
          StaffCategory.SUPPORT, UserStatus.ACTIVE, "Norte", datetime(2025, 7, 29, 8, 0), ("tecnologia",), 95),
    Staff("08046665", "VEGA MARÓN, GREGORIO", "PIP", "Docente_Secundaria",
          StaffCategory.SUPPORT, UserStatus.INACTIVE, "Norte", datetime(2025, 5, 10, 14, 0), ("tecnologia",), 90),
    Staff("45480502", "DIAZ ROMERO, MIRELLA MARTHA", "PSICÓLOGO DOCENTE", "Docente_Secundaria",
          StaffCategory.SUPPORT, UserStatus.ACTIVE, "Sur", datetime(2025, 7, 26, 15, 20), ("bienestar",), 99),
    Staff("10106071", "ZUÑIGA CUYUBAMBA, MARCO ANTONIO", "PSICÓLOGO JEC", "Docente_Secundaria",
          StaffCategory.SUPPORT, UserStatus.ACTIVE, "Norte", datetime(2025, 7, 28, 12, 10), ("bienestar",), 100),
    Staff("71829882", "FLORES RIVERA, JHOSSEL ANDERSON", "PROFESOR DE BANDA", "Docente_Secundaria",
          StaffCategory.SUPPORT, UserStatus.ACTIVE, "Norte", datetime(2025, 7, 29, 9, 45), ("extracurricular",), 97),
)

PARENT_RELATIONS = ("Padre", "Madre", "Tutor")

# Age of a student in the first grade of each level.
_LEVEL_AGE_OFFSET = {"inicial": 2, "primaria": 5, "secundaria": 11}


def _dni(rng: random.Random, low: int, high: int) -> str:
    return str(rng.randrange(low, high)).zfill(8)


def _roll_enrollment_status(rng: random.Random) -> EnrollmentStatus:
    roll = rng.random()
    if roll < 0.85:
        return EnrollmentStatus.ENROLLED
    if roll < 0.93:
        return EnrollmentStatus.TRANSFERRED
    if roll < 0.98:
        return EnrollmentStatus.WITHDRAWN
    return EnrollmentStatus.PENDING


def user_status_for(enrollment_status: EnrollmentStatus) -> UserStatus:
    if enrollment_status == EnrollmentStatus.ENROLLED:
        return UserStatus.ACTIVE
    if enrollment_status in {EnrollmentStatus.PENDING, EnrollmentStatus.PRE_ENROLLED}:
        return UserStatus.PENDING
    return UserStatus.INACTIVE


def generate_student(rng: random.Random, *, year: int = ACADEMIC_YEAR) -> Student:
    is_male = rng.random() > 0.5
    paternal = rng.choice(STUDENT_LAST_NAMES)
    maternal = rng.choice(STUDENT_LAST_NAMES)
    names = rng.choice(MALE_NAMES if is_male else FEMALE_NAMES)

    level = rng.choice(list(GRADES_AND_SECTIONS))
    grade = rng.choice(list(GRADES_AND_SECTIONS[level]))
    section = rng.choice(GRADES_AND_SECTIONS[level][grade])
    birth_year = year - (int(grade[0]) + _LEVEL_AGE_OFFSET[level])

    enrollment_status = _roll_enrollment_status(rng)
    if enrollment_status == EnrollmentStatus.TRANSFERRED:
        enrollment_type = EnrollmentType.TRANSFER
    else:
        enrollment_type = EnrollmentType.NEW_ENTRANT if rng.random() > 0.7 else EnrollmentType.CONTINUING

    document_number = _dni(rng, 70_000_000, 90_000_000)
    last_login = datetime(year, 7, 20 + rng.randrange(10)) if rng.random() > 0.3 else None

    return Student(
        document_number=document_number,
        student_code=f"S{year}{document_number}",
        paternal_last_name=paternal,
        maternal_last_name=maternal,
        names=names,
        full_name=f"{paternal} {maternal}, {names}",
        gender="Hombre" if is_male else "Mujer",
        birth_date=date(birth_year, rng.randrange(1, 13), rng.randrange(1, 29)),
        grade=grade,
        section=section,
        enrollment_status=enrollment_status,
        enrollment_type=enrollment_type,
        condition=EnrollmentCondition.REPEATING if rng.random() > 0.9 else EnrollmentCondition.PROMOTED,
        status=user_status_for(enrollment_status),
        sede="Norte" if rng.random() > 0.5 else "Sur",
        shift="Mañana" if rng.random() > 0.3 else "Tarde",
        last_login=last_login,
        attendance_percentage=round(85 + rng.random() * 15, 1),
        average_grade=round(11 + rng.random() * 8, 1),
        academic_risk=rng.random() > 0.85,
    )


def generate_students(count: int, rng: random.Random, *, year: int = ACADEMIC_YEAR) -> list[Student]:
    """Generate ``count`` students with distinct document numbers."""
    students: list[Student] = []
    used: set[str] = set()
    while len(students) < count:
        student = generate_student(rng, year=year)
        if student.document_number in used:
            continue
        used.add(student.document_number)
        students.append(student)
    return students


def generate_staff(count: int, rng: random.Random) -> list[Staff]:
    """Fixed administrative/support staff first, then generated teachers."""
    staff: list[Staff] = list(FIXED_STAFF[:count])
    used = {s.document_number for s in staff}

    while len(staff) < count:
        document_number = _dni(rng, 10_000_000, 100_000_000)
        if document_number in used:
            continue
        used.add(document_number)

        is_male = rng.random() > 0.5
        first = rng.choice(STAFF_MALE_NAMES if is_male else STAFF_FEMALE_NAMES)
        area = rng.choice(TEACHING_AREAS)
        if area in {"Inicial", "Primaria"}:
            role = f"Docente_{area}"
        else:
            role = "Docente_Secundaria"

        staff.append(
            Staff(
                document_number=document_number,
                full_name=f"{rng.choice(STAFF_LAST_NAMES)} {rng.choice(STAFF_LAST_NAMES)}, {first}",
                area=area,
                role=role,
                category=StaffCategory.TEACHER,
                status=UserStatus.ACTIVE if rng.random() > 0.05 else UserStatus.INACTIVE,
                sede="Norte" if rng.random() > 0.5 else "Sur",
                last_login=datetime(2025, 7, 20 + rng.randrange(10)),
                attendance_percentage=float(90 + rng.randrange(11)),
            )
        )
    return staff


def generate_parents(students: Sequence[Student], rng: random.Random, *, ratio: float = 0.1) -> list[ParentTutor]:
    """One apoderado for roughly ``ratio`` of the students, sharing their paternal last name."""
    parents: list[ParentTutor] = []
    used = {s.document_number for s in students}

    for student in students:
        if rng.random() >= ratio:
            continue
        document_number = _dni(rng, 10_000_000, 70_000_000)
        if document_number in used:
            continue
        used.add(document_number)

        relation = rng.choice(PARENT_RELATIONS)
        first = rng.choice(STAFF_FEMALE_NAMES if relation == "Madre" else STAFF_MALE_NAMES)
        parents.append(
            ParentTutor(
                document_number=document_number,
                full_name=f"{student.paternal_last_name} {rng.choice(STUDENT_LAST_NAMES)}, {first}",
                relation=relation,
                status=UserStatus.ACTIVE,
                student_document_numbers=(student.document_number,),
                phone=f"9{rng.randrange(10_000_000, 100_000_000)}",
            )
        )
    return parents


def make_rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed)
