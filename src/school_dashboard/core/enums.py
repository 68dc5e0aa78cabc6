from __future__ import annotations

from enum import Enum


class PersonKind(str, Enum):
    """Discriminant of the person sum type (Student | Staff | ParentTutor)."""

    STUDENT = "student"
    STAFF = "staff"
    PARENT = "parent"


class UserStatus(str, Enum):
    ACTIVE = "Activo"
    INACTIVE = "Inactivo"
    SUSPENDED = "Suspendido"
    GRADUATED = "Egresado"
    PENDING = "Pendiente"


class EnrollmentStatus(str, Enum):
    """Estado de matrícula. Closed set used by the search tag parser."""

    ENROLLED = "Matriculado"
    PRE_ENROLLED = "Pre-matriculado"
    WITHDRAWN = "Retirado"
    TRANSFERRED = "Trasladado"
    PENDING = "Pendiente"


class EnrollmentType(str, Enum):
    """Tipo de matrícula. Closed set used by the search tag parser."""

    CONTINUING = "Continuidad"
    NEW_ENTRANT = "Ingresante"
    TRANSFER = "Traslado"


class EnrollmentCondition(str, Enum):
    PROMOTED = "Promovido"
    REPEATING = "Repitente"


class StaffCategory(str, Enum):
    DIRECTOR = "Director"
    ADMINISTRATIVE = "Administrativo"
    TEACHER = "Docente"
    SUPPORT = "Apoyo"


class KpiSelector(str, Enum):
    """Enrollment KPI tiles; each one doubles as a status filter."""

    ENROLLED = "Matriculados"
    TRANSFERS = "Traslados"
    WITHDRAWALS = "Retirados"
    VACANCIES = "Vacantes disp."


class TagType(str, Enum):
    KEYWORD = "keyword"
    STATUS = "status"
    TYPE = "type"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class EventCategory(str, Enum):
    EXAM = "Examen"
    HOLIDAY = "Feriado"
    MEETING = "Reunión"
    ACTIVITY = "Actividad"
    UGEL = "UGEL"
    CIVIC = "Cívico"
    MANAGEMENT = "Gestión"


class PopulationFocus(str, Enum):
    STUDENTS = "Estudiantes"
    TEACHERS = "Docentes"


class TimeRange(str, Enum):
    TODAY = "Hoy"
    WEEK = "Semana"
    MONTH = "Mes"


class Level(str, Enum):
    ALL = "Todos"
    INITIAL = "Inicial"
    PRIMARY = "Primaria"
    SECONDARY = "Secundaria"


class WizardStep(int, Enum):
    """Pasos del asistente de nueva matrícula (strictly linear)."""

    IDENTIFICATION = 1
    LOCATION_CONDITION = 2
    CONFIRMATION = 3
    SUCCESS = 4
