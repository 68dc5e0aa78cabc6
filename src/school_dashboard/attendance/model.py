from __future__ import annotations

from dataclasses import dataclass, field, replace

from ..core.enums import Level, PopulationFocus, TimeRange
from ..core.exceptions import ValidationError
from ..enrollment.catalogue import grades_for, sections_for

ALL = "all"


@dataclass(frozen=True)
class AttendanceFilters:
    """Control-bar selection. Changing a parent filter resets its children."""

    population_focus: PopulationFocus = PopulationFocus.STUDENTS
    time_range: TimeRange = TimeRange.TODAY
    level: Level = Level.ALL
    grade: str = ALL
    section: str = ALL

    def with_level(self, level: Level) -> "AttendanceFilters":
        return replace(self, level=level, grade=ALL, section=ALL)

    def with_grade(self, grade: str) -> "AttendanceFilters":
        if grade != ALL:
            if self.level == Level.ALL or grade not in grades_for(self.level.value):
                raise ValidationError(f"Grado no válido para el nivel {self.level.value}: {grade}")
        return replace(self, grade=grade, section=ALL)

    def with_section(self, section: str) -> "AttendanceFilters":
        if section != ALL:
            if self.grade == ALL or section not in sections_for(self.grade):
                raise ValidationError(f"Sección no válida para {self.grade}: {section}")
        return replace(self, section=section)

    def to_dict(self) -> dict:
        return {
            "population": self.population_focus.value,
            "time_range": self.time_range.value,
            "level": self.level.value,
            "grade": self.grade,
            "section": self.section,
        }


@dataclass(frozen=True)
class AttendanceKpi:
    title: str
    value: int
    change: int

    def to_dict(self) -> dict:
        return {"title": self.title, "value": self.value, "change": self.change}


@dataclass(frozen=True)
class ChartPoint:
    name: str
    attendance: float
    lateness: float
    absence: float

    def to_dict(self) -> dict:
        return {"name": self.name, "asistencia": self.attendance, "tardanzas": self.lateness, "faltas": self.absence}


@dataclass(frozen=True)
class AttendanceAlert:
    type: str
    title: str
    description: str
    time: str

    def to_dict(self) -> dict:
        return {"type": self.type, "title": self.title, "description": self.description, "time": self.time}


@dataclass(frozen=True)
class AttendanceSnapshot:
    filters: AttendanceFilters
    kpis: tuple[AttendanceKpi, ...]
    chart: tuple[ChartPoint, ...]
    alerts: tuple[AttendanceAlert, ...]
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "filters": self.filters.to_dict(),
            "kpis": [k.to_dict() for k in self.kpis],
            "chart": [c.to_dict() for c in self.chart],
            "alerts": [a.to_dict() for a in self.alerts],
            "warnings": list(self.warnings),
        }
