"""Mock attendance metrics.

Numbers are drawn from fixed ranges around realistic school attendance; pass
a seeded ``random.Random`` for reproducible snapshots.
"""

from __future__ import annotations

import math
import random

from ..common.logger import get_logger
from ..core.constants import TOTAL_STAFF, TOTAL_STUDENTS
from ..core.enums import PopulationFocus
from .model import AttendanceAlert, AttendanceFilters, AttendanceKpi, AttendanceSnapshot, ChartPoint

logger = get_logger(__name__)

WEEKDAYS = ("Lunes", "Martes", "Miércoles", "Jueves", "Viernes")
ALERT_KEEP_PROBABILITY = 0.7

ALERT_TEMPLATES = (
    AttendanceAlert(
        "critical",
        "Asistencia Crítica: 5to B",
        "La sección tiene una asistencia por debajo del umbral del 80% esta semana.",
        "hace 2 horas",
    ),
    AttendanceAlert(
        "warning",
        "Tardanzas recurrentes: J. Perez",
        "El docente Juan Perez ha acumulado 3 tardanzas esta semana.",
        "ayer",
    ),
    AttendanceAlert(
        "info",
        "Reporte Mensual Disponible",
        "El reporte consolidado del mes anterior ya puede ser generado.",
        "hace 3 dias",
    ),
)


def _uniform(rng: random.Random, low: float, high: float) -> float:
    # Half-open [low, high) like the ranges the dashboard was tuned with.
    return low + rng.random() * (high - low)


def generate_attendance_snapshot(
    filters: AttendanceFilters,
    *,
    total_students: int = TOTAL_STUDENTS,
    total_staff: int = TOTAL_STAFF,
    rng: random.Random,
) -> AttendanceSnapshot:
    population = total_students if filters.population_focus == PopulationFocus.STUDENTS else total_staff
    warnings: list[str] = []

    attendance = math.floor(population * _uniform(rng, 0.85, 0.99))
    lateness = math.floor(population * _uniform(rng, 0.01, 0.09))
    absence = population - attendance - lateness
    if absence < 0:
        message = (
            f"Datos inconsistentes: asistencias ({attendance}) + tardanzas ({lateness}) "
            f"superan la población ({population}); faltas ajustadas a 0"
        )
        logger.warning(message)
        warnings.append(message)
        absence = 0

    kpis = (
        AttendanceKpi("Asistencias", attendance, rng.randint(-10, 10)),
        AttendanceKpi("Tardanzas", lateness, rng.randint(-3, 3)),
        AttendanceKpi("Faltas Injustificadas", absence, rng.randint(-2, 2)),
    )

    chart = []
    for name in WEEKDAYS:
        a = _uniform(rng, 90, 99)
        l = _uniform(rng, 1, 8)
        chart.append(ChartPoint(name, round(a, 1), round(l, 1), round(max(0.0, 100 - a - l), 1)))

    alerts = tuple(a for a in ALERT_TEMPLATES if rng.random() < ALERT_KEEP_PROBABILITY)

    return AttendanceSnapshot(
        filters=filters,
        kpis=kpis,
        chart=tuple(chart),
        alerts=alerts,
        warnings=tuple(warnings),
    )
