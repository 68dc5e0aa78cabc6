from __future__ import annotations

import random

import pytest

from school_dashboard.attendance.metrics import ALERT_TEMPLATES, WEEKDAYS, generate_attendance_snapshot
from school_dashboard.attendance.model import ALL, AttendanceFilters
from school_dashboard.core.enums import Level, PopulationFocus
from school_dashboard.core.exceptions import ValidationError


class FixedRandom(random.Random):
    """Random whose ``random()`` replays a fixed script (then repeats the last value)."""

    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)

    def random(self):
        if len(self._values) > 1:
            return self._values.pop(0)
        return self._values[0]


@pytest.mark.parametrize("seed", range(20))
def test_kpis_stay_within_population_bounds(seed):
    snapshot = generate_attendance_snapshot(AttendanceFilters(), total_students=1681, total_staff=112,
                                            rng=random.Random(seed))
    attendance, lateness, absence = (k.value for k in snapshot.kpis)

    assert 1681 * 0.85 - 1 <= attendance < 1681 * 0.99
    assert 1681 * 0.01 - 1 <= lateness < 1681 * 0.09
    raw_absence = 1681 - attendance - lateness
    assert absence == max(0, raw_absence)
    assert bool(snapshot.warnings) == (raw_absence < 0)
    assert -10 <= snapshot.kpis[0].change <= 10
    assert -3 <= snapshot.kpis[1].change <= 3
    assert -2 <= snapshot.kpis[2].change <= 2


def test_staff_focus_uses_staff_population():
    filters = AttendanceFilters(population_focus=PopulationFocus.TEACHERS)

    snapshot = generate_attendance_snapshot(filters, total_students=1681, total_staff=112, rng=random.Random(3))

    attendance, lateness, absence = (k.value for k in snapshot.kpis)
    assert 95 <= attendance <= 110
    assert 1 <= lateness <= 10
    assert absence == max(0, 112 - attendance - lateness)


def test_weekday_chart_values():
    snapshot = generate_attendance_snapshot(AttendanceFilters(), rng=random.Random(7))

    assert [p.name for p in snapshot.chart] == list(WEEKDAYS)
    for point in snapshot.chart:
        assert 90 <= point.attendance <= 99
        assert 1 <= point.lateness <= 8
        assert point.absence >= 0


def test_weekday_absence_percentage_is_floored_at_zero():
    # KPI draws at the bottom of their ranges, every weekday draw at the top.
    rng = FixedRandom([0.0, 0.0, 0.9999])

    snapshot = generate_attendance_snapshot(AttendanceFilters(), total_students=1681, total_staff=112, rng=rng)

    for point in snapshot.chart:
        assert point.attendance + point.lateness > 100
        assert point.absence == 0
    # Only the KPI clamp reports a data-quality warning.
    assert snapshot.warnings == ()


def test_negative_absence_is_clamped_with_warning():
    # Top of both ranges: 0.85 + 0.9999*0.14 and 0.01 + 0.9999*0.08 overshoot a tiny population.
    rng = FixedRandom([0.9999, 0.9999, 0.5])

    snapshot = generate_attendance_snapshot(AttendanceFilters(), total_students=100, total_staff=10, rng=rng)

    attendance, lateness, absence = (k.value for k in snapshot.kpis)
    assert attendance + lateness > 100
    assert absence == 0
    assert len(snapshot.warnings) == 1


def test_alerts_come_from_templates():
    snapshot = generate_attendance_snapshot(AttendanceFilters(), rng=random.Random(11))

    assert set(snapshot.alerts) <= set(ALERT_TEMPLATES)
    assert snapshot.to_dict()["filters"]["population"] == "Estudiantes"


def test_filters_cascade_resets_children():
    filters = AttendanceFilters().with_level(Level.SECONDARY).with_grade("5° Año").with_section("B")
    assert (filters.grade, filters.section) == ("5° Año", "B")

    regraded = filters.with_grade("1° Año")
    assert regraded.section == ALL

    releveled = filters.with_level(Level.PRIMARY)
    assert (releveled.grade, releveled.section) == (ALL, ALL)


def test_filters_reject_grade_outside_level():
    with pytest.raises(ValidationError):
        AttendanceFilters().with_grade("5° Año")
    with pytest.raises(ValidationError):
        AttendanceFilters().with_level(Level.PRIMARY).with_grade("5° Año")
    with pytest.raises(ValidationError):
        AttendanceFilters().with_level(Level.PRIMARY).with_grade("4° Grado").with_section("H")
