from __future__ import annotations

from school_dashboard.core.enums import EnrollmentStatus, KpiSelector
from school_dashboard.enrollment.kpis import compute_tiles, toggle
from school_dashboard.enrollment.pipeline import derive_enrollment_view
from school_dashboard.search.parser import QueryTagParser


def _names(rows):
    return [s.full_name for s in rows]


def test_vacancies_kpi_returns_pending_students_in_name_order(students):
    rows = derive_enrollment_view(students, KpiSelector.VACANCIES, [])

    assert _names(rows) == ["BARRETO VEGA, SOFIA", "CASTRO LUNA, ANA", "QUISPE MAMANI, JUAN"]
    assert all(s.enrollment_status == EnrollmentStatus.PENDING for s in rows)


def test_no_filters_sorts_whole_roster_ignoring_accents(students):
    rows = derive_enrollment_view(students, None, [])

    assert len(rows) == len(students)
    # "ÁLVAREZ" collates next to "ALVAREZ", not after "Z".
    assert _names(rows)[:2] == ["ALVAREZ CHAVEZ, LUIS", "ÁLVAREZ ROJAS, LUCIA"]


def test_output_is_subset_without_duplicates(students):
    tags = QueryTagParser().build_tags(["a"], students)

    rows = derive_enrollment_view(students, KpiSelector.ENROLLED, tags)

    ids = [s.document_number for s in rows]
    assert len(ids) == len(set(ids))
    assert set(ids) <= {s.document_number for s in students}


def test_every_row_satisfies_all_valid_tags(students):
    tags = QueryTagParser().build_tags(["Pendiente", "ingresante"], students)

    rows = derive_enrollment_view(students, None, tags)

    assert [s.document_number for s in rows] == ["70000007"]


def test_invalid_tag_adds_no_constraint(students):
    parser = QueryTagParser()
    tags = parser.build_tags(["Matriculado", "xyz-not-a-name"], students)

    assert [t.is_valid for t in tags] == [True, False]
    assert derive_enrollment_view(students, None, tags) == derive_enrollment_view(students, None, tags[:1])


def test_removing_a_tag_never_shrinks_output(students):
    tags = QueryTagParser().build_tags(["Matriculado", "ga", "perez"], students)

    for i in range(len(tags)):
        fewer = tags[:i] + tags[i + 1:]
        wider = {s.document_number for s in derive_enrollment_view(students, None, fewer)}
        narrower = {s.document_number for s in derive_enrollment_view(students, None, tags)}
        assert narrower <= wider


def test_pipeline_is_idempotent_and_does_not_mutate_input(students):
    before = list(students)
    tags = QueryTagParser().build_tags(["a"], students)

    first = derive_enrollment_view(students, None, tags)
    second = derive_enrollment_view(students, None, tags)

    assert first == second
    assert students == before


def test_kpi_tiles_count_statuses_and_toggle(students):
    tiles = {t.selector: t.value for t in compute_tiles(students)}

    assert tiles == {
        KpiSelector.ENROLLED: 4,
        KpiSelector.TRANSFERS: 1,
        KpiSelector.WITHDRAWALS: 1,
        KpiSelector.VACANCIES: 3,
    }
    assert toggle(None, KpiSelector.ENROLLED) == KpiSelector.ENROLLED
    assert toggle(KpiSelector.ENROLLED, KpiSelector.ENROLLED) is None
    assert toggle(KpiSelector.ENROLLED, KpiSelector.VACANCIES) == KpiSelector.VACANCIES
