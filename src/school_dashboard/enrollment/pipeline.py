"""Derived view of the enrollment table.

KPI filter, then tag filter (AND over valid tags), then name sort. The
function never touches the roster it reads from and is recomputed on every
call, so the same inputs always give the same rows.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..common.text import collation_key
from ..core.enums import KpiSelector
from ..people.model import Student
from ..search.factory import TagPredicateFactory, matches_all
from ..search.model import SearchTag
from .kpis import status_for


def derive_enrollment_view(
    students: Sequence[Student],
    active_kpi: Optional[KpiSelector],
    tags: Sequence[SearchTag],
    *,
    predicate_factory: Optional[TagPredicateFactory] = None,
) -> list[Student]:
    rows = list(students)

    if active_kpi is not None:
        wanted = status_for(active_kpi)
        rows = [s for s in rows if s.enrollment_status == wanted]

    predicates = (predicate_factory or TagPredicateFactory()).for_tags(tags)
    if predicates:
        rows = [s for s in rows if matches_all(s, predicates)]

    return sorted(rows, key=lambda s: collation_key(s.full_name))
