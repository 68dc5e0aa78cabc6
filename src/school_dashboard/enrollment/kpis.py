from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..common.validators import require_choice
from ..core.enums import EnrollmentStatus, KpiSelector
from ..people.model import Student

KPI_STATUS = {
    KpiSelector.ENROLLED: EnrollmentStatus.ENROLLED,
    KpiSelector.TRANSFERS: EnrollmentStatus.TRANSFERRED,
    KpiSelector.WITHDRAWALS: EnrollmentStatus.WITHDRAWN,
    # "Vacantes disp." counts the students still waiting for a place.
    KpiSelector.VACANCIES: EnrollmentStatus.PENDING,
}


@dataclass(frozen=True)
class KpiTile:
    selector: KpiSelector
    value: int
    active: bool = False

    def to_dict(self) -> dict:
        return {"title": self.selector.value, "value": self.value, "active": self.active}


def status_for(selector: KpiSelector) -> EnrollmentStatus:
    return KPI_STATUS[selector]


def parse_selector(raw: Optional[str]) -> Optional[KpiSelector]:
    """Empty input means no KPI filter; anything else must be a known tile title."""
    if not raw:
        return None
    return require_choice(raw, KpiSelector, "Indicador")


def toggle(active: Optional[KpiSelector], clicked: KpiSelector) -> Optional[KpiSelector]:
    """Clicking the active tile again clears the selection."""
    return None if active == clicked else clicked


def compute_tiles(students: Iterable[Student], active: Optional[KpiSelector] = None) -> list[KpiTile]:
    counts = {status: 0 for status in EnrollmentStatus}
    for s in students:
        counts[s.enrollment_status] += 1
    return [KpiTile(selector=k, value=counts[status], active=(k == active)) for k, status in KPI_STATUS.items()]
