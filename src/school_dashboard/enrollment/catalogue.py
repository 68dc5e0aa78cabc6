from __future__ import annotations

from ..core.constants import GRADES_AND_SECTIONS
from ..core.exceptions import ValidationError


def grades_for(level: str) -> tuple[str, ...]:
    """Grades of a level ("Inicial", "primaria", ...); empty for unknown levels."""
    return tuple(GRADES_AND_SECTIONS.get((level or "").lower(), {}))


def sections_for(grade: str) -> tuple[str, ...]:
    for grades in GRADES_AND_SECTIONS.values():
        if grade in grades:
            return grades[grade]
    return ()


def require_placement(grade: str, section: str) -> None:
    """Fail unless ``section`` exists for ``grade`` in the school's catalogue."""
    if not grade or not section:
        raise ValidationError("Seleccione grado y sección")
    if section not in sections_for(grade):
        raise ValidationError(f'La sección "{section}" no existe para {grade}')
