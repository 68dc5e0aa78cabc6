from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ..common.text import collation_key
from ..common.validators import require_choice
from ..core.enums import SortDirection
from ..core.exceptions import ValidationError
from ..people.model import Person, level_label, role_label

SORT_COLUMNS: dict[str, Callable[[Person], str]] = {
    "full_name": lambda p: p.full_name,
    "role": role_label,
    "level": level_label,
    "status": lambda p: p.status.value,
}


@dataclass(frozen=True)
class SortConfig:
    key: str
    direction: SortDirection = SortDirection.ASC

    def to_dict(self) -> dict:
        return {"key": self.key, "direction": self.direction.value}


def parse_sort(key: Optional[str], direction: Optional[str] = None) -> Optional[SortConfig]:
    if not key:
        return None
    if key not in SORT_COLUMNS:
        raise ValidationError(f"Columna de orden no válida: {key}")
    return SortConfig(key=key, direction=require_choice(direction or SortDirection.ASC.value, SortDirection, "Dirección"))


def toggle_sort(current: Optional[SortConfig], key: str) -> SortConfig:
    """Same column while ascending flips to descending; anything else sorts ascending."""
    if key not in SORT_COLUMNS:
        raise ValidationError(f"Columna de orden no válida: {key}")
    if current and current.key == key and current.direction == SortDirection.ASC:
        return SortConfig(key=key, direction=SortDirection.DESC)
    return SortConfig(key=key, direction=SortDirection.ASC)


def sort_people(people: Sequence[Person], config: Optional[SortConfig]) -> list[Person]:
    """Stable sort by the configured column; store order when there is no config."""
    if config is None:
        return list(people)
    column = SORT_COLUMNS[config.key]
    return sorted(
        people,
        key=lambda p: collation_key(column(p)),
        reverse=config.direction == SortDirection.DESC,
    )
