from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

from ..core.exceptions import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: tuple[T, ...]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @property
    def is_empty(self) -> bool:
        return self.total_items == 0

    @property
    def first_index(self) -> int:
        """1-based position of the first item shown ("Mostrando X a Y de Z")."""
        return 0 if self.is_empty else (self.page - 1) * self.page_size + 1

    @property
    def last_index(self) -> int:
        return 0 if self.is_empty else self.first_index + len(self.items) - 1

    def to_dict(self, serialize: Callable[[T], dict]) -> dict:
        return {
            "items": [serialize(i) for i in self.items],
            "page": self.page,
            "page_size": self.page_size,
            "total_items": self.total_items,
            "total_pages": self.total_pages,
            "from": self.first_index,
            "to": self.last_index,
            "empty": self.is_empty,
        }


def total_pages_for(count: int, page_size: int) -> int:
    return math.ceil(count / page_size) if count else 0


def clamp_page(page: int, total_pages: int) -> int:
    """Keep ``page`` inside ``[1, total_pages]``; 1 when there is nothing to show."""
    if total_pages < 1:
        return 1
    return max(1, min(page, total_pages))


def paginate(items: Sequence[T], page: int, page_size: int) -> Page[T]:
    """Slice ``items`` for a 1-based ``page``.

    Out-of-range pages are not an error here: they simply produce an empty
    slice. Callers that take the page from user input clamp it first.
    """
    if page_size < 1:
        raise ValidationError("El tamaño de página debe ser mayor o igual a 1")
    start = (page - 1) * page_size
    sliced = tuple(items[max(start, 0):max(page * page_size, 0)])
    return Page(
        items=sliced,
        page=page,
        page_size=page_size,
        total_items=len(items),
        total_pages=total_pages_for(len(items), page_size),
    )
