from __future__ import annotations

from ...core.enums import PersonKind
from ...people.model import Person
from .base import TagPredicate


class TypePredicate(TagPredicate):
    """Exact case-insensitive match on the enrollment type (students only)."""

    def matches(self, person: Person) -> bool:
        if person.kind != PersonKind.STUDENT:
            return False
        return person.enrollment_type.value.lower() == self._needle
