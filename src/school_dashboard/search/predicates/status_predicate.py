from __future__ import annotations

from ...core.enums import PersonKind
from ...people.model import Person
from .base import TagPredicate


class StatusPredicate(TagPredicate):
    """Exact case-insensitive match on the enrollment status (students only)."""

    def matches(self, person: Person) -> bool:
        if person.kind != PersonKind.STUDENT:
            return False
        return person.enrollment_status.value.lower() == self._needle
