from __future__ import annotations

from ...people.model import Person
from .base import TagPredicate


class KeywordPredicate(TagPredicate):
    """Substring match on the full name (case-insensitive) or the document number."""

    def matches(self, person: Person) -> bool:
        return self._needle in person.full_name.lower() or self._needle in person.document_number
