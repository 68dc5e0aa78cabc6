from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..core.enums import TagType
from ..people.model import Person
from .model import SearchTag
from .predicates.base import TagPredicate
from .predicates.keyword_predicate import KeywordPredicate
from .predicates.status_predicate import StatusPredicate
from .predicates.type_predicate import TypePredicate


@dataclass
class TagPredicateFactory:
    """Factory Pattern: choose the predicate strategy for a tag's type."""

    def for_tag(self, tag: SearchTag) -> TagPredicate:
        if tag.type == TagType.STATUS:
            return StatusPredicate(tag.value)
        if tag.type == TagType.TYPE:
            return TypePredicate(tag.value)
        return KeywordPredicate(tag.value)

    def for_tags(self, tags: Iterable[SearchTag]) -> list[TagPredicate]:
        """Predicates for the valid tags only; invalid tags add no constraint."""
        return [self.for_tag(t) for t in tags if t.is_valid]


def matches_all(person: Person, predicates: Iterable[TagPredicate]) -> bool:
    return all(p(person) for p in predicates)
