from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..core.enums import EnrollmentStatus, EnrollmentType, TagType
from ..people.model import Person
from .model import SearchTag
from .predicates.keyword_predicate import KeywordPredicate

_STATUS_VALUES = {s.value.lower() for s in EnrollmentStatus}
_TYPE_VALUES = {t.value.lower() for t in EnrollmentType}


@dataclass
class QueryTagParser:
    """Turn free-text search input into typed search tags.

    Status and type tags come from closed vocabularies (exact, case-insensitive)
    and are always valid. Anything else is a keyword whose validity depends on
    whether some record contains it in its name or document number.
    """

    def parse(self, raw: str, existing: Sequence[SearchTag], records: Iterable[Person]) -> Optional[SearchTag]:
        """Return the new tag, or None for empty or duplicate input."""
        value = (raw or "").strip()
        lower_value = value.lower()
        if not lower_value:
            return None
        if any(t.value.lower() == lower_value for t in existing):
            return None

        if lower_value in _STATUS_VALUES:
            return SearchTag(value=value, display_value=f"Estado: {value}", type=TagType.STATUS, is_valid=True)
        if lower_value in _TYPE_VALUES:
            return SearchTag(value=value, display_value=f"Tipo: {value}", type=TagType.TYPE, is_valid=True)

        keyword = KeywordPredicate(value)
        is_valid = any(keyword(r) for r in records)
        return SearchTag(value=value, display_value=value, type=TagType.KEYWORD, is_valid=is_valid)

    def build_tags(self, raw_values: Iterable[str], records: Sequence[Person]) -> list[SearchTag]:
        """Fold raw inputs into tags in order, dropping empty and duplicate entries."""
        tags: list[SearchTag] = []
        for raw in raw_values:
            tag = self.parse(raw, tags, records)
            if tag:
                tags.append(tag)
        return tags
