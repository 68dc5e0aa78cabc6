from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..common.logger import get_logger
from ..common.validators import require_choice
from ..core.constants import ACADEMIC_YEAR, USERS_PAGE_SIZE, SCHOOL_NAME
from ..core.enums import PersonKind
from ..core.exceptions import ValidationError
from ..documents import pdf
from ..pagination.paginator import Page, clamp_page, paginate, total_pages_for
from ..people.model import Person, person_key, to_dict
from ..roster.repository import RosterRepository
from ..roster.state import remove_people
from ..search.factory import TagPredicateFactory, matches_all
from ..search.model import SearchTag
from ..search.parser import QueryTagParser
from .sorting import SortConfig, sort_people

logger = get_logger(__name__)

CSV_FIELDS = ["document_number", "full_name", "kind", "role", "level", "grade_section", "status"]


@dataclass(frozen=True)
class UserListView:
    page: Page[Person]
    tags: tuple[SearchTag, ...]
    sort: Optional[SortConfig]


class UserDirectoryService:
    def __init__(
        self,
        roster: RosterRepository,
        *,
        parser: Optional[QueryTagParser] = None,
        predicate_factory: Optional[TagPredicateFactory] = None,
        page_size: int = USERS_PAGE_SIZE,
        year: int = ACADEMIC_YEAR,
        school_name: str = SCHOOL_NAME,
    ):
        self._roster = roster
        self._parser = parser or QueryTagParser()
        self._factory = predicate_factory or TagPredicateFactory()
        self._page_size = int(page_size)
        self._year = int(year)
        self._school_name = school_name

    def _population(self, kind: Optional[PersonKind]) -> list[Person]:
        people = self._roster.all_people()
        if kind is None:
            return list(people)
        return [p for p in people if p.kind == kind]

    def filtered(
        self,
        *,
        kind: Optional[PersonKind] = None,
        raw_tags: Iterable[str] = (),
        sort: Optional[SortConfig] = None,
    ) -> tuple[list[Person], list[SearchTag]]:
        """Population -> tag filter -> sort, without pagination."""
        people = self._population(kind)
        tags = self._parser.build_tags(raw_tags, people)
        predicates = self._factory.for_tags(tags)
        if predicates:
            people = [p for p in people if matches_all(p, predicates)]
        return sort_people(people, sort), tags

    def list_users(
        self,
        *,
        kind: Optional[PersonKind] = None,
        raw_tags: Iterable[str] = (),
        sort: Optional[SortConfig] = None,
        page: int = 1,
    ) -> UserListView:
        rows, tags = self.filtered(kind=kind, raw_tags=raw_tags, sort=sort)
        page = clamp_page(page, total_pages_for(len(rows), self._page_size))
        return UserListView(page=paginate(rows, page, self._page_size), tags=tuple(tags), sort=sort)

    @staticmethod
    def _selection(keys: Iterable) -> set[tuple[PersonKind, str]]:
        """Normalize selected rows into ``(kind, document_number)`` keys."""
        return {(require_choice(kind, PersonKind, "Tipo de usuario"), str(dni)) for kind, dni in keys}

    def delete(self, keys: Iterable[tuple[PersonKind, str]]) -> int:
        selected = self._selection(keys)
        if not selected:
            raise ValidationError("No hay usuarios seleccionados")
        before = len(self._roster.all_people())
        self._roster.dispatch(remove_people, selected)
        removed = before - len(self._roster.all_people())
        logger.info("bulk delete: requested=%d removed=%d", len(selected), removed)
        return removed

    def generate_carnets(self, keys: Iterable[tuple[PersonKind, str]]) -> bytes:
        """ID-card PDF for the selected rows that are students, in roster order."""
        selected = self._selection(keys)
        students = [p for p in self._roster.students() if person_key(p) in selected]
        return pdf.id_cards_pdf(students, year=self._year, school_name=self._school_name)

    def export_rows(
        self,
        *,
        kind: Optional[PersonKind] = None,
        raw_tags: Iterable[str] = (),
        sort: Optional[SortConfig] = None,
    ) -> list[dict]:
        rows, _ = self.filtered(kind=kind, raw_tags=raw_tags, sort=sort)
        out = []
        for p in rows:
            row = to_dict(p)
            out.append({k: row[k] for k in CSV_FIELDS})
        return out
