from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..core.constants import ACADEMIC_YEAR, ENROLLMENT_PAGE_SIZE, SCHOOL_NAME
from ..core.enums import EnrollmentStatus, KpiSelector, WizardStep
from ..core.exceptions import NotFoundError, ValidationError
from ..documents import pdf
from ..pagination.paginator import Page, clamp_page, paginate, total_pages_for
from ..people.model import Student
from ..roster.repository import RosterRepository
from ..search import input as search_input
from ..search.factory import TagPredicateFactory
from ..search.input import TagInputState
from ..search.model import SearchTag
from ..search.parser import QueryTagParser
from . import actions
from . import wizard as wz
from .catalogue import require_placement
from .kpis import KpiTile, compute_tiles
from .pipeline import derive_enrollment_view

DNI_PATTERN = re.compile(r"\d{8}")


@dataclass(frozen=True)
class EnrollmentView:
    page: Page[Student]
    tags: tuple[SearchTag, ...]
    active_kpi: Optional[KpiSelector]


class EnrollmentService:
    """Use cases of the Matrícula page.

    Reads go through the derived-view pipeline; writes are dispatched to the
    roster as pure mutations from ``enrollment.actions``.
    """

    ACTIONS = ("transfer", "withdraw", "assign_vacancy", "change_section")

    def __init__(
        self,
        roster: RosterRepository,
        *,
        parser: Optional[QueryTagParser] = None,
        predicate_factory: Optional[TagPredicateFactory] = None,
        page_size: int = ENROLLMENT_PAGE_SIZE,
        year: int = ACADEMIC_YEAR,
        school_name: str = SCHOOL_NAME,
    ):
        self._roster = roster
        self._parser = parser or QueryTagParser()
        self._factory = predicate_factory or TagPredicateFactory()
        self._page_size = int(page_size)
        self._year = int(year)
        self._school_name = school_name

    # -- table ---------------------------------------------------------------

    def kpis(self, active: Optional[KpiSelector] = None) -> list[KpiTile]:
        return compute_tiles(self._roster.students(), active)

    def parse_tags(self, raw_values: Iterable[str]) -> list[SearchTag]:
        return self._parser.build_tags(raw_values, self._roster.students())

    def list_students(
        self,
        *,
        kpi: Optional[KpiSelector] = None,
        raw_tags: Iterable[str] = (),
        page: int = 1,
    ) -> EnrollmentView:
        tags = self.parse_tags(raw_tags)
        rows = derive_enrollment_view(self._roster.students(), kpi, tags, predicate_factory=self._factory)
        page = clamp_page(page, total_pages_for(len(rows), self._page_size))
        return EnrollmentView(page=paginate(rows, page, self._page_size), tags=tuple(tags), active_kpi=kpi)

    def tag_input(self, raw_tags: Iterable[str], text: str, event: str) -> TagInputState:
        """Replay one search-box event (a key or "blur") over the current tags."""
        state = TagInputState(text=text or "", tags=tuple(self.parse_tags(raw_tags)))
        records = self._roster.students()
        if event == "blur":
            return search_input.blur(state, records, self._parser)
        return search_input.handle_key(state, event, records, self._parser)

    def get_student(self, document_number: str) -> Student:
        student = self._roster.find_student(document_number)
        if not student:
            raise NotFoundError(f"Estudiante no encontrado: {document_number}")
        return student

    # -- row actions -----------------------------------------------------------

    def apply_action(self, document_number: str, action: str, params: Optional[dict] = None) -> Student:
        params = params or {}
        if action == "transfer":
            self._roster.dispatch(actions.transfer_student, document_number)
        elif action == "withdraw":
            self._roster.dispatch(actions.withdraw_student, document_number)
        elif action == "assign_vacancy":
            self._roster.dispatch(actions.assign_vacancy, document_number)
        elif action == "change_section":
            self._roster.dispatch(
                actions.change_section,
                document_number,
                str(params.get("grade") or "").strip(),
                str(params.get("section") or "").strip(),
                str(params.get("shift") or "").strip(),
            )
        else:
            raise ValidationError(f"Acción no válida: {action}")
        return self.get_student(document_number)

    # -- documents -------------------------------------------------------------

    def enrollment_form_pdf(self, document_number: str) -> bytes:
        return pdf.enrollment_form_pdf(self.get_student(document_number), school_name=self._school_name)

    def certificate_pdf(self, document_number: str) -> bytes:
        return pdf.certificate_pdf(self.get_student(document_number), year=self._year, school_name=self._school_name)

    # -- new enrollment wizard -------------------------------------------------

    def start_wizard(self) -> wz.WizardState:
        return wz.start()

    def update_wizard(self, state: wz.WizardState, data: dict) -> wz.WizardState:
        merged = {**state.draft.to_dict(), **(data or {})}
        draft = wz.EnrollmentDraft.from_dict(merged)
        return wz.replace_draft(state, draft)

    def next_step(self, state: wz.WizardState) -> wz.WizardState:
        if state.step == WizardStep.IDENTIFICATION:
            state = replace(state, draft=self._check_identification(state.draft))
        elif state.step == WizardStep.LOCATION_CONDITION:
            self._check_location(state.draft)
        return wz.advance(state)

    def previous_step(self, state: wz.WizardState) -> wz.WizardState:
        return wz.go_back(state)

    def finish_wizard(self, state: wz.WizardState) -> wz.WizardState:
        if state.step != WizardStep.CONFIRMATION:
            # Let the state machine report the illegal move.
            return wz.finish(state)
        draft = self._check_identification(state.draft)
        self._check_location(draft)
        self._roster.dispatch(actions.enroll_from_draft, draft, self._year)
        return wz.finish(replace(state, draft=draft), draft.document_number)

    def _find_by_code(self, student_code: str) -> Optional[Student]:
        code = student_code.upper()
        for s in self._roster.students():
            if s.student_code.upper() == code:
                return s
        return None

    def _check_identification(self, draft: wz.EnrollmentDraft) -> wz.EnrollmentDraft:
        """Resolve the student by code or DNI and prefill the draft from the roster."""
        if draft.student_code:
            student = self._find_by_code(draft.student_code)
            if not student:
                raise NotFoundError(f"Código de estudiante no encontrado: {draft.student_code}")
        elif DNI_PATTERN.fullmatch(draft.document_number):
            student = self._roster.find_student(draft.document_number)
        else:
            raise ValidationError("Ingrese un DNI de 8 dígitos o un código de estudiante")

        if student is None:
            require_non_empty(draft.full_name, "Nombre completo")
            actions.split_full_name(draft.full_name)
            parse_iso_date(draft.birth_date)
            return draft

        if student.enrollment_status == EnrollmentStatus.ENROLLED:
            raise ValidationError(f"El estudiante ya tiene una matrícula activa para el año {self._year}")
        return replace(
            draft,
            document_number=student.document_number,
            student_code=student.student_code,
            full_name=student.full_name,
            gender=student.gender,
            birth_date=student.birth_date.strftime("%Y-%m-%d"),
            grade=draft.grade or student.grade,
            section=draft.section or student.section,
        )

    def _check_location(self, draft: wz.EnrollmentDraft) -> None:
        require_placement(draft.grade, draft.section)
        if draft.shift not in wz.SHIFT_CHOICES:
            raise ValidationError(f"Turno no válido: {draft.shift}")
        unknown = [e for e in draft.exonerations if e not in wz.EXONERATION_CHOICES]
        if unknown:
            raise ValidationError(f"Exoneración no válida: {', '.join(unknown)}")
