"""New-enrollment wizard state machine.

Identification -> LocationCondition -> Confirmation -> Success. Moves are
one step at a time; Success is terminal. Step-specific business validation
lives in ``EnrollmentService``; this module only knows which moves exist.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Optional

from ..core.enums import EnrollmentCondition, EnrollmentType, WizardStep
from ..core.exceptions import ValidationError, WizardTransitionError

EXONERATION_CHOICES = ("Religión", "Educación Física")
SHIFT_CHOICES = ("Mañana", "Tarde")


@dataclass(frozen=True)
class EnrollmentDraft:
    document_number: str = ""
    student_code: str = ""
    full_name: str = ""
    gender: str = ""
    birth_date: str = ""
    grade: str = ""
    section: str = ""
    shift: str = "Mañana"
    enrollment_type: EnrollmentType = EnrollmentType.CONTINUING
    condition: EnrollmentCondition = EnrollmentCondition.PROMOTED
    exonerations: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        data = asdict(self)
        data["enrollment_type"] = self.enrollment_type.value
        data["condition"] = self.condition.value
        data["exonerations"] = list(self.exonerations)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "EnrollmentDraft":
        try:
            return cls(
                document_number=str(data.get("document_number") or "").strip(),
                student_code=str(data.get("student_code") or "").strip(),
                full_name=str(data.get("full_name") or "").strip(),
                gender=str(data.get("gender") or "").strip(),
                birth_date=str(data.get("birth_date") or "").strip(),
                grade=str(data.get("grade") or "").strip(),
                section=str(data.get("section") or "").strip(),
                shift=str(data.get("shift") or "Mañana").strip(),
                enrollment_type=EnrollmentType(data.get("enrollment_type") or EnrollmentType.CONTINUING.value),
                condition=EnrollmentCondition(data.get("condition") or EnrollmentCondition.PROMOTED.value),
                exonerations=tuple(data.get("exonerations") or ()),
            )
        except ValueError as e:
            raise ValidationError(f"Datos de matrícula no válidos: {e}")


@dataclass(frozen=True)
class WizardState:
    step: WizardStep = WizardStep.IDENTIFICATION
    draft: EnrollmentDraft = field(default_factory=EnrollmentDraft)
    # Document number of the student created/updated by ``finish``.
    enrolled_document_number: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.step == WizardStep.SUCCESS

    def to_dict(self) -> dict:
        return {
            "step": int(self.step),
            "draft": self.draft.to_dict(),
            "enrolled_document_number": self.enrolled_document_number,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "WizardState":
        if not data:
            return cls()
        try:
            step = WizardStep(int(data.get("step", WizardStep.IDENTIFICATION)))
        except (TypeError, ValueError):
            raise ValidationError("Paso de matrícula no válido")
        return cls(
            step=step,
            draft=EnrollmentDraft.from_dict(data.get("draft") or {}),
            enrolled_document_number=data.get("enrolled_document_number"),
        )


_FORWARD = {
    WizardStep.IDENTIFICATION: WizardStep.LOCATION_CONDITION,
    WizardStep.LOCATION_CONDITION: WizardStep.CONFIRMATION,
}
_BACKWARD = {
    WizardStep.CONFIRMATION: WizardStep.LOCATION_CONDITION,
    WizardStep.LOCATION_CONDITION: WizardStep.IDENTIFICATION,
}


def start() -> WizardState:
    return WizardState()


def advance(state: WizardState) -> WizardState:
    nxt = _FORWARD.get(state.step)
    if nxt is None:
        raise WizardTransitionError(f"No se puede avanzar desde el paso {int(state.step)}")
    return replace(state, step=nxt)


def go_back(state: WizardState) -> WizardState:
    prev = _BACKWARD.get(state.step)
    if prev is None:
        raise WizardTransitionError(f"No se puede retroceder desde el paso {int(state.step)}")
    return replace(state, step=prev)


def finish(state: WizardState, enrolled_document_number: Optional[str] = None) -> WizardState:
    if state.step != WizardStep.CONFIRMATION:
        raise WizardTransitionError("La matrícula solo se finaliza desde la confirmación")
    return replace(state, step=WizardStep.SUCCESS, enrolled_document_number=enrolled_document_number)


def update_draft(state: WizardState, **changes) -> WizardState:
    return replace_draft(state, replace(state.draft, **changes))


def replace_draft(state: WizardState, draft: EnrollmentDraft) -> WizardState:
    if state.is_terminal:
        raise WizardTransitionError("La matrícula ya fue registrada")
    return replace(state, draft=draft)
