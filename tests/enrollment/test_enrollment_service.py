from __future__ import annotations

import pytest

from school_dashboard.core.enums import EnrollmentStatus, EnrollmentType, KpiSelector, UserStatus, WizardStep
from school_dashboard.core.exceptions import NotFoundError, ValidationError, WizardTransitionError
from school_dashboard.enrollment.service import EnrollmentService


@pytest.fixture
def service(roster):
    return EnrollmentService(roster, page_size=7)


def test_list_students_paginates_sorted_view(service):
    view = service.list_students(page=2)

    assert view.page.total_items == 10
    assert view.page.total_pages == 2
    assert len(view.page.items) == 3


def test_list_students_clamps_out_of_range_page(service):
    view = service.list_students(kpi=KpiSelector.VACANCIES, page=9)

    assert view.page.page == 1
    assert [s.document_number for s in view.page.items] == ["70000007", "70000005", "70000002"]


def test_list_students_reports_parsed_tags(service):
    view = service.list_students(raw_tags=["Matriculado", "xyz-not-a-name"])

    assert [t.is_valid for t in view.tags] == [True, False]
    assert view.page.total_items == 4


def test_empty_result_is_not_an_error(service):
    view = service.list_students(kpi=KpiSelector.TRANSFERS, raw_tags=["Pendiente"])

    assert view.page.is_empty
    assert view.page.page == 1


def test_tag_input_event_commits_and_clears(service):
    state = service.tag_input(["Matriculado"], "garcia", "Enter")

    assert state.text == ""
    assert [t.value for t in state.tags] == ["Matriculado", "garcia"]
    assert [t.value for t in service.tag_input(["Matriculado"], "", "Backspace").tags] == []


def test_transfer_updates_status_type_and_user_status(service, roster):
    student = service.apply_action("70000001", "transfer")

    assert student.enrollment_status == EnrollmentStatus.TRANSFERRED
    assert student.enrollment_type == EnrollmentType.TRANSFER
    assert student.status == UserStatus.INACTIVE
    assert roster.find_student("70000001") == student


def test_withdraw_twice_is_rejected(service):
    service.apply_action("70000001", "withdraw")

    with pytest.raises(ValidationError):
        service.apply_action("70000001", "withdraw")


def test_assign_vacancy_only_from_pre_enrolled(service):
    student = service.apply_action("70000009", "assign_vacancy")
    assert student.enrollment_status == EnrollmentStatus.ENROLLED
    assert student.status == UserStatus.ACTIVE

    with pytest.raises(ValidationError):
        service.apply_action("70000002", "assign_vacancy")


def test_change_section_checks_catalogue(service):
    student = service.apply_action("70000001", "change_section", {"grade": "1° Año", "section": "H"})
    assert (student.grade, student.section) == ("1° Año", "H")

    with pytest.raises(ValidationError):
        service.apply_action("70000001", "change_section", {"grade": "2° Año", "section": "H"})


def test_unknown_action_and_student(service):
    with pytest.raises(ValidationError):
        service.apply_action("70000001", "rectification")
    with pytest.raises(NotFoundError):
        service.apply_action("99999999", "withdraw")


def test_wizard_enrolls_existing_pending_student(service, roster):
    state = service.update_wizard(service.start_wizard(), {"document_number": "70000002"})
    state = service.next_step(state)

    assert state.step == WizardStep.LOCATION_CONDITION
    assert state.draft.full_name == "QUISPE MAMANI, JUAN"

    state = service.update_wizard(state, {"grade": "4° Año", "section": "F", "exonerations": ["Religión"]})
    state = service.next_step(state)
    state = service.finish_wizard(state)

    assert state.step == WizardStep.SUCCESS
    student = roster.find_student("70000002")
    assert student.enrollment_status == EnrollmentStatus.ENROLLED
    assert (student.grade, student.section) == ("4° Año", "F")


def test_wizard_adds_new_student(service, roster):
    state = service.update_wizard(
        service.start_wizard(),
        {
            "document_number": "71112222",
            "full_name": "Paredes Luna, Nicolas",
            "birth_date": "2013-02-01",
            "enrollment_type": "Ingresante",
        },
    )
    state = service.next_step(state)
    state = service.update_wizard(state, {"grade": "1° Año", "section": "B"})
    state = service.finish_wizard(service.next_step(state))

    student = roster.find_student("71112222")
    assert state.enrolled_document_number == "71112222"
    assert student.full_name == "PAREDES LUNA, NICOLAS"
    assert student.student_code == "S202571112222"
    assert student.enrollment_type == EnrollmentType.NEW_ENTRANT


def test_wizard_rejects_already_enrolled_student(service):
    state = service.update_wizard(service.start_wizard(), {"document_number": "70000001"})

    with pytest.raises(ValidationError):
        service.next_step(state)


def test_wizard_identification_needs_dni_or_code(service):
    with pytest.raises(ValidationError):
        service.next_step(service.update_wizard(service.start_wizard(), {"document_number": "1234"}))
    with pytest.raises(NotFoundError):
        service.next_step(service.update_wizard(service.start_wizard(), {"student_code": "S2025NOPE"}))

    by_code = service.next_step(service.update_wizard(service.start_wizard(), {"student_code": "s202570000005"}))
    assert by_code.draft.document_number == "70000005"


def test_wizard_location_requires_catalogue_section(service):
    state = service.next_step(service.update_wizard(service.start_wizard(), {"document_number": "70000005"}))
    state = service.update_wizard(state, {"grade": "3 AÑOS", "section": "Rosas"})

    with pytest.raises(ValidationError):
        service.next_step(state)


def test_wizard_finish_only_from_confirmation(service):
    with pytest.raises(WizardTransitionError):
        service.finish_wizard(service.start_wizard())


def test_documents_render_pdf_bytes(service):
    assert service.enrollment_form_pdf("70000001").startswith(b"%PDF")
    assert service.certificate_pdf("70000010").startswith(b"%PDF")
    with pytest.raises(NotFoundError):
        service.certificate_pdf("00000000")
