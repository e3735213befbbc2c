from __future__ import annotations

import pytest

from src.school_admin.school_admin.reports.model import ReportSettings
from src.school_admin.school_admin.reports.service import ReportService, batch_report_filename, report_filename


@pytest.fixture
def service(store) -> ReportService:
    return ReportService(store, school_code="CCIS")


def test_report_card_for_term(service):
    card = service.report_card("S001", term=1, year=2026)

    assert [g.subject for g in card.grades] == ["Mathematics", "Science", "English"]
    assert card.average_percentage == 88.3
    assert card.attendance_rate == 100
    assert card.auth_code == "ES-2024-TR-S001-1-2026"
    assert card.head_of_school == "S. Thompson"


def test_report_card_other_term_has_no_grades(service):
    card = service.report_card("S002", term=2, year=2026)

    assert card.grades == ()
    assert card.average_percentage is None
    assert card.attendance_rate == 50
    assert card.present_days == 1
    assert card.recorded_days == 2


def test_unknown_student_has_no_report(service):
    assert service.report_card("S404", term=1, year=2026) is None


def test_settings_and_logo_flow_into_cards(service, storage):
    service.set_report_settings(ReportSettings(head_of_school="A. Mensah", signature="sig", auth_prefix="CC-26"))
    service.set_school_logo("data:image/png;base64,AAA")

    cards = service.all_report_cards(term=1, year=2027)
    assert [c.auth_code for c in cards] == ["CC-26-S001-1-2027", "CC-26-S002-1-2027"]
    assert all(c.school_logo == "data:image/png;base64,AAA" for c in cards)
    assert '"headOfSchool": "A. Mensah"' in storage.get("cc_report_settings")


def test_guardian_view_defaults_to_first_ward(service):
    card = service.guardian_report_card(None, term=1, year=2026)

    assert card.student_id == "S001"
    assert card.head_of_school == "Portal View"
    assert card.auth_code == "VERIFIED-S001-1-2026"
    assert service.guardian_report_card("S404", term=1, year=2026) is None
    assert service.guardian_report_card("S002", term=1, year=2026).student_id == "S002"


def test_filenames():
    assert report_filename("Alex  Johnson", term=2, school_code="CCIS") == "Report_Alex_Johnson_Term2_CCIS"
    assert batch_report_filename(term=3, year=2026, school_code="CCIS") == "CCIS_TermReports_T3_2026"
