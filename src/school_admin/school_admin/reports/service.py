from __future__ import annotations

import re
from typing import Optional

from ..attendance.calculator import attendance_rate, present_days
from ..core.constants import DEFAULT_SCHOOL_CODE
from ..store.state import SchoolState
from ..store.store import SchoolStore
from ..students.grades import average_percentage, grades_for_term
from .model import ReportCard, ReportSettings

GUARDIAN_PORTAL_SETTINGS = ReportSettings(head_of_school="Portal View", signature="", auth_prefix="VERIFIED")


def auth_code(settings: ReportSettings, *, student_id: str, term: int, year: int) -> str:
    return f"{settings.auth_prefix}-{student_id}-{term}-{year}"


def build_report_card(
    state: SchoolState,
    student_id: str,
    *,
    term: int,
    year: int,
    settings: Optional[ReportSettings] = None,
) -> Optional[ReportCard]:
    student = next((s for s in state.students if s.id == student_id), None)
    if student is None:
        return None

    settings = settings or state.report_settings
    grades = grades_for_term(student.grades, term)
    return ReportCard(
        student_id=student.id,
        student_name=student.name,
        grade_level=student.grade_level,
        section=student.section,
        avatar=student.avatar,
        guardian_name=student.guardian_name,
        term=term,
        grades=grades,
        average_percentage=average_percentage(grades),
        attendance_rate=attendance_rate(student.attendance),
        present_days=present_days(student.attendance),
        recorded_days=len(student.attendance),
        head_of_school=settings.head_of_school,
        signature=settings.signature,
        auth_code=auth_code(settings, student_id=student.id, term=term, year=year),
        school_logo=state.school_logo,
    )


def report_filename(student_name: str, *, term: int, school_code: str = DEFAULT_SCHOOL_CODE) -> str:
    safe_name = re.sub(r"\s+", "_", student_name.strip())
    return f"Report_{safe_name}_Term{term}_{school_code}"


def batch_report_filename(*, term: int, year: int, school_code: str = DEFAULT_SCHOOL_CODE) -> str:
    return f"{school_code}_TermReports_T{term}_{year}"


class ReportService:
    """Use cases: report cards, report settings and school branding."""

    def __init__(self, store: SchoolStore, *, school_code: str = DEFAULT_SCHOOL_CODE):
        self._store = store
        self._school_code = school_code

    @property
    def settings(self) -> ReportSettings:
        return self._store.state.report_settings

    @property
    def school_logo(self) -> str:
        return self._store.state.school_logo

    def set_report_settings(self, settings: ReportSettings) -> None:
        self._store.replace(report_settings=settings)

    def set_school_logo(self, logo: str) -> None:
        self._store.replace(school_logo=logo or "")

    def report_card(self, student_id: str, *, term: int, year: int) -> Optional[ReportCard]:
        return build_report_card(self._store.state, student_id, term=term, year=year)

    def all_report_cards(self, *, term: int, year: int) -> list[ReportCard]:
        state = self._store.state
        return [build_report_card(state, s.id, term=term, year=year) for s in state.students]

    def guardian_report_card(self, student_id: Optional[str], *, term: int, year: int) -> Optional[ReportCard]:
        """Guardian view of one ward: defaults to S001, else the first student."""

        state = self._store.state
        if not state.students:
            return None
        ids = {s.id for s in state.students}
        if student_id:
            if student_id not in ids:
                return None
            ward_id = student_id
        else:
            ward_id = "S001" if "S001" in ids else state.students[0].id
        return build_report_card(state, ward_id, term=term, year=year, settings=GUARDIAN_PORTAL_SETTINGS)

    def filename_for(self, card: ReportCard) -> str:
        return report_filename(card.student_name, term=card.term, school_code=self._school_code)

    def batch_filename(self, *, term: int, year: int) -> str:
        return batch_report_filename(term=term, year=year, school_code=self._school_code)
