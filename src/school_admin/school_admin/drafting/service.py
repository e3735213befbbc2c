from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..core.constants import DEFAULT_SCHOOL_CODE, DEFAULT_SCHOOL_NAME
from ..core.exceptions import DraftingError
from ..events.model import SchoolEvent
from ..students.grades import grades_for_term
from ..students.model import Student
from .client import TextDrafter
from .prompts import (
    GENERIC_FALLBACK,
    REPORT_COMMENT_FALLBACK,
    event_email_fallback,
    event_email_prompt,
    report_comment_prompt,
)

logger = logging.getLogger(__name__)


class DraftingService:
    """Drafts comments and e-mails for human review.

    Always returns usable text: any drafter failure (or no drafter at all)
    falls back to a fixed paragraph. Drafts never touch the store.
    """

    def __init__(
        self,
        drafter: Optional[TextDrafter],
        *,
        school_name: str = DEFAULT_SCHOOL_NAME,
        school_code: str = DEFAULT_SCHOOL_CODE,
    ):
        self._drafter = drafter
        self._school_name = school_name
        self._school_code = school_code

    def draft_text(self, prompt: str, *, fallback: str = GENERIC_FALLBACK) -> str:
        if self._drafter is None:
            return fallback
        try:
            text = self._drafter.generate(prompt)
        except DraftingError as e:
            logger.warning("Drafting failed, using fallback text: %s", e)
            return fallback
        except Exception:
            # any other drafter failure also yields the fallback
            logger.warning("Drafter raised unexpectedly, using fallback text", exc_info=True)
            return fallback
        if not isinstance(text, str):
            return fallback
        return text.strip() or fallback

    def draft_report_comment(self, student: Student, *, term: Optional[int] = None) -> str:
        if term is not None:
            student = replace(student, grades=grades_for_term(student.grades, term))
        prompt = report_comment_prompt(student, school_name=self._school_name)
        return self.draft_text(prompt, fallback=REPORT_COMMENT_FALLBACK)

    def draft_event_email(self, event: SchoolEvent) -> str:
        prompt = event_email_prompt(event, school_name=self._school_name, school_code=self._school_code)
        return self.draft_text(prompt, fallback=event_email_fallback(event, school_code=self._school_code))
