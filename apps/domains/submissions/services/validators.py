# apps/domains/submissions/services/validators.py
from __future__ import annotations

import logging
from typing import List, Optional

from apps.domains.submissions.exceptions import (
    DuplicateSubmissionError,
    EmptyAssessmentError,
    InconsistentUserError,
    SubmissionValidationError,
)

logger = logging.getLogger(__name__)


class SubmissionCreateValidator:
    """
    Submission 생성 시점 검증 (update 시에는 돌지 않음)

    에러는 raise 하지 않고 모은다.
    단, 중복 submission 은 앞서 모은 에러를 모두 버리고 단독 에러로 남긴다
    → 호출자는 "기존 submission 으로 이동" 만 하면 됨
    """

    def __init__(self, *, assessment, creator, course_user=None):
        self.assessment = assessment
        self.creator = creator
        self.course_user = course_user
        self.errors: List[SubmissionValidationError] = []

    def validate(self) -> List[SubmissionValidationError]:
        self.errors = []
        self._validate_consistent_user()
        self._validate_assessment_has_questions()
        self._validate_unique_submission()
        return self.errors

    def _validate_consistent_user(self) -> None:
        course_user = self.course_user
        if course_user is None or course_user.user_id != getattr(self.creator, "pk", None):
            self.errors.append(InconsistentUserError())

    def _validate_assessment_has_questions(self) -> None:
        if not self.assessment.questions.exists():
            self.errors.append(EmptyAssessmentError())

    def _validate_unique_submission(self) -> None:
        existing_id = find_existing_submission_id(self.assessment, self.creator)
        if existing_id is not None:
            logger.info(
                "duplicate submission assessment_id=%s creator_id=%s existing_id=%s",
                self.assessment.pk,
                getattr(self.creator, "pk", None),
                existing_id,
            )
            self.errors.clear()
            self.errors.append(DuplicateSubmissionError(existing_submission_id=existing_id))


def find_existing_submission_id(assessment, creator) -> Optional[int]:
    from apps.domains.submissions.models import Submission

    return (
        Submission.objects.alive()
        .filter(assessment_id=assessment.pk, creator_id=getattr(creator, "pk", None))
        .values_list("id", flat=True)
        .first()
    )
