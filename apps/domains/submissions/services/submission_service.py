# apps/domains/submissions/services/submission_service.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from django.db import IntegrityError, transaction

from apps.domains.courses.models import CourseUser
from apps.domains.experience.models import ExperiencePointsRecord
from apps.domains.submissions.exceptions import (
    DuplicateSubmissionError,
    SubmissionValidationError,
)
from apps.domains.submissions.models import Submission
from apps.domains.submissions.services.validators import (
    SubmissionCreateValidator,
    find_existing_submission_id,
)

logger = logging.getLogger(__name__)


@dataclass
class SubmissionCreateResult:
    submission: Optional[Submission] = None
    errors: List[SubmissionValidationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.submission is not None and not self.errors


class SubmissionService:
    """
    submission 생성의 유일한 퍼블릭 서비스
    - 검증 실패는 예외가 아니라 result.errors 로 돌려준다 (아무것도 저장하지 않음)
    - 생성 알림은 post_save signal 이 담당
    """

    @staticmethod
    def create(*, assessment, creator, course_user: Optional[CourseUser] = None) -> SubmissionCreateResult:
        if course_user is None:
            course_user = (
                CourseUser.objects
                .filter(course_id=assessment.course_id, user_id=creator.pk)
                .first()
            )

        errors = SubmissionCreateValidator(
            assessment=assessment,
            creator=creator,
            course_user=course_user,
        ).validate()
        if errors:
            return SubmissionCreateResult(errors=errors)

        try:
            with transaction.atomic():
                record = ExperiencePointsRecord.objects.create(course_user=course_user)
                submission = Submission.objects.create(
                    assessment=assessment,
                    creator=creator,
                    experience_points_record=record,
                )
        except IntegrityError:
            # 검증 통과 후 동시 생성 → partial unique constraint 가 막음
            existing_id = find_existing_submission_id(assessment, creator)
            logger.info(
                "submission create race lost assessment_id=%s creator_id=%s existing_id=%s",
                assessment.pk,
                creator.pk,
                existing_id,
            )
            return SubmissionCreateResult(
                errors=[DuplicateSubmissionError(existing_submission_id=existing_id)]
            )

        logger.info(
            "submission created submission_id=%s assessment_id=%s creator_id=%s",
            submission.id,
            assessment.pk,
            creator.pk,
        )
        return SubmissionCreateResult(submission=submission)


def create_submission(*, assessment, creator, course_user: Optional[CourseUser] = None) -> SubmissionCreateResult:
    return SubmissionService.create(
        assessment=assessment,
        creator=creator,
        course_user=course_user,
    )
