"""
Assessment 관련 알림 발행

- 언제/누구에게 발행할지만 결정한다 (문구/채널은 backend 책임)
- 발행은 transaction.on_commit → rollback 된 생성에 대해 알림이 나가지 않는다
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Optional

from django.db import transaction

from apps.support.messaging.tasks import deliver_notification_task

logger = logging.getLogger(__name__)


class AssessmentNotifier:
    ASSESSMENT_ATTEMPTED = "assessment_attempted"

    @classmethod
    def assessment_attempted(cls, creator, assessment, *, course_user=None) -> bool:
        """
        Emits "submission created" for ``creator`` on ``assessment``.

        Staff, observers and phantom students are not notified about. Returns
        whether an event was scheduled.
        """
        if course_user is None or not course_user.is_real_student:
            logger.debug(
                "assessment_attempted suppressed creator_id=%s assessment_id=%s",
                getattr(creator, "pk", None),
                getattr(assessment, "pk", None),
            )
            return False

        payload = {
            "creator_id": creator.pk,
            "assessment_id": assessment.pk,
            "course_id": assessment.course_id,
        }
        transaction.on_commit(
            partial(deliver_notification_task.delay, cls.ASSESSMENT_ATTEMPTED, payload)
        )
        return True


def assessment_attempted(creator, assessment, *, course_user: Optional[object] = None) -> bool:
    return AssessmentNotifier.assessment_attempted(creator, assessment, course_user=course_user)
