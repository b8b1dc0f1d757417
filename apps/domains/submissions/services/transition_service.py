# apps/domains/submissions/services/transition_service.py
from __future__ import annotations

import logging
from typing import Callable, Dict

from django.db import transaction

from apps.domains.submissions.models import Answer, Submission
from apps.domains.submissions.services.latest_answers import resolve_latest_answers
from apps.domains.submissions.workflow import WorkflowEvent, next_state

logger = logging.getLogger(__name__)


# ==================================================
# cascade handlers
# - submission 자신의 상태는 이미 바뀐 뒤 호출된다
# - answer 저장까지 여기서 한다 (같은 transaction)
# ==================================================

def _finalise_answers(submission: Submission) -> None:
    for answer in list(submission.answers.all()):
        if answer.is_attempting:
            answer.finalise()
            answer.save(update_fields=Answer.WORKFLOW_FIELDS)


def _publish_answers(submission: Submission) -> None:
    for answer in list(submission.answers.all()):
        if answer.is_submitted:
            answer.publish()
            answer.save(update_fields=Answer.WORKFLOW_FIELDS)


def _unsubmit_answers(submission: Submission) -> None:
    # 예전 답안(이력)은 건드리지 않는다: 문항별 최신 답안만 되돌림
    latest = resolve_latest_answers(submission.answers.all())
    for answer in latest.values():
        if answer.is_submitted or answer.is_graded:
            answer.unsubmit(force=True)
            answer.save(update_fields=Answer.WORKFLOW_FIELDS)

    record = submission.experience_points_record
    record.clear()
    record.save(update_fields=["points_awarded", "awarded_at", "awarder", "updated_at"])


CASCADES: Dict[str, Callable[[Submission], None]] = {
    WorkflowEvent.FINALISE: _finalise_answers,
    WorkflowEvent.PUBLISH: _publish_answers,
    WorkflowEvent.UNSUBMIT: _unsubmit_answers,
}


class SubmissionTransitionService:
    """
    Submission 상태 전이 SSOT

    - submission row 를 select_for_update 로 잠그고 하나의 transaction 안에서
      상태 변경 + answer cascade + 저장을 끝낸다
    - 실패하면 전부 rollback: 호출자가 넘긴 instance 도 건드리지 않는다
    - submitted 로 바뀌면 Submission.save 가 auto-grading 을 commit 이후로 예약
    """

    @staticmethod
    def transition(submission: Submission, event: str) -> Submission:
        with transaction.atomic():
            locked = (
                Submission.objects
                .select_for_update()
                .select_related("experience_points_record")
                .get(pk=submission.pk)
            )
            source = locked.workflow_state
            target = next_state(source, event)

            locked.workflow_state = target
            CASCADES[event](locked)
            locked.save(update_fields=["workflow_state", "updated_at"])

        logger.info(
            "submission transition submission_id=%s event=%s %s -> %s",
            locked.pk,
            event,
            source,
            target,
        )

        submission.refresh_from_db()
        return submission


def transition(submission: Submission, event: str) -> Submission:
    return SubmissionTransitionService.transition(submission, event)


def finalise(submission: Submission) -> Submission:
    return transition(submission, WorkflowEvent.FINALISE)


def publish(submission: Submission) -> Submission:
    return transition(submission, WorkflowEvent.PUBLISH)


def unsubmit(submission: Submission) -> Submission:
    return transition(submission, WorkflowEvent.UNSUBMIT)
