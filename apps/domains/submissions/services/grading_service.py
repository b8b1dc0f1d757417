# PATH: apps/domains/submissions/services/grading_service.py
from __future__ import annotations

import logging

from django.db import DatabaseError, transaction

from apps.domains.submissions.models import GradingJob, Submission
from apps.domains.submissions.services.latest_answers import resolve_latest_answers
from apps.domains.submissions.services.transition_service import SubmissionTransitionService
from apps.domains.submissions.workflow import WorkflowEvent

logger = logging.getLogger(__name__)


class AutoGradingService:
    """
    Worker 측 auto-grading

    - job 생성 시점의 데이터를 믿지 않는다: 실행 시점에 DB 에서 다시 읽음
    - 같은 submission 의 job 이 중복/재시도 되어도 결과는 같다 (grade 덮어쓰기)
    - grader 없는 문항(NotImplementedError)은 설정 오류 → job errored + 예외 전파
    """

    @staticmethod
    def run(job_id: str, *, retryable: bool = True) -> GradingJob:
        """
        Runs one grading job.

        A ``DatabaseError`` puts the job back to submitted so the task retry
        can grade it again. Any other failure, or a ``DatabaseError`` with
        ``retryable=False`` (the last attempt), marks the job errored.
        """
        job = GradingJob.objects.select_related("submission").get(id=job_id)
        if job.is_finished:
            logger.info("grading job already finished job_id=%s status=%s", job.id, job.status)
            return job

        job.mark_running()
        try:
            AutoGradingService.grade_submission(job.submission)
        except DatabaseError as e:
            if not retryable:
                logger.exception("auto grading failed job_id=%s submission_id=%s", job.id, job.submission_id)
                job.mark_errored(f"{type(e).__name__}: {e}")
                raise
            logger.warning(
                "auto grading will retry job_id=%s submission_id=%s error=%s",
                job.id,
                job.submission_id,
                e,
            )
            job.mark_retrying(f"{type(e).__name__}: {e}")
            raise
        except Exception as e:
            logger.exception("auto grading failed job_id=%s submission_id=%s", job.id, job.submission_id)
            job.mark_errored(f"{type(e).__name__}: {e}")
            raise

        job.mark_completed()
        return job

    @staticmethod
    def grade_submission(submission: Submission) -> int:
        """
        Grades the latest submitted answer of every auto gradable question.
        Returns the number of answers graded.
        """
        with transaction.atomic():
            locked = (
                Submission.objects
                .select_for_update()
                .select_related("assessment")
                .get(pk=submission.pk)
            )
            if not locked.is_submitted:
                # 그 사이 unsubmit / publish 됨 → 할 일 없음
                logger.info(
                    "skip auto grading submission_id=%s state=%s",
                    locked.pk,
                    locked.workflow_state,
                )
                return 0

            latest = resolve_latest_answers(locked.answers.select_related("question"))
            graded = 0
            for answer in latest.values():
                if not answer.is_submitted:
                    continue
                question = answer.question
                if not question.auto_gradable:
                    continue

                grader = question.auto_grader()
                answer.grade = grader.grade(answer)
                answer.grader = None
                answer.save(update_fields=["grade", "grader", "updated_at"])
                graded += 1

            # 답하지 않은 문항이 있으면 publish 하지 않는다
            question_ids = set(locked.assessment.questions.values_list("id", flat=True))
            fully_graded = question_ids.issubset(latest) and all(
                latest[qid].grade is not None for qid in question_ids
            )
            if locked.assessment.autograded and fully_graded:
                SubmissionTransitionService.transition(locked, WorkflowEvent.PUBLISH)

        logger.info("auto graded submission_id=%s answers=%s", submission.pk, graded)
        return graded
