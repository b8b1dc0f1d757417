# PATH: apps/domains/submissions/services/dispatcher.py
from __future__ import annotations

import logging
from functools import partial

from django.db import transaction

from apps.domains.submissions.models import GradingJob, Submission

logger = logging.getLogger(__name__)


def _enqueue(job_id: str) -> None:
    # commit 이후에만 호출됨 → worker 가 rollback 될 상태를 읽을 일이 없다
    from apps.domains.submissions.tasks.grading_tasks import grade_submission_task

    grade_submission_task.apply_async(args=[job_id], task_id=job_id)
    logger.info("grading task enqueued job_id=%s", job_id)


def auto_grade(submission: Submission) -> GradingJob:
    """
    Auto-grading 발행 SSOT

    1) GradingJob row 를 현재 transaction 에 기록 (outbox)
    2) celery 발행은 transaction.on_commit 으로 미룸
       - rollback 되면 job row 도, 발행도 함께 사라진다
       - transaction 밖에서 호출되면 즉시 commit → 즉시 발행

    Returns:
        GradingJob: job.id 가 추적용 handle (= celery task_id)
    """
    with transaction.atomic():
        job = GradingJob.objects.create(submission=submission)
        transaction.on_commit(partial(_enqueue, str(job.id)))

    logger.info(
        "auto grade scheduled submission_id=%s job_id=%s",
        submission.pk,
        job.id,
    )
    return job
