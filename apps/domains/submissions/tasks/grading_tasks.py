# apps/domains/submissions/tasks/grading_tasks.py
from celery import shared_task
from django.db import DatabaseError

from apps.domains.submissions.services.grading_service import AutoGradingService


@shared_task(
    bind=True,
    acks_late=True,
    autoretry_for=(DatabaseError,),
    max_retries=3,
    retry_backoff=True,
)
def grade_submission_task(self, job_id: str) -> bool:
    # submission 상태는 반드시 실행 시점에 다시 읽는다 (id 만 전달)
    AutoGradingService.run(job_id, retryable=self.request.retries < self.max_retries)
    return True
