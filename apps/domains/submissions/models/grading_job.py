# apps/domains/submissions/models/grading_job.py
from __future__ import annotations

import uuid

from django.db import models

from apps.api.common.models import TimestampModel


class GradingJob(TimestampModel):
    """
    Auto-grading 요청 1건 = row 1개

    - id 가 곧 celery task_id (외부에 돌려주는 handle)
    - 같은 submission 에 대해 여러 job 이 동시에 존재할 수 있다 (dedup 안 함)
    """

    class Status(models.TextChoices):
        SUBMITTED = "submitted", "Submitted"
        RUNNING = "running", "Running"
        COMPLETED = "completed", "Completed"
        ERRORED = "errored", "Errored"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    submission = models.ForeignKey(
        "submissions.Submission",
        on_delete=models.CASCADE,
        related_name="grading_jobs",
    )

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.SUBMITTED,
    )
    error_message = models.TextField(blank=True)

    class Meta:
        db_table = "submissions_grading_job"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"GradingJob({self.id}) submission={self.submission_id} status={self.status}"

    @property
    def is_finished(self) -> bool:
        return self.status in (self.Status.COMPLETED, self.Status.ERRORED)

    def _set_status(self, status: str, error_message: str = "") -> None:
        self.status = status
        self.error_message = error_message
        self.save(update_fields=["status", "error_message", "updated_at"])

    def mark_running(self) -> None:
        self._set_status(self.Status.RUNNING)

    def mark_completed(self) -> None:
        self._set_status(self.Status.COMPLETED)

    def mark_retrying(self, error_message: str) -> None:
        # 재시도 대기: 다음 실행이 다시 채점하도록 submitted 로 되돌린다
        self._set_status(self.Status.SUBMITTED, error_message[:2000])

    def mark_errored(self, error_message: str) -> None:
        self._set_status(self.Status.ERRORED, error_message[:2000])
