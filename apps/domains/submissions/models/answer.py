# apps/domains/submissions/models/answer.py
from __future__ import annotations

from django.conf import settings
from django.db import models
from django.utils import timezone

from apps.domains.submissions.exceptions import InvalidTransitionError
from apps.domains.submissions.workflow import WorkflowEvent, WorkflowState, next_state


class Answer(models.Model):
    """
    Answer = 한 문항에 대한 한 번의 응답 (append-only)

    - 다시 저장하면 기존 row 를 고치지 않고 새 row 를 추가한다
    - "현재 답안" = (submission, question) 별 created_at 최신 row
    - workflow_state 는 submission 과 같은 3-state 를 따른다 (보통 submission cascade 가 구동)
    """

    submission = models.ForeignKey(
        "submissions.Submission",
        on_delete=models.CASCADE,
        related_name="answers",
    )
    question = models.ForeignKey(
        "assessments.Question",
        on_delete=models.CASCADE,
        related_name="answers",
    )

    workflow_state = models.CharField(
        max_length=20,
        choices=WorkflowState.choices,
        default=WorkflowState.ATTEMPTING,
    )

    payload = models.JSONField(default=dict, blank=True)

    grade = models.FloatField(null=True, blank=True)
    grader = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="graded_answers",
    )

    submitted_at = models.DateTimeField(null=True, blank=True)
    graded_at = models.DateTimeField(null=True, blank=True)

    # auto_now_add 대신 default: 이관/테스트에서 명시 지정 가능해야 함
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    # cascade 에서 save(update_fields=...) 로 사용
    WORKFLOW_FIELDS = ["workflow_state", "submitted_at", "graded_at", "updated_at"]

    class Meta:
        db_table = "submissions_answer"
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(
                fields=["submission", "question", "created_at"],
                name="sub_answer_latest_idx",
            ),
        ]

    def __str__(self) -> str:
        return (
            f"Answer({self.id}) submission={self.submission_id} "
            f"q={self.question_id} state={self.workflow_state}"
        )

    # ---------------------------------------------
    # state predicates
    # ---------------------------------------------

    @property
    def is_attempting(self) -> bool:
        return self.workflow_state == WorkflowState.ATTEMPTING

    @property
    def is_submitted(self) -> bool:
        return self.workflow_state == WorkflowState.SUBMITTED

    @property
    def is_graded(self) -> bool:
        return self.workflow_state == WorkflowState.GRADED

    # ---------------------------------------------
    # events (저장은 호출자 책임)
    # ---------------------------------------------

    def finalise(self, *, force: bool = False) -> None:
        self._fire(WorkflowEvent.FINALISE, force=force)
        self.submitted_at = timezone.now()

    def publish(self, *, force: bool = False) -> None:
        self._fire(WorkflowEvent.PUBLISH, force=force)
        self.graded_at = timezone.now()

    def unsubmit(self, *, force: bool = False) -> None:
        """
        Reverts the answer to attempting.

        A graded answer is locked; only the submission-level unsubmit cascade
        may reopen it, and it does so with ``force=True``.
        """
        self._fire(WorkflowEvent.UNSUBMIT, force=force)
        self.submitted_at = None
        self.graded_at = None

    def _fire(self, event: str, *, force: bool) -> None:
        target = next_state(self.workflow_state, event)
        if not force:
            self._validate_state_change(event, target)
        self.workflow_state = target

    def _validate_state_change(self, event: str, target: str) -> None:
        if self.is_graded and target == WorkflowState.ATTEMPTING:
            raise InvalidTransitionError(
                event=event,
                state=self.workflow_state,
                message="A graded answer can only be reopened by unsubmitting its submission.",
            )
