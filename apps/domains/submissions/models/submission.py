# apps/domains/submissions/models/submission.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from django.conf import settings
from django.db import models
from django.db.models import F, Max, Q

from apps.api.common.models import TimestampModel
from apps.domains.submissions.services.latest_answers import (
    compute_grade,
    resolve_latest_answers,
)
from apps.domains.submissions.workflow import WorkflowState

if TYPE_CHECKING:
    from .answer import Answer

logger = logging.getLogger(__name__)


class SubmissionQuerySet(models.QuerySet):
    def alive(self):
        return self.filter(deleted_at__isnull=True)

    def by_user(self, user):
        """points record 의 course user 기준"""
        return self.filter(experience_points_record__course_user__user=user)

    def by_users(self, user_ids):
        return self.filter(creator_id__in=user_ids)

    def from_course(self, course):
        return self.filter(assessment__course=course)

    def confirmed(self):
        """submitted 이상 (graded 포함)"""
        return self.filter(
            workflow_state__in=[WorkflowState.SUBMITTED, WorkflowState.GRADED]
        )

    def ordered_by_date(self, direction: str = "desc"):
        return self.order_by("-created_at" if direction == "desc" else "created_at")

    def with_timestamps(self):
        # submitted_at / graded_at 은 저장하지 않는다: answers 에서 매번 계산
        return self.annotate(
            latest_submitted_at=Max("answers__submitted_at"),
            latest_graded_at=Max("answers__graded_at"),
        )

    def ordered_by_submitted_date(self):
        return self.with_timestamps().order_by(
            F("latest_submitted_at").desc(nulls_last=True)
        )


class Submission(TimestampModel):
    """
    Submission = 한 learner 의 한 assessment 응시 기록

    - workflow_state: attempting → submitted → graded (unsubmit 으로 attempting 복귀)
    - 상태 전이는 반드시 SubmissionTransitionService 경유 (cascade + lock)
    - submitted 로 "바뀐" save 에서만 auto-grading job 을 예약한다 (commit 후 발행)
    """

    assessment = models.ForeignKey(
        "assessments.Assessment",
        on_delete=models.CASCADE,
        related_name="submissions",
    )
    creator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="assessment_submissions",
    )
    experience_points_record = models.OneToOneField(
        "experience.ExperiencePointsRecord",
        on_delete=models.CASCADE,
        related_name="submission",
    )

    workflow_state = models.CharField(
        max_length=20,
        choices=WorkflowState.choices,
        default=WorkflowState.ATTEMPTING,
    )

    deleted_at = models.DateTimeField(null=True, blank=True)

    objects = SubmissionQuerySet.as_manager()

    class Meta:
        db_table = "submissions_submission"
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["assessment", "creator"],
                condition=Q(deleted_at__isnull=True),
                name="unique_active_submission_per_creator",
            ),
        ]
        indexes = [
            models.Index(fields=["assessment", "creator"], name="sub_assessment_creator_idx"),
            models.Index(fields=["workflow_state"], name="sub_workflow_state_idx"),
        ]

    def __str__(self) -> str:
        return (
            f"Submission({self.id}) assessment={self.assessment_id} "
            f"by user={self.creator_id} state={self.workflow_state}"
        )

    # ---------------------------------------------
    # change tracking
    # ---------------------------------------------

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # DB 에서 읽어온 시점의 workflow_state (변경 감지용), 새 instance 는 None
        self._loaded_workflow_state: Optional[str] = None

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        instance._loaded_workflow_state = dict(zip(field_names, values)).get("workflow_state")
        return instance

    def refresh_from_db(self, using=None, fields=None, **kwargs):
        super().refresh_from_db(using=using, fields=fields, **kwargs)
        if fields is None or "workflow_state" in fields:
            self._loaded_workflow_state = self.workflow_state

    @property
    def workflow_state_changed(self) -> bool:
        if "workflow_state" in self.get_deferred_fields():
            return False
        return self.workflow_state != self._loaded_workflow_state

    def save(self, *args, **kwargs):
        state_changed = self.workflow_state_changed
        super().save(*args, **kwargs)
        self._loaded_workflow_state = self.workflow_state

        if state_changed and self.workflow_state == WorkflowState.SUBMITTED:
            self._schedule_auto_grade()

    def _schedule_auto_grade(self) -> None:
        if not getattr(settings, "SUBMISSION_AUTO_GRADE_ENABLED", True):
            logger.info("auto grade disabled, skip submission_id=%s", self.pk)
            return

        from apps.domains.submissions.services.dispatcher import auto_grade

        # job row 는 현재 transaction 에 기록, task 발행은 commit 이후
        auto_grade(self)

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

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    # ---------------------------------------------
    # derived values (read only)
    # ---------------------------------------------

    @property
    def latest_answers(self) -> List["Answer"]:
        """The current answer of every answered question."""
        return list(resolve_latest_answers(self.answers.all()).values())

    @property
    def grade(self) -> float:
        return compute_grade(self.answers.all())

    @property
    def submitted_at(self):
        if hasattr(self, "latest_submitted_at"):
            return self.latest_submitted_at
        return self.answers.aggregate(v=Max("submitted_at"))["v"]

    @property
    def graded_at(self):
        if hasattr(self, "latest_graded_at"):
            return self.latest_graded_at
        return self.answers.aggregate(v=Max("graded_at"))["v"]

    @property
    def course_user(self):
        return self.experience_points_record.course_user

    @property
    def points_awarded(self) -> Optional[int]:
        return self.experience_points_record.points_awarded
