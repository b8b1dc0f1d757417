# PATH: apps/domains/experience/models.py
from __future__ import annotations

from django.conf import settings
from django.db import models
from django.utils import timezone

from apps.api.common.models import TimestampModel


class ExperiencePointsRecord(TimestampModel):
    """
    경험치(포인트) 지급 기록

    - 계산 로직 없음: 누가, 얼마를, 언제 지급했는지만 저장
    - submission 과 1:1 (Submission.experience_points_record)
    """

    course_user = models.ForeignKey(
        "courses.CourseUser",
        on_delete=models.CASCADE,
        related_name="experience_points_records",
    )

    points_awarded = models.IntegerField(null=True, blank=True)
    awarded_at = models.DateTimeField(null=True, blank=True)
    awarder = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="awarded_experience_points_records",
    )
    reason = models.CharField(max_length=255, blank=True)

    class Meta:
        db_table = "experience_points_record"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"ExperiencePointsRecord({self.id}) {self.course_user_id}: {self.points_awarded}"

    @property
    def is_awarded(self) -> bool:
        return self.points_awarded is not None

    def award(self, points: int, *, awarder=None) -> None:
        self.points_awarded = int(points)
        self.awarded_at = timezone.now()
        self.awarder = awarder

    def clear(self) -> None:
        self.points_awarded = None
        self.awarded_at = None
        self.awarder = None
