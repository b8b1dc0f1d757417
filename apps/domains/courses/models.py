# PATH: apps/domains/courses/models.py
from __future__ import annotations

from django.conf import settings
from django.db import models

from apps.api.common.models import TimestampModel


class Course(TimestampModel):
    title = models.CharField(max_length=255)

    class Meta:
        db_table = "courses_course"
        ordering = ["-created_at"]

    def __str__(self):
        return self.title


class CourseUser(TimestampModel):
    """
    User ↔ Course 관계 SSOT

    - course 내 role 판별(학생/조교/관리자/참관)은 여기서만 한다
    - phantom: 실제 수강생이 아닌 테스트용 학생 계정
    """

    class Role(models.TextChoices):
        STUDENT = "student", "Student"
        TEACHING_ASSISTANT = "teaching_assistant", "Teaching Assistant"
        MANAGER = "manager", "Manager"
        OWNER = "owner", "Owner"
        OBSERVER = "observer", "Observer"

    STAFF_ROLES = (
        Role.TEACHING_ASSISTANT,
        Role.MANAGER,
        Role.OWNER,
    )

    course = models.ForeignKey(
        Course,
        on_delete=models.CASCADE,
        related_name="course_users",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="course_users",
    )

    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.STUDENT,
    )
    phantom = models.BooleanField(default=False)

    class Meta:
        db_table = "courses_course_user"
        constraints = [
            models.UniqueConstraint(
                fields=["course", "user"],
                name="unique_course_user",
            )
        ]

    def __str__(self) -> str:
        return f"{self.user} @ {self.course} ({self.role})"

    @property
    def is_student(self) -> bool:
        return self.role == self.Role.STUDENT

    @property
    def is_real_student(self) -> bool:
        return self.is_student and not self.phantom

    @property
    def is_staff_role(self) -> bool:
        return self.role in self.STAFF_ROLES

    @classmethod
    def staff_of(cls, course: Course, user) -> bool:
        if not user or not user.is_authenticated:
            return False
        return cls.objects.filter(
            course=course,
            user=user,
            role__in=cls.STAFF_ROLES,
        ).exists()
