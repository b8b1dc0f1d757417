from django.db import models

from apps.api.common.models import TimestampModel


class Assessment(TimestampModel):
    """
    평가(시험/과제) 정의

    autograded=True 이면 auto-grading 완료 시 submission 을 바로 publish 한다.
    (모든 문항이 auto gradable 이어야 함 → Question.clean 에서 강제)
    """

    course = models.ForeignKey(
        "courses.Course",
        on_delete=models.CASCADE,
        related_name="assessments",
    )

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)

    autograded = models.BooleanField(default=False)

    class Meta:
        db_table = "assessments_assessment"
        ordering = ["-created_at"]

    def __str__(self):
        return self.title

    @property
    def has_questions(self) -> bool:
        return self.questions.exists()
