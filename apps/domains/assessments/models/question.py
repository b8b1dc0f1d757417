from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from django.core.exceptions import ValidationError
from django.db import models

from apps.api.common.models import TimestampModel
from apps.domains.assessments.question_kinds import (
    QUESTION_KINDS,
    AutoGrader,
    QuestionKind,
    get_question_kind,
)

from .assessment import Assessment

if TYPE_CHECKING:
    from apps.domains.submissions.models import Answer, Submission


class Question(TimestampModel):
    """
    평가 문항 정의

    - 문항별 동작(auto grading 가능 여부, answer 생성)은 question_type 으로
      선택되는 QuestionKind 에 위임한다
    - weight 는 표시 순서 전용 (lifecycle 과 무관)
    """

    assessment = models.ForeignKey(
        Assessment,
        on_delete=models.CASCADE,
        related_name="questions",
    )

    title = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)

    weight = models.PositiveIntegerField(default=0)
    maximum_grade = models.FloatField(default=1.0)

    question_type = models.CharField(
        max_length=40,
        choices=[(key, kind.label) for key, kind in QUESTION_KINDS.items()],
    )

    # multiple_response: [{"id": 1, "text": "...", "correct": true}, ...]
    options = models.JSONField(default=list, blank=True)

    class Meta:
        db_table = "assessments_question"
        ordering = ["weight", "id"]

    def __str__(self):
        return f"{self.assessment} Q{self.weight}"

    # ---------------------------------------------
    # kind delegation
    # ---------------------------------------------

    @property
    def kind(self) -> QuestionKind:
        return get_question_kind(self.question_type)

    @property
    def auto_gradable(self) -> bool:
        """
        Whether this question supports auto grading. When True, ``auto_grader``
        is expected to return a grader; a kind that claims support but ships no
        grader is a configuration error surfaced by ``auto_grader``.
        """
        return bool(self.kind.auto_gradable)

    def auto_grader(self) -> AutoGrader:
        """
        Raises:
            NotImplementedError: the question has no grader to use.
        """
        kind = self.kind
        grader: Optional[AutoGrader] = kind.auto_grader(self) if kind.auto_gradable else None
        if grader is None:
            raise NotImplementedError(
                f"Question {self.pk} ({self.question_type}) has no auto grader."
            )
        return grader

    def attempt(self, submission: "Submission", last_attempt: Optional["Answer"] = None) -> "Answer":
        """
        Builds a new answer for this question in ``submission``, pre-filled from
        ``last_attempt`` when given. The answer is not saved.
        """
        return self.kind.attempt(self, submission, last_attempt)

    def display_title(self) -> str:
        ids = list(self.assessment.questions.values_list("id", flat=True))
        number = f"Question {ids.index(self.pk) + 1}" if self.pk in ids else "Question"
        return f"{number}: {self.title}" if self.title else number

    # ---------------------------------------------
    # validation
    # ---------------------------------------------

    def clean(self):
        super().clean()
        if self.question_type not in QUESTION_KINDS:
            raise ValidationError({"question_type": "unknown question type"})
        if self.assessment_id and self.assessment.autograded and not self.auto_gradable:
            raise ValidationError(
                "autograded assessment can only contain auto gradable questions"
            )
