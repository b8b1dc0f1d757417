# apps/domains/assessments/question_kinds/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from apps.domains.assessments.models import Question
    from apps.domains.submissions.models import Answer, Submission


class AutoGrader(ABC):
    """
    문항 종류별 자동 채점기
    - answer 를 읽기만 하고 점수(float)만 돌려준다
    - 저장/상태 전이는 grading service 책임
    """

    @abstractmethod
    def grade(self, answer: "Answer") -> float:
        raise NotImplementedError


class QuestionKind(ABC):
    """
    Question 의 종류별 동작.

    Each kind declares whether it can be auto graded and builds new answers for
    a submission. ``auto_grader`` returning ``None`` means the kind has no
    grading capability; callers go through ``Question.auto_grader`` which turns
    that into ``NotImplementedError``.
    """

    key: str = "base"
    label: str = "Base"
    auto_gradable: bool = False

    def auto_grader(self, question: "Question") -> Optional[AutoGrader]:
        return None

    @abstractmethod
    def initial_payload(
        self,
        question: "Question",
        last_payload: Optional[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        새 answer 의 payload.
        last_payload 가 있으면 직전 답안 내용을 이어받는다.
        """
        raise NotImplementedError

    def attempt(
        self,
        question: "Question",
        submission: "Submission",
        last_attempt: Optional["Answer"] = None,
    ) -> "Answer":
        """
        Builds a new (unsaved) answer to ``question`` in ``submission``.
        """
        from apps.domains.submissions.models import Answer

        last_payload = dict(last_attempt.payload or {}) if last_attempt else None
        return Answer(
            submission=submission,
            question=question,
            payload=self.initial_payload(question, last_payload),
        )
