# apps/domains/submissions/services/latest_answers.py
"""
Latest-answer 계산 (read only)

answers 는 문항별 append-only 이력이므로 "현재 답안"은 항상 여기서 유도한다.
- 같은 (submission, question) 중 created_at 최대
- created_at 이 같으면 나중에 insert 된 row(id 큰 쪽)
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, Optional

if TYPE_CHECKING:
    from apps.domains.assessments.models import Question
    from apps.domains.submissions.models import Answer, Submission


def _recency_key(answer: "Answer"):
    return (answer.created_at, answer.id or 0)


def resolve_latest_answers(answers: Iterable["Answer"]) -> Dict[int, "Answer"]:
    """
    Maps question id -> current answer for a snapshot of a submission's answers.
    """
    latest: Dict[int, "Answer"] = {}
    for answer in answers:
        current = latest.get(answer.question_id)
        if current is None or _recency_key(answer) >= _recency_key(current):
            latest[answer.question_id] = answer
    return latest


def compute_grade(answers: Iterable["Answer"]) -> float:
    """Sum of the latest answer grade per question; ungraded counts as 0."""
    return float(
        sum((a.grade or 0) for a in resolve_latest_answers(answers).values())
    )


def latest_answer_for(submission: "Submission", question: "Question") -> Optional["Answer"]:
    question_id = getattr(question, "pk", question)
    return (
        submission.answers
        .filter(question_id=question_id)
        .order_by("-created_at", "-id")
        .first()
    )
