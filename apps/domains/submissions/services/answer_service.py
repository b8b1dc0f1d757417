# apps/domains/submissions/services/answer_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, List

from django.db import transaction

from apps.domains.submissions.exceptions import AnswerNotEditableError
from apps.domains.submissions.models import Answer, Submission
from apps.domains.submissions.services.latest_answers import (
    latest_answer_for,
    resolve_latest_answers,
)

logger = logging.getLogger(__name__)


def _lock(submission: Submission) -> Submission:
    return Submission.objects.select_for_update().get(pk=submission.pk)


class AnswerService:
    """
    답안 저장 (append-only)
    - 기존 answer row 는 절대 수정하지 않는다
    - submission 이 attempting 일 때만 허용 (finalise 와 경합 방지를 위해 row lock)
    """

    @staticmethod
    @transaction.atomic
    def load_or_create_answers(submission: Submission) -> List[Answer]:
        """
        Creates an initial answer for every question that has none yet, then
        returns the current answers. Only attempting submissions get new rows.
        """
        locked = _lock(submission)
        if locked.is_attempting:
            answered = set(locked.answers.values_list("question_id", flat=True))
            for question in locked.assessment.questions.all():
                if question.pk in answered:
                    continue
                question.attempt(locked).save()

        return list(resolve_latest_answers(locked.answers.all()).values())

    @staticmethod
    @transaction.atomic
    def save_answer(submission: Submission, question, payload: Dict[str, Any]) -> Answer:
        locked = _lock(submission)
        if not locked.is_attempting:
            raise AnswerNotEditableError(
                f"Submission {locked.pk} is {locked.workflow_state}; answers can no longer be changed."
            )
        if question.assessment_id != locked.assessment_id:
            raise AnswerNotEditableError(
                f"Question {question.pk} does not belong to this submission's assessment."
            )

        last_attempt = latest_answer_for(locked, question)
        answer = question.attempt(locked, last_attempt)
        answer.payload = {**(answer.payload or {}), **(payload or {})}
        answer.save()

        logger.debug(
            "answer saved submission_id=%s question_id=%s answer_id=%s",
            locked.pk,
            question.pk,
            answer.pk,
        )
        return answer
