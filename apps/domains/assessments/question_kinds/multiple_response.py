# apps/domains/assessments/question_kinds/multiple_response.py
from __future__ import annotations

from typing import Any, Dict, Optional

from .base import AutoGrader, QuestionKind


def _correct_option_ids(question) -> set[int]:
    return {
        int(opt["id"])
        for opt in (question.options or [])
        if isinstance(opt, dict) and opt.get("correct") and opt.get("id") is not None
    }


class MultipleResponseAutoGrader(AutoGrader):
    """선택한 option 집합이 정답 집합과 정확히 같을 때만 만점"""

    def grade(self, answer) -> float:
        question = answer.question
        selected = set()
        for v in (answer.payload or {}).get("option_ids") or []:
            try:
                selected.add(int(v))
            except (TypeError, ValueError):
                continue

        if selected and selected == _correct_option_ids(question):
            return float(question.maximum_grade)
        return 0.0


class MultipleResponseKind(QuestionKind):
    key = "multiple_response"
    label = "Multiple Response"
    auto_gradable = True

    def auto_grader(self, question) -> Optional[MultipleResponseAutoGrader]:
        return MultipleResponseAutoGrader()

    def initial_payload(self, question, last_payload) -> Dict[str, Any]:
        option_ids = (last_payload or {}).get("option_ids") or []
        return {"option_ids": list(option_ids)}
