# apps/domains/assessments/question_kinds/text_response.py
from __future__ import annotations

from typing import Any, Dict

from .base import QuestionKind


class TextResponseKind(QuestionKind):
    """서술형: 채점은 항상 사람이 한다"""

    key = "text_response"
    label = "Text Response"
    auto_gradable = False

    def initial_payload(self, question, last_payload) -> Dict[str, Any]:
        return {"text": str((last_payload or {}).get("text") or "")}
