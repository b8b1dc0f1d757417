# apps/domains/assessments/question_kinds/__init__.py
from typing import Dict

from .base import AutoGrader, QuestionKind
from .multiple_response import MultipleResponseAutoGrader, MultipleResponseKind
from .text_response import TextResponseKind


QUESTION_KINDS: Dict[str, QuestionKind] = {
    kind.key: kind
    for kind in (
        MultipleResponseKind(),
        TextResponseKind(),
    )
}


def get_question_kind(key: str) -> QuestionKind:
    try:
        return QUESTION_KINDS[key]
    except KeyError:
        raise NotImplementedError(f"Unknown question kind: {key!r}") from None


__all__ = [
    "AutoGrader",
    "QuestionKind",
    "MultipleResponseAutoGrader",
    "MultipleResponseKind",
    "TextResponseKind",
    "QUESTION_KINDS",
    "get_question_kind",
]
