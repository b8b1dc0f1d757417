from .submission import (
    AnswerSaveSerializer,
    AnswerSerializer,
    GradingJobSerializer,
    SubmissionSerializer,
)

__all__ = [
    "AnswerSaveSerializer",
    "AnswerSerializer",
    "GradingJobSerializer",
    "SubmissionSerializer",
]
