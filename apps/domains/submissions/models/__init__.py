# apps/domains/submissions/models/__init__.py
from .submission import Submission
from .answer import Answer
from .grading_job import GradingJob

__all__ = [
    "Submission",
    "Answer",
    "GradingJob",
]
