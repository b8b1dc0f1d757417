# apps/domains/assessments/models/__init__.py
from .assessment import Assessment
from .question import Question

__all__ = [
    "Assessment",
    "Question",
]
