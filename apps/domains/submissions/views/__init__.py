from .submission_create_view import AssessmentSubmissionCreateView
from .submission_view import GradingJobDetailView, SubmissionViewSet

__all__ = [
    "AssessmentSubmissionCreateView",
    "GradingJobDetailView",
    "SubmissionViewSet",
]
