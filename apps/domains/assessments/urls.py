# apps/domains/assessments/urls.py
from django.urls import path

from apps.domains.submissions.views import AssessmentSubmissionCreateView

urlpatterns = [
    path(
        "<int:assessment_id>/submissions/",
        AssessmentSubmissionCreateView.as_view(),
        name="assessment-submission-create",
    ),
]
