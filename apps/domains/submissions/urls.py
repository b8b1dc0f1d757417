# apps/domains/submissions/urls.py
from django.urls import path
from rest_framework.routers import SimpleRouter

from .views import GradingJobDetailView, SubmissionViewSet

router = SimpleRouter()
router.register("", SubmissionViewSet, basename="submissions")

urlpatterns = [
    # router 의 "{pk}/" 보다 먼저
    path(
        "grading-jobs/<uuid:job_id>/",
        GradingJobDetailView.as_view(),
        name="grading-job-detail",
    ),
]

urlpatterns += router.urls
