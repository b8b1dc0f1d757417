# apps/api/v1/urls.py
from django.urls import path, include

urlpatterns = [
    # =========================
    # Domain APIs
    # =========================
    path("assessments/", include("apps.domains.assessments.urls")),
    path("submissions/", include("apps.domains.submissions.urls")),
]
