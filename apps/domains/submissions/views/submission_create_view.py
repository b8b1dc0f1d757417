# PATH: apps/domains/submissions/views/submission_create_view.py
from __future__ import annotations

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.domains.assessments.models import Assessment
from apps.domains.submissions.exceptions import DuplicateSubmissionError
from apps.domains.submissions.serializers import SubmissionSerializer
from apps.domains.submissions.services.submission_service import SubmissionService


class AssessmentSubmissionCreateView(APIView):
    """
    POST /api/v1/assessments/{assessment_id}/submissions/

    - 201: 생성됨
    - 409: 이미 응시 중 (existing_submission_id 로 이동)
    - 400: 그 외 검증 실패 (errors 목록)
    """

    permission_classes = [IsAuthenticated]

    def post(self, request, assessment_id: int):
        assessment = get_object_or_404(Assessment, pk=assessment_id)

        result = SubmissionService.create(assessment=assessment, creator=request.user)

        if result.ok:
            return Response(
                SubmissionSerializer(result.submission).data,
                status=status.HTTP_201_CREATED,
            )

        duplicate = next(
            (e for e in result.errors if isinstance(e, DuplicateSubmissionError)),
            None,
        )
        if duplicate is not None:
            return Response(
                {
                    "detail": duplicate.message,
                    "code": duplicate.code,
                    "existing_submission_id": duplicate.existing_submission_id,
                },
                status=status.HTTP_409_CONFLICT,
            )

        return Response(
            {
                "detail": "submission could not be created",
                "errors": [{"code": e.code, "message": e.message} for e in result.errors],
            },
            status=status.HTTP_400_BAD_REQUEST,
        )
