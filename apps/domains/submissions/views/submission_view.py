# PATH: apps/domains/submissions/views/submission_view.py
from __future__ import annotations

import logging

from django.db.models import Q
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.generics import RetrieveAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ReadOnlyModelViewSet

from apps.domains.assessments.models import Question
from apps.domains.courses.models import CourseUser
from apps.domains.submissions.exceptions import (
    AnswerNotEditableError,
    InvalidTransitionError,
)
from apps.domains.submissions.filters import SubmissionFilter
from apps.domains.submissions.models import GradingJob, Submission
from apps.domains.submissions.permissions import (
    IsCourseStaff,
    IsSubmissionOwnerOrCourseStaff,
)
from apps.domains.submissions.serializers import (
    AnswerSaveSerializer,
    AnswerSerializer,
    GradingJobSerializer,
    SubmissionSerializer,
)
from apps.domains.submissions.services.answer_service import AnswerService
from apps.domains.submissions.services.dispatcher import auto_grade as schedule_auto_grade
from apps.domains.submissions.services.latest_answers import latest_answer_for
from apps.domains.submissions.services.transition_service import (
    SubmissionTransitionService,
)
from apps.domains.submissions.workflow import WorkflowEvent

logger = logging.getLogger(__name__)


def visible_submissions(user):
    """본인 submission + staff 로 속한 course 의 submission"""
    qs = Submission.objects.alive().select_related("assessment", "experience_points_record")
    if getattr(user, "is_superuser", False):
        return qs

    staff_course_ids = CourseUser.objects.filter(
        user=user,
        role__in=CourseUser.STAFF_ROLES,
    ).values("course_id")
    return qs.filter(Q(creator=user) | Q(assessment__course_id__in=staff_course_ids))


class SubmissionViewSet(ReadOnlyModelViewSet):
    """
    GET  /submissions/                       목록 (assessment, workflow_state filter)
    GET  /submissions/{id}/                  상세 (grade / submitted_at / graded_at 포함)
    POST /submissions/{id}/finalise/         attempting → submitted
    POST /submissions/{id}/publish/          submitted → graded (staff)
    POST /submissions/{id}/unsubmit/         submitted|graded → attempting (staff)
    GET  /submissions/{id}/answers/          현재 답안 (없는 문항은 생성)
    POST /submissions/{id}/answers/          답안 저장 (append)
    GET  /submissions/{id}/reload_answer/    ?answer_id= 의 문항 최신 답안
    POST /submissions/{id}/auto_grade/       채점 job 발행 (staff) → 202
    """

    serializer_class = SubmissionSerializer
    filterset_class = SubmissionFilter

    STAFF_ACTIONS = ("publish", "unsubmit", "auto_grade")

    def get_queryset(self):
        return visible_submissions(self.request.user)

    def get_permissions(self):
        if self.action in self.STAFF_ACTIONS:
            return [IsAuthenticated(), IsCourseStaff()]
        return [IsAuthenticated(), IsSubmissionOwnerOrCourseStaff()]

    # ==================================================
    # transitions
    # ==================================================

    def _transition(self, event: str) -> Response:
        submission = self.get_object()
        try:
            SubmissionTransitionService.transition(submission, event)
        except InvalidTransitionError as e:
            return Response(
                {
                    "detail": e.message,
                    "workflow_state": submission.workflow_state,
                },
                status=status.HTTP_409_CONFLICT,
            )
        return Response(SubmissionSerializer(submission).data)

    @action(detail=True, methods=["post"])
    def finalise(self, request, pk=None):
        return self._transition(WorkflowEvent.FINALISE)

    @action(detail=True, methods=["post"])
    def publish(self, request, pk=None):
        return self._transition(WorkflowEvent.PUBLISH)

    @action(detail=True, methods=["post"])
    def unsubmit(self, request, pk=None):
        return self._transition(WorkflowEvent.UNSUBMIT)

    # ==================================================
    # answers
    # ==================================================

    @action(detail=True, methods=["get", "post"])
    def answers(self, request, pk=None):
        submission = self.get_object()

        if request.method == "GET":
            answers = AnswerService.load_or_create_answers(submission)
            return Response(AnswerSerializer(answers, many=True).data)

        serializer = AnswerSaveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        question = get_object_or_404(Question, pk=serializer.validated_data["question_id"])
        try:
            answer = AnswerService.save_answer(
                submission,
                question,
                serializer.validated_data["payload"],
            )
        except AnswerNotEditableError as e:
            return Response({"detail": e.message}, status=status.HTTP_409_CONFLICT)

        return Response(AnswerSerializer(answer).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["get"])
    def reload_answer(self, request, pk=None):
        submission = self.get_object()

        answer_id = request.query_params.get("answer_id")
        if not answer_id or not str(answer_id).isdigit():
            return Response({"detail": "answer_id required"}, status=status.HTTP_400_BAD_REQUEST)

        answer = submission.answers.filter(pk=int(answer_id)).first()
        if answer is None:
            return Response(
                {"detail": "answer does not belong to this submission"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        latest = latest_answer_for(submission, answer.question_id)
        return Response(AnswerSerializer(latest).data)

    # ==================================================
    # auto grading
    # ==================================================

    @action(detail=True, methods=["post"])
    def auto_grade(self, request, pk=None):
        submission = self.get_object()
        job = schedule_auto_grade(submission)

        logger.info(
            "manual auto grade requested submission_id=%s job_id=%s by user=%s",
            submission.pk,
            job.id,
            request.user.pk,
        )
        return Response({"job_id": str(job.id)}, status=status.HTTP_202_ACCEPTED)


class GradingJobDetailView(RetrieveAPIView):
    """
    GET /submissions/grading-jobs/{job_id}/
    """

    serializer_class = GradingJobSerializer
    permission_classes = [IsAuthenticated]
    lookup_url_kwarg = "job_id"

    def get_queryset(self):
        return GradingJob.objects.filter(
            submission__in=visible_submissions(self.request.user).values("pk")
        )
