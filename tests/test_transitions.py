from datetime import timedelta
from unittest import mock

import pytest
from django.utils import timezone

from apps.domains.courses.models import CourseUser
from apps.domains.submissions.exceptions import InvalidTransitionError
from apps.domains.submissions.models import Answer, GradingJob, Submission
from apps.domains.submissions.services.submission_service import SubmissionService
from apps.domains.submissions.services.transition_service import (
    SubmissionTransitionService,
    finalise,
    publish,
    unsubmit,
)
from apps.domains.submissions.workflow import WorkflowEvent, WorkflowState

pytestmark = pytest.mark.django_db


@pytest.fixture(autouse=True)
def no_auto_grade(settings):
    settings.SUBMISSION_AUTO_GRADE_ENABLED = False


def _answer(submission, question, minutes=0, **kwargs):
    return Answer.objects.create(
        submission=submission,
        question=question,
        created_at=timezone.now() + timedelta(minutes=minutes),
        **kwargs,
    )


def test_finalise_submits_all_attempting_answers(submission, mr_question, text_question):
    a1 = _answer(submission, mr_question)
    a2 = _answer(submission, text_question)

    finalise(submission)

    assert submission.is_submitted
    for answer in (a1, a2):
        answer.refresh_from_db()
        assert answer.is_submitted
        assert answer.submitted_at is not None
    assert submission.submitted_at == max(a1.submitted_at, a2.submitted_at)


def test_publish_grades_submitted_answers(submission, mr_question):
    answer = _answer(submission, mr_question)
    finalise(submission)

    publish(submission)

    answer.refresh_from_db()
    assert submission.is_graded
    assert answer.is_graded
    assert submission.graded_at == answer.graded_at


def test_unsubmit_reverts_latest_answers_only(submission, mr_question, text_question, staff):
    superseded = _answer(submission, mr_question, minutes=0)
    latest = _answer(submission, mr_question, minutes=5)
    other = _answer(submission, text_question, minutes=1)
    finalise(submission)
    publish(submission)

    record = submission.experience_points_record
    record.award(100, awarder=staff)
    record.save()

    unsubmit(submission)

    assert submission.is_attempting
    superseded.refresh_from_db()
    latest.refresh_from_db()
    other.refresh_from_db()
    assert superseded.is_graded
    assert latest.is_attempting
    assert latest.submitted_at is None
    assert other.is_attempting

    record.refresh_from_db()
    assert record.points_awarded is None
    assert record.awarder is None
    assert submission.points_awarded is None


def test_unsubmit_from_submitted(submission, mr_question):
    answer = _answer(submission, mr_question)
    finalise(submission)

    unsubmit(submission)

    answer.refresh_from_db()
    assert submission.is_attempting
    assert answer.is_attempting


def test_invalid_transition_leaves_everything_unchanged(submission, mr_question):
    answer = _answer(submission, mr_question)

    with pytest.raises(InvalidTransitionError):
        SubmissionTransitionService.transition(submission, WorkflowEvent.PUBLISH)

    assert submission.workflow_state == WorkflowState.ATTEMPTING
    submission.refresh_from_db()
    assert submission.is_attempting
    answer.refresh_from_db()
    assert answer.is_attempting


def test_finalise_twice_is_rejected(submission, mr_question):
    _answer(submission, mr_question)
    finalise(submission)

    with pytest.raises(InvalidTransitionError):
        finalise(submission)

    submission.refresh_from_db()
    assert submission.is_submitted


def test_confirmed_and_timestamp_scopes(submission, mr_question, make_user, assessment, course):
    other_user = make_user("other")
    CourseUser.objects.create(course=course, user=other_user)
    other = SubmissionService.create(assessment=assessment, creator=other_user).submission

    _answer(submission, mr_question)
    finalise(submission)

    assert list(Submission.objects.confirmed()) == [submission]
    assert list(Submission.objects.from_course(course).by_users([other_user.pk])) == [other]
    assert list(Submission.objects.by_user(other_user)) == [other]

    ordered = list(Submission.objects.ordered_by_submitted_date())
    assert ordered[0] == submission
    assert ordered[0].submitted_at is not None
    assert ordered[1].submitted_at is None


def test_cascade_failure_midway_rolls_back_everything(submission, mr_question, text_question, settings):
    """An answer save failing mid-cascade leaves no partial finalise behind."""
    settings.SUBMISSION_AUTO_GRADE_ENABLED = True
    a1 = _answer(submission, mr_question)
    a2 = _answer(submission, text_question, minutes=1)
    real_save = Answer.save
    calls = {"n": 0}

    def failing_second_save(self, *args, **kwargs):
        calls["n"] += 1
        if calls["n"] == 2:
            raise RuntimeError("write failed")
        return real_save(self, *args, **kwargs)

    with mock.patch.object(Answer, "save", failing_second_save):
        with pytest.raises(RuntimeError):
            finalise(submission)

    assert calls["n"] == 2
    assert submission.workflow_state == WorkflowState.ATTEMPTING
    submission.refresh_from_db()
    assert submission.is_attempting
    for answer in (a1, a2):
        answer.refresh_from_db()
        assert answer.is_attempting
        assert answer.submitted_at is None
    assert not GradingJob.objects.exists()
