from unittest import mock

import pytest
from django.utils import timezone

from apps.domains.experience.models import ExperiencePointsRecord
from apps.domains.submissions.exceptions import (
    DuplicateSubmissionError,
    EmptyAssessmentError,
    InconsistentUserError,
)
from apps.domains.submissions.models import Submission
from apps.domains.submissions.services.submission_service import (
    SubmissionService,
    create_submission,
)
from apps.domains.submissions.services.validators import SubmissionCreateValidator

pytestmark = pytest.mark.django_db


def test_create_submission_with_points_record(assessment, mr_question, student, student_course_user):
    result = create_submission(assessment=assessment, creator=student)

    assert result.ok
    submission = result.submission
    assert submission.is_attempting
    assert submission.creator == student
    assert submission.course_user == student_course_user
    assert submission.points_awarded is None


def test_empty_assessment_is_rejected_and_nothing_saved(assessment, student, student_course_user):
    result = SubmissionService.create(assessment=assessment, creator=student)

    assert not result.ok
    assert [type(e) for e in result.errors] == [EmptyAssessmentError]
    assert Submission.objects.count() == 0
    assert ExperiencePointsRecord.objects.count() == 0


def test_creator_outside_course_is_inconsistent(assessment, mr_question, outsider):
    result = SubmissionService.create(assessment=assessment, creator=outsider)

    assert [type(e) for e in result.errors] == [InconsistentUserError]
    assert Submission.objects.count() == 0


def test_course_user_of_someone_else_is_inconsistent(
    assessment, mr_question, student, staff_course_user
):
    result = SubmissionService.create(
        assessment=assessment,
        creator=student,
        course_user=staff_course_user,
    )

    assert [e.code for e in result.errors] == ["inconsistent_user"]


def test_duplicate_is_the_only_error(submission, assessment, student, staff_course_user):
    """A duplicate discards every other validation error."""
    assessment.questions.all().delete()

    result = SubmissionService.create(
        assessment=assessment,
        creator=student,
        course_user=staff_course_user,
    )

    assert len(result.errors) == 1
    error = result.errors[0]
    assert isinstance(error, DuplicateSubmissionError)
    assert error.existing_submission_id == submission.pk
    assert error.code == "submission_already_exists"
    assert Submission.objects.count() == 1


def test_soft_deleted_submission_does_not_block_new_one(submission, assessment, student):
    submission.deleted_at = timezone.now()
    submission.save(update_fields=["deleted_at"])

    result = SubmissionService.create(assessment=assessment, creator=student)

    assert result.ok
    assert result.submission.pk != submission.pk


def test_validator_collects_all_errors_without_duplicate(assessment, student):
    errors = SubmissionCreateValidator(
        assessment=assessment,
        creator=student,
        course_user=None,
    ).validate()

    assert [type(e) for e in errors] == [InconsistentUserError, EmptyAssessmentError]


def test_concurrent_create_maps_integrity_error_to_duplicate(submission, assessment, student):
    with mock.patch.object(SubmissionCreateValidator, "validate", return_value=[]):
        result = SubmissionService.create(assessment=assessment, creator=student)

    assert not result.ok
    assert isinstance(result.errors[0], DuplicateSubmissionError)
    assert result.errors[0].existing_submission_id == submission.pk
    assert Submission.objects.count() == 1
