from unittest import mock

import pytest

from apps.domains.submissions.models import Answer, GradingJob, Submission
from apps.domains.submissions.tasks.grading_tasks import grade_submission_task

pytestmark = pytest.mark.django_db


@pytest.fixture(autouse=True)
def no_auto_grade(settings):
    settings.SUBMISSION_AUTO_GRADE_ENABLED = False


@pytest.fixture
def student_client(api_client, student):
    api_client.force_authenticate(student)
    return api_client


@pytest.fixture
def staff_client(api_client, staff, staff_course_user):
    api_client.force_authenticate(staff)
    return api_client


def _url(submission, action=""):
    base = f"/api/v1/submissions/{submission.pk}/"
    return f"{base}{action}/" if action else base


# ==================================================
# create
# ==================================================

def test_create_submission(student_client, assessment, mr_question, student_course_user):
    res = student_client.post(f"/api/v1/assessments/{assessment.pk}/submissions/")

    assert res.status_code == 201
    assert res.data["workflow_state"] == "attempting"
    assert Submission.objects.filter(pk=res.data["id"]).exists()


def test_create_duplicate_returns_conflict_with_existing_id(student_client, submission, assessment):
    res = student_client.post(f"/api/v1/assessments/{assessment.pk}/submissions/")

    assert res.status_code == 409
    assert res.data["existing_submission_id"] == submission.pk
    assert res.data["code"] == "submission_already_exists"


def test_create_on_empty_assessment_is_bad_request(student_client, assessment, student_course_user):
    res = student_client.post(f"/api/v1/assessments/{assessment.pk}/submissions/")

    assert res.status_code == 400
    assert [e["code"] for e in res.data["errors"]] == ["empty_assessment"]


def test_create_requires_authentication(api_client, assessment):
    res = api_client.post(f"/api/v1/assessments/{assessment.pk}/submissions/")

    assert res.status_code in (401, 403)


# ==================================================
# read
# ==================================================

def test_detail_includes_derived_fields(student_client, submission, mr_question):
    Answer.objects.create(submission=submission, question=mr_question, grade=1.5)

    res = student_client.get(_url(submission))

    assert res.status_code == 200
    assert res.data["grade"] == 1.5
    assert res.data["submitted_at"] is None
    assert res.data["graded_at"] is None
    assert res.data["points_awarded"] is None
    assert len(res.data["latest_answers"]) == 1


def test_list_filters_by_workflow_state(staff_client, submission, assessment):
    res = staff_client.get("/api/v1/submissions/", {"workflow_state": "submitted"})
    assert res.status_code == 200
    assert res.data["results"] == []

    res = staff_client.get("/api/v1/submissions/", {"assessment": assessment.pk})
    assert [row["id"] for row in res.data["results"]] == [submission.pk]


def test_outsider_cannot_see_submission(api_client, outsider, submission):
    api_client.force_authenticate(outsider)

    assert api_client.get(_url(submission)).status_code == 404


# ==================================================
# transitions
# ==================================================

def test_finalise_then_conflict(student_client, submission):
    res = student_client.post(_url(submission, "finalise"))
    assert res.status_code == 200
    assert res.data["workflow_state"] == "submitted"

    res = student_client.post(_url(submission, "finalise"))
    assert res.status_code == 409
    assert res.data["workflow_state"] == "submitted"


def test_publish_is_staff_only(student_client, submission):
    student_client.post(_url(submission, "finalise"))

    res = student_client.post(_url(submission, "publish"))

    assert res.status_code == 403


def test_staff_publish_and_unsubmit(staff_client, submission):
    staff_client.post(_url(submission, "finalise"))

    res = staff_client.post(_url(submission, "publish"))
    assert res.status_code == 200
    assert res.data["workflow_state"] == "graded"

    res = staff_client.post(_url(submission, "unsubmit"))
    assert res.status_code == 200
    assert res.data["workflow_state"] == "attempting"


def test_publish_from_attempting_conflicts(staff_client, submission):
    res = staff_client.post(_url(submission, "publish"))

    assert res.status_code == 409
    submission.refresh_from_db()
    assert submission.is_attempting


# ==================================================
# answers
# ==================================================

def test_save_answer(student_client, submission, mr_question):
    res = student_client.post(
        _url(submission, "answers"),
        {"question_id": mr_question.pk, "payload": {"option_ids": [1, 3]}},
        format="json",
    )

    assert res.status_code == 201
    assert res.data["payload"] == {"option_ids": [1, 3]}


def test_save_answer_after_finalise_conflicts(student_client, submission, mr_question):
    student_client.post(_url(submission, "finalise"))

    res = student_client.post(
        _url(submission, "answers"),
        {"question_id": mr_question.pk, "payload": {"option_ids": [1]}},
        format="json",
    )

    assert res.status_code == 409


def test_list_answers_creates_missing(student_client, submission):
    res = student_client.get(_url(submission, "answers"))

    assert res.status_code == 200
    assert len(res.data) == 2


def test_reload_answer_returns_latest(student_client, submission, mr_question):
    old = student_client.post(
        _url(submission, "answers"),
        {"question_id": mr_question.pk, "payload": {"option_ids": [2]}},
        format="json",
    ).data
    new = student_client.post(
        _url(submission, "answers"),
        {"question_id": mr_question.pk, "payload": {"option_ids": [1]}},
        format="json",
    ).data

    res = student_client.get(_url(submission, "reload_answer"), {"answer_id": old["id"]})

    assert res.status_code == 200
    assert res.data["id"] == new["id"]


@pytest.mark.parametrize("params", [{}, {"answer_id": "abc"}, {"answer_id": "999999"}])
def test_reload_answer_bad_request(student_client, submission, params):
    res = student_client.get(_url(submission, "reload_answer"), params)

    assert res.status_code == 400


# ==================================================
# auto grading
# ==================================================

def test_auto_grade_returns_job_handle(staff_client, submission):
    with mock.patch.object(grade_submission_task, "apply_async"):
        res = staff_client.post(_url(submission, "auto_grade"))

    assert res.status_code == 202
    job = GradingJob.objects.get()
    assert res.data == {"job_id": str(job.id)}

    res = staff_client.get(f"/api/v1/submissions/grading-jobs/{job.id}/")
    assert res.status_code == 200
    assert res.data["status"] == "submitted"


def test_auto_grade_is_staff_only(student_client, submission):
    res = student_client.post(_url(submission, "auto_grade"))

    assert res.status_code == 403
    assert not GradingJob.objects.exists()


def test_health_check(client):
    res = client.get("/healthz/")

    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
