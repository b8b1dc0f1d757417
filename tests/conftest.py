import pytest
from rest_framework.test import APIClient

from apps.core.models import User
from apps.domains.assessments.models import Assessment, Question
from apps.domains.courses.models import Course, CourseUser
from apps.domains.submissions.services.submission_service import SubmissionService
from apps.support.messaging import backends


@pytest.fixture(autouse=True)
def clear_notification_outbox():
    backends.outbox.clear()
    yield
    backends.outbox.clear()


@pytest.fixture
def make_user(db):
    def _make(username, **kwargs):
        return User.objects.create_user(username=username, password="pw", **kwargs)

    return _make


@pytest.fixture
def course(db):
    return Course.objects.create(title="Algebra I")


@pytest.fixture
def student(make_user):
    return make_user("student")


@pytest.fixture
def staff(make_user):
    return make_user("ta")


@pytest.fixture
def outsider(make_user):
    return make_user("outsider")


@pytest.fixture
def student_course_user(course, student):
    return CourseUser.objects.create(course=course, user=student, role=CourseUser.Role.STUDENT)


@pytest.fixture
def staff_course_user(course, staff):
    return CourseUser.objects.create(
        course=course,
        user=staff,
        role=CourseUser.Role.TEACHING_ASSISTANT,
    )


@pytest.fixture
def phantom_course_user(course, make_user):
    return CourseUser.objects.create(
        course=course,
        user=make_user("phantom"),
        role=CourseUser.Role.STUDENT,
        phantom=True,
    )


MR_OPTIONS = [
    {"id": 1, "text": "x = 2", "correct": True},
    {"id": 2, "text": "x = 3", "correct": False},
    {"id": 3, "text": "x = -2", "correct": True},
]


@pytest.fixture
def assessment(course):
    return Assessment.objects.create(course=course, title="Quiz 1")


@pytest.fixture
def mr_question(assessment):
    return Question.objects.create(
        assessment=assessment,
        title="Solve x^2 = 4",
        weight=1,
        maximum_grade=2,
        question_type="multiple_response",
        options=MR_OPTIONS,
    )


@pytest.fixture
def text_question(assessment):
    return Question.objects.create(
        assessment=assessment,
        title="Explain your answer",
        weight=2,
        maximum_grade=5,
        question_type="text_response",
    )


@pytest.fixture
def autograded_assessment(course):
    assessment = Assessment.objects.create(course=course, title="Auto Quiz", autograded=True)
    Question.objects.create(
        assessment=assessment,
        title="Solve x^2 = 4",
        maximum_grade=3,
        question_type="multiple_response",
        options=MR_OPTIONS,
    )
    return assessment


@pytest.fixture
def make_submission(student, student_course_user):
    def _make(assessment, creator=None, course_user=None):
        result = SubmissionService.create(
            assessment=assessment,
            creator=creator or student,
            course_user=course_user,
        )
        assert result.ok, result.errors
        return result.submission

    return _make


@pytest.fixture
def submission(make_submission, assessment, mr_question, text_question):
    return make_submission(assessment)


@pytest.fixture
def api_client():
    return APIClient()
