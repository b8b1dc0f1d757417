import pytest
from django.core.exceptions import ValidationError

from apps.domains.assessments.models import Question
from apps.domains.assessments.question_kinds import (
    MultipleResponseAutoGrader,
    get_question_kind,
)
from apps.domains.submissions.models import Answer

pytestmark = pytest.mark.django_db


@pytest.mark.parametrize(
    "option_ids, expected",
    [
        ([1, 3], 2.0),
        (["3", "1"], 2.0),
        ([1], 0.0),
        ([1, 2, 3], 0.0),
        ([], 0.0),
    ],
)
def test_multiple_response_requires_exact_set(mr_question, option_ids, expected):
    answer = Answer(question=mr_question, payload={"option_ids": option_ids})

    assert MultipleResponseAutoGrader().grade(answer) == expected


def test_text_question_has_no_auto_grader(text_question):
    assert not text_question.auto_gradable

    with pytest.raises(NotImplementedError):
        text_question.auto_grader()


def test_unknown_kind_is_not_implemented():
    with pytest.raises(NotImplementedError):
        get_question_kind("essay_with_audio")


def test_attempt_builds_unsaved_answer(submission, mr_question):
    previous = Answer(payload={"option_ids": [2]})

    answer = mr_question.attempt(submission, previous)

    assert answer.pk is None
    assert answer.submission == submission
    assert answer.payload == {"option_ids": [2]}


def test_autograded_assessment_rejects_manual_question(autograded_assessment):
    question = Question(assessment=autograded_assessment, question_type="text_response")

    with pytest.raises(ValidationError):
        question.clean()


def test_display_title_numbers_questions(mr_question, text_question):
    assert mr_question.display_title() == "Question 1: Solve x^2 = 4"
    assert text_question.display_title() == "Question 2: Explain your answer"
