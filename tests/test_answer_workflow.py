import pytest

from apps.domains.submissions.exceptions import InvalidTransitionError
from apps.domains.submissions.models import Answer
from apps.domains.submissions.workflow import WorkflowState


def test_finalise_then_publish_stamps_times():
    answer = Answer()

    answer.finalise()
    assert answer.is_submitted
    assert answer.submitted_at is not None

    answer.publish()
    assert answer.is_graded
    assert answer.graded_at is not None


def test_unsubmit_submitted_answer_clears_times():
    answer = Answer()
    answer.finalise()

    answer.unsubmit()

    assert answer.is_attempting
    assert answer.submitted_at is None
    assert answer.graded_at is None


def test_graded_answer_cannot_be_reopened_directly():
    """A graded answer stays graded unless the submission cascade forces it."""
    answer = Answer(workflow_state=WorkflowState.GRADED)

    with pytest.raises(InvalidTransitionError):
        answer.unsubmit()

    assert answer.is_graded


def test_forced_unsubmit_reopens_graded_answer():
    answer = Answer(workflow_state=WorkflowState.GRADED)

    answer.unsubmit(force=True)

    assert answer.is_attempting


def test_undefined_event_raises_even_when_forced():
    answer = Answer()

    with pytest.raises(InvalidTransitionError):
        answer.publish(force=True)

    assert answer.is_attempting
