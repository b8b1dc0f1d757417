# PATH: apps/domains/submissions/workflow.py
"""
Submission / Answer 공통 workflow 정의 (SSOT)

    attempting --finalise--> submitted --publish--> graded
         ^                       |                     |
         +-------unsubmit--------+---------------------+
"""
from __future__ import annotations

from typing import Dict, List

from django.db import models

from .exceptions import InvalidTransitionError


class WorkflowState(models.TextChoices):
    ATTEMPTING = "attempting", "Attempting"
    SUBMITTED = "submitted", "Submitted"
    GRADED = "graded", "Graded"


class WorkflowEvent(models.TextChoices):
    FINALISE = "finalise", "Finalise"
    PUBLISH = "publish", "Publish"
    UNSUBMIT = "unsubmit", "Unsubmit"


TRANSITIONS: Dict[str, Dict[str, str]] = {
    WorkflowState.ATTEMPTING: {
        WorkflowEvent.FINALISE: WorkflowState.SUBMITTED,
    },
    WorkflowState.SUBMITTED: {
        WorkflowEvent.UNSUBMIT: WorkflowState.ATTEMPTING,
        WorkflowEvent.PUBLISH: WorkflowState.GRADED,
    },
    WorkflowState.GRADED: {
        WorkflowEvent.UNSUBMIT: WorkflowState.ATTEMPTING,
    },
}


def next_state(state: str, event: str) -> str:
    """
    Returns the state ``event`` leads to from ``state``.

    Raises:
        InvalidTransitionError: ``event`` is not defined for ``state``.
    """
    target = TRANSITIONS.get(state, {}).get(event)
    if target is None:
        raise InvalidTransitionError(event=str(event), state=str(state))
    return target


def available_events(state: str) -> List[str]:
    return [str(e) for e in TRANSITIONS.get(state, {})]
