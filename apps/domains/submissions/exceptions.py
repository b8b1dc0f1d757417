# PATH: apps/domains/submissions/exceptions.py
"""
Submission 도메인 예외

- InvalidTransitionError: 현재 상태에서 허용되지 않는 event (복구 가능, 상태 재조회 후 재판단)
- SubmissionValidationError 계열: 생성 시점 검증 실패. raise 하지 않고
  SubmissionCreateResult.errors 로 돌려준다.
"""
from __future__ import annotations

from typing import Optional


class SubmissionError(Exception):
    """Base exception for the submissions domain."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InvalidTransitionError(SubmissionError):
    """Raised when an event is not defined for the current workflow state."""

    def __init__(self, event: str, state: str, message: Optional[str] = None):
        self.event = event
        self.state = state
        super().__init__(message or f"Cannot {event} when {state}.")


class AnswerNotEditableError(SubmissionError):
    """Raised when an answer is saved to a submission that is no longer attempting."""


class SubmissionValidationError(SubmissionError):
    code: str = "invalid"
    default_message: str = "Submission is invalid."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class EmptyAssessmentError(SubmissionValidationError):
    code = "empty_assessment"
    default_message = "This assessment has no questions yet."


class InconsistentUserError(SubmissionValidationError):
    code = "inconsistent_user"
    default_message = "The submission creator does not match the course user of its points record."


class DuplicateSubmissionError(SubmissionValidationError):
    code = "submission_already_exists"
    default_message = "You already have a submission for this assessment."

    def __init__(self, existing_submission_id: Optional[int] = None, message: Optional[str] = None):
        super().__init__(message)
        self.existing_submission_id = existing_submission_id
