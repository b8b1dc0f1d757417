# celery autodiscover 는 <app>.tasks 만 import 한다
from .grading_tasks import grade_submission_task

__all__ = ["grade_submission_task"]
