# apps/domains/submissions/filters.py

import django_filters

from .models import Submission
from .workflow import WorkflowState


class SubmissionFilter(django_filters.FilterSet):
    """
    Submission list filtering.
    Front uses: /submissions/?assessment={assessmentId}&workflow_state=submitted
    """

    assessment = django_filters.NumberFilter(field_name="assessment_id")
    workflow_state = django_filters.ChoiceFilter(choices=WorkflowState.choices)

    class Meta:
        model = Submission
        fields = ["assessment", "workflow_state"]
