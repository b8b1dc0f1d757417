# apps/domains/submissions/serializers/submission.py
from rest_framework import serializers

from apps.domains.submissions.models import Answer, GradingJob, Submission


class AnswerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Answer
        fields = (
            "id",
            "submission",
            "question",
            "workflow_state",
            "payload",
            "grade",
            "grader",
            "submitted_at",
            "graded_at",
            "created_at",
        )
        read_only_fields = fields


class AnswerSaveSerializer(serializers.Serializer):
    question_id = serializers.IntegerField()
    payload = serializers.JSONField(default=dict)

    def validate_payload(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError("payload must be an object")
        return value


class SubmissionSerializer(serializers.ModelSerializer):
    # 전부 answers 에서 계산되는 값 (저장 안 함)
    grade = serializers.FloatField(read_only=True)
    submitted_at = serializers.DateTimeField(read_only=True)
    graded_at = serializers.DateTimeField(read_only=True)
    points_awarded = serializers.IntegerField(read_only=True, allow_null=True)
    latest_answers = AnswerSerializer(many=True, read_only=True)

    class Meta:
        model = Submission
        fields = (
            "id",
            "assessment",
            "creator",
            "workflow_state",
            "grade",
            "submitted_at",
            "graded_at",
            "points_awarded",
            "latest_answers",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields


class GradingJobSerializer(serializers.ModelSerializer):
    class Meta:
        model = GradingJob
        fields = (
            "id",
            "submission",
            "status",
            "error_message",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields
