import uuid

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("assessments", "0001_initial"),
        ("experience", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Submission",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("workflow_state", models.CharField(choices=[("attempting", "Attempting"), ("submitted", "Submitted"), ("graded", "Graded")], default="attempting", max_length=20)),
                ("deleted_at", models.DateTimeField(blank=True, null=True)),
                ("assessment", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="submissions", to="assessments.assessment")),
                ("creator", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="assessment_submissions", to=settings.AUTH_USER_MODEL)),
                ("experience_points_record", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="submission", to="experience.experiencepointsrecord")),
            ],
            options={
                "db_table": "submissions_submission",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["assessment", "creator"], name="sub_assessment_creator_idx"),
                    models.Index(fields=["workflow_state"], name="sub_workflow_state_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(condition=models.Q(("deleted_at__isnull", True)), fields=("assessment", "creator"), name="unique_active_submission_per_creator"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Answer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("workflow_state", models.CharField(choices=[("attempting", "Attempting"), ("submitted", "Submitted"), ("graded", "Graded")], default="attempting", max_length=20)),
                ("payload", models.JSONField(blank=True, default=dict)),
                ("grade", models.FloatField(blank=True, null=True)),
                ("submitted_at", models.DateTimeField(blank=True, null=True)),
                ("graded_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("grader", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="graded_answers", to=settings.AUTH_USER_MODEL)),
                ("question", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="answers", to="assessments.question")),
                ("submission", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="answers", to="submissions.submission")),
            ],
            options={
                "db_table": "submissions_answer",
                "ordering": ["created_at", "id"],
                "indexes": [
                    models.Index(fields=["submission", "question", "created_at"], name="sub_answer_latest_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="GradingJob",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("status", models.CharField(choices=[("submitted", "Submitted"), ("running", "Running"), ("completed", "Completed"), ("errored", "Errored")], default="submitted", max_length=20)),
                ("error_message", models.TextField(blank=True)),
                ("submission", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="grading_jobs", to="submissions.submission")),
            ],
            options={
                "db_table": "submissions_grading_job",
                "ordering": ["-created_at"],
            },
        ),
    ]
