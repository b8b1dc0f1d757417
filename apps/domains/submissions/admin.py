from django.contrib import admin

from apps.domains.submissions.models import Answer, GradingJob, Submission


class AnswerInline(admin.TabularInline):
    model = Answer
    extra = 0
    fields = ("question", "workflow_state", "grade", "submitted_at", "graded_at", "created_at")
    readonly_fields = fields


@admin.register(Submission)
class SubmissionAdmin(admin.ModelAdmin):
    list_display = ("id", "assessment", "creator", "workflow_state", "created_at", "deleted_at")
    list_filter = ("workflow_state",)
    search_fields = ("creator__username", "assessment__title")
    inlines = [AnswerInline]


@admin.register(GradingJob)
class GradingJobAdmin(admin.ModelAdmin):
    list_display = ("id", "submission", "status", "created_at", "updated_at")
    list_filter = ("status",)
    readonly_fields = ("id", "submission", "status", "error_message", "created_at", "updated_at")
