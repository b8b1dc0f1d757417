from django.contrib import admin

from apps.domains.assessments.models import Assessment, Question


class QuestionInline(admin.TabularInline):
    model = Question
    extra = 0
    fields = ("weight", "title", "question_type", "maximum_grade")


@admin.register(Assessment)
class AssessmentAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "course", "autograded", "created_at")
    list_filter = ("autograded",)
    inlines = [QuestionInline]
