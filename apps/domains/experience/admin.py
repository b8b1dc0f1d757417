from django.contrib import admin

from apps.domains.experience.models import ExperiencePointsRecord


@admin.register(ExperiencePointsRecord)
class ExperiencePointsRecordAdmin(admin.ModelAdmin):
    list_display = ("id", "course_user", "points_awarded", "awarded_at", "awarder")
    list_select_related = ("course_user",)
