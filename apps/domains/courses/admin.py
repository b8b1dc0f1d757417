from django.contrib import admin

from apps.domains.courses.models import Course, CourseUser


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "created_at")
    search_fields = ("title",)


@admin.register(CourseUser)
class CourseUserAdmin(admin.ModelAdmin):
    list_display = ("id", "course", "user", "role", "phantom")
    list_filter = ("role", "phantom")
