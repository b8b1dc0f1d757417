# PATH: apps/domains/submissions/permissions.py
from __future__ import annotations

from rest_framework.permissions import BasePermission

from apps.domains.courses.models import CourseUser


def is_course_staff(user, course) -> bool:
    if getattr(user, "is_superuser", False):
        return True
    return CourseUser.staff_of(course, user)


class IsSubmissionOwnerOrCourseStaff(BasePermission):
    """
    object 단위: 본인 submission 이거나 해당 course 의 staff
    """

    def has_object_permission(self, request, view, obj):
        if obj.creator_id == getattr(request.user, "id", None):
            return True
        return is_course_staff(request.user, obj.assessment.course)


class IsCourseStaff(BasePermission):
    """
    publish / auto_grade 같은 채점자 전용 action
    """

    def has_object_permission(self, request, view, obj):
        return is_course_staff(request.user, obj.assessment.course)
