# PATH: apps/core/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from apps.core.models import User


@admin.register(User)
class CoreUserAdmin(UserAdmin):
    list_display = ("id", "username", "name", "email", "is_staff", "is_active")
    fieldsets = UserAdmin.fieldsets + (
        ("Profile", {"fields": ("name",)}),
    )
