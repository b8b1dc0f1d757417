from django.contrib.auth.models import AbstractUser
from django.db import models


# --------------------------------------------------
# Custom User (AUTH_USER_MODEL)
# --------------------------------------------------

class User(AbstractUser):
    """
    Custom User 모델
    - AUTH_USER_MODEL = core.User
    - course 내 역할(student/staff...)은 courses.CourseUser 가 SSOT
    """

    name = models.CharField(max_length=50, blank=True, null=True)

    class Meta:
        app_label = "core"
        db_table = "accounts_user"
        ordering = ["-id"]

    def __str__(self):
        return self.username
