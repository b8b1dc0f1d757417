# apps/api/config/settings/test.py
from .base import *

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# ==================================================
# CELERY: broker 없이 in-process 실행
# ==================================================

CELERY_BROKER_URL = "memory://"
CELERY_RESULT_BACKEND = "cache+memory://"
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True

NOTIFICATION_BACKEND = "apps.support.messaging.backends.LocmemNotificationBackend"

SUBMISSION_AUTO_GRADE_ENABLED = True

LOGGING["root"]["level"] = "WARNING"
LOGGING["loggers"]["apps"]["level"] = "WARNING"
