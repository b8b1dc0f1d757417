# apps/api/config/settings/dev.py
from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

# 로컬: DB_NAME 없으면 sqlite 사용
if not os.getenv("DB_NAME"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

INSTALLED_APPS += [
    "debug_toolbar",
]

MIDDLEWARE.insert(0, "debug_toolbar.middleware.DebugToolbarMiddleware")

INTERNAL_IPS = [
    "127.0.0.1",
]

LOGGING["loggers"]["apps"]["level"] = "DEBUG"
