# apps/api/config/settings/worker.py

from .base import *
import os

# 워커는 URLConf 불필요
ROOT_URLCONF = None

# ==================================================
# Celery (워커 필수)
# ==================================================

CELERY_BROKER_URL = os.environ["CELERY_BROKER_URL"]
CELERY_RESULT_BACKEND = os.environ["CELERY_RESULT_BACKEND"]

CELERY_TASK_ACKS_LATE = True
CELERY_TASK_REJECT_ON_WORKER_LOST = True
CELERY_WORKER_PREFETCH_MULTIPLIER = 1

# grading 중 실수로 auto-grade 재발행 루프가 생기지 않도록 워커에서도 명시
SUBMISSION_AUTO_GRADE_ENABLED = os.environ.get(
    "SUBMISSION_AUTO_GRADE_ENABLED", "true"
).lower() in ("true", "1", "yes")
