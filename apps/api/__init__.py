# shared_task가 이 app에 바인딩되도록 Django 기동 시 함께 로드
from .celery import app as celery_app

__all__ = ("celery_app",)
