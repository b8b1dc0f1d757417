# apps/support/messaging/tasks.py
import logging
from typing import Any, Dict

from celery import shared_task

from apps.support.messaging.backends import get_notification_backend

logger = logging.getLogger(__name__)


@shared_task(bind=True, autoretry_for=(ConnectionError,), retry_kwargs={"max_retries": 3})
def deliver_notification_task(self, event: str, payload: Dict[str, Any]) -> bool:
    get_notification_backend().send(event, payload)
    logger.debug("notification delivered event=%s", event)
    return True
