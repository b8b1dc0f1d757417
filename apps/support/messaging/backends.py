"""
Notification 발송 backend

- settings.NOTIFICATION_BACKEND (dotted path) 로 선택
- 기본: LoggingNotificationBackend (로그만 남김)
- 테스트: LocmemNotificationBackend (outbox 리스트에 쌓음)
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from django.conf import settings
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


class BaseNotificationBackend(ABC):
    @abstractmethod
    def send(self, event: str, payload: Dict[str, Any]) -> None:
        raise NotImplementedError


class LoggingNotificationBackend(BaseNotificationBackend):
    """실제 발송 없이 발송될 JSON만 로깅."""

    def send(self, event: str, payload: Dict[str, Any]) -> None:
        logger.info(
            "[NOTIFICATION] event=%s payload=%s",
            event,
            json.dumps(payload, ensure_ascii=False, default=str),
        )


# LocmemNotificationBackend 가 쌓는 곳 (프로세스 로컬)
outbox: List[Dict[str, Any]] = []


class LocmemNotificationBackend(BaseNotificationBackend):
    def send(self, event: str, payload: Dict[str, Any]) -> None:
        outbox.append({"event": event, "payload": dict(payload)})


def get_notification_backend() -> BaseNotificationBackend:
    backend_cls = import_string(settings.NOTIFICATION_BACKEND)
    return backend_cls()
