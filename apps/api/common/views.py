"""
공통 API 뷰
"""
import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health_check(request):
    """
    헬스체크 엔드포인트

    Returns:
        - 200: 정상
        - 503: 데이터베이스 연결 실패
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as e:
        logger.warning("health_check database error: %s", e)
        return JsonResponse({
            "status": "unhealthy",
            "service": "assessment-api",
            "database": "disconnected",
            "error": str(e),
        }, status=503)

    return JsonResponse({
        "status": "healthy",
        "service": "assessment-api",
        "database": "connected",
    }, status=200)
