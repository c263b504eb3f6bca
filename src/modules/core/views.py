import time

import structlog
from django.db import DatabaseError, connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.identity import caller_identity

logger = structlog.get_logger(__name__)


def health_check(request: HttpRequest) -> JsonResponse:
    """Public liveness probe: reports whether the database answers."""
    try:
        start = time.monotonic()
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        database = {
            "status": "up",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
        healthy = True
    except DatabaseError:
        database = {"status": "down"}
        healthy = False
        logger.error("health_check.database_down")

    return JsonResponse(
        {
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": {"database": database},
        },
        status=200 if healthy else 503,
    )


class MeView(APIView):
    """Echo the identity that order placement will record for the caller."""

    def get(self, request) -> Response:
        return Response({"user_id": caller_identity(request.user)})
