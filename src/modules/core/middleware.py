import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

logger = structlog.get_logger(__name__)


class CorrelationIdMiddleware:
    """Tag every request with a correlation ID and log its lifecycle.

    The ID comes from the ``X-Request-ID`` header or is a fresh UUID4.  It
    is bound into structlog's context vars, so every log line emitted while
    serving the request (service, repository, error paths) carries it, and
    it is echoed back in the ``X-Request-ID`` response header.
    """

    header = "HTTP_X_REQUEST_ID"

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get(self.header) or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        started = time.monotonic()
        logger.info("request.started", method=request.method, path=request.path)

        response = self.get_response(request)

        logger.info(
            "request.finished",
            method=request.method,
            path=request.path,
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - started) * 1000, 2),
        )

        response["X-Request-ID"] = cid
        return response
