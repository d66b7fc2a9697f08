"""
ConfTrack Backend: Access Log Middleware
========================================

What:  One line per request on the `conftrack.access` logger:

           POST /recordings/webhook/recording-started 404 12.3ms [a1b2c3d4e5f6] event=recording.started session=99

How:   Webhook routes call tag_webhook_request() with the event name and
       session id from the payload; those land at the end of the line, so a
       failed delivery can be matched to the provider's retry without logging
       the body. Level follows the status class (5xx ERROR, 4xx WARNING).
       /health is not logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from conftrack.middleware.request_id import request_id_var

logger = logging.getLogger("conftrack.access")

UNLOGGED_PATHS = frozenset({"/health"})


def tag_webhook_request(request: Request, event: str, session_id: str) -> None:
    """Attach webhook correlation fields to the current request's access line."""
    request.state.webhook_tags = {"event": event, "session": session_id}


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in UNLOGGED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        line = "%s %s %d %.1fms [%s]"
        args = [
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id_var.get(""),
        ]
        tags = getattr(request.state, "webhook_tags", None)
        if tags:
            line += " event=%s session=%s"
            args += [tags["event"], tags["session"]]

        logger.log(_level_for(response.status_code), line, *args)
        return response
