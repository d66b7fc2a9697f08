"""
ConfTrack Backend: Request ID Middleware
========================================

What:  Gives every request a correlation ID and returns it in X-Request-ID.
How:   Webhook providers usually send their delivery id as X-Request-ID; it is
       kept when it looks like an identifier and replaced otherwise, so log
       lines never carry arbitrary header content.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

_ACCEPTED_REQUEST_ID = re.compile(r"^[A-Za-z0-9._:-]{1,64}$")

# Read by the access log and the exception handlers
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:12]


def resolve_request_id(supplied: Optional[str]) -> str:
    """The caller's ID if it is usable, otherwise a fresh one."""
    if supplied and _ACCEPTED_REQUEST_ID.match(supplied):
        return supplied
    return new_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request_id_var.set(rid)
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
