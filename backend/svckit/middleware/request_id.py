"""
svckit: Request ID Middleware
================================

What:  Tags every RPC call with a correlation ID.
How:   A client-supplied X-Request-ID is reused when it is short and
       printable; anything else is replaced by an 8-character UUID prefix.
       The ID goes into `request_id_var` for loggers and the exception
       handlers, and back to the caller in the X-Request-ID header.
"""

import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 64

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def resolve_request_id(header: Optional[str]) -> str:
    """Return the caller's ID if it is usable in a log line, else a fresh one."""
    if header:
        header = header.strip()
        if 0 < len(header) <= MAX_REQUEST_ID_LENGTH and header.isprintable():
            return header
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        # Left set after the call: the 500 handler runs outside this middleware
        request_id_var.set(rid)
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
