"""
svckit: RPC Access Log
=========================

What:  One line per RPC call on the "svckit.access" logger.
How:   After the call returns, the line names the operation (the matched
       route's name, e.g. "uppercase"), the HTTP status, the outcome, the
       duration and the request ID.

Outcomes:
    ok         200, no domain error                    → INFO
    err        200 carrying a domain `err` value       → INFO, with err=...
    malformed  4xx (bad body, wrong method, no route)  → WARNING
    failed     5xx                                     → ERROR

Request and response bodies are never logged; `err` is the only payload
value that appears.
"""

import logging
import time
from typing import Tuple

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from svckit.middleware.request_id import request_id_var

logger = logging.getLogger("svckit.access")


def classify(status: int, rpc_err: str) -> Tuple[int, str]:
    """Map an HTTP status and domain error to (log level, outcome)."""
    if status >= 500:
        return logging.ERROR, "failed"
    if status >= 400:
        return logging.WARNING, "malformed"
    if rpc_err:
        return logging.INFO, "err"
    return logging.INFO, "ok"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    # Polled by monitors
    EXCLUDED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.EXCLUDED_PATHS:
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        route = request.scope.get("route")
        operation = getattr(route, "name", None) or request.url.path
        rpc_err = getattr(request.state, "rpc_err", "")
        level, outcome = classify(response.status_code, rpc_err)

        message = "op=%s status=%d outcome=%s %.1fms [%s]"
        args = [operation, response.status_code, outcome, duration_ms, request_id_var.get("")]
        if rpc_err:
            message += " err=%r"
            args.append(rpc_err)

        logger.log(
            level,
            message,
            *args,
            extra={
                "operation": operation,
                "status": response.status_code,
                "outcome": outcome,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response
