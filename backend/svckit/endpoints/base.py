"""
svckit: Endpoint Types and Middleware
========================================

What:  The call-unit abstraction shared by every operation.
How:   An Endpoint is a plain callable of one decoded request model to one
       response model. A Middleware wraps an Endpoint and returns another,
       so cross-cutting behavior (logging, timing) composes without the
       endpoints or transports knowing about it.

Contract:
    Endpoints never raise domain errors. A SvcKitError from a service is
    copied into the response's `err` field and the endpoint returns
    normally, so the transport can always encode a well-formed body.
"""

import logging
import time
from functools import wraps
from typing import Any, Callable

Endpoint = Callable[[Any], Any]
Middleware = Callable[[Endpoint], Endpoint]

logger = logging.getLogger(__name__)


def logging_middleware(name: str) -> Middleware:
    """
    Build a middleware that logs each call of the wrapped endpoint.

    Logged at DEBUG: endpoint name, duration, and any embedded error.
    """

    def middleware(endpoint: Endpoint) -> Endpoint:
        @wraps(endpoint)
        def logged(request: Any) -> Any:
            start_time = time.perf_counter()
            response = endpoint(request)
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.debug(
                "endpoint=%s took=%.3fms err=%r",
                name,
                duration_ms,
                getattr(response, "err", None) or "",
            )
            return response

        return logged

    return middleware
