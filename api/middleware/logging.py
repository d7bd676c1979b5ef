"""Request logging middleware."""

import logging
import re
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("outletcogs.api")

REQUEST_ID_HEADER = "X-Request-ID"

# Accepted shape for caller-supplied request ids
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

# Load balancer health checks are logged at DEBUG
_QUIET_PREFIXES = ("/health",)


def request_id_for(request: Request) -> str:
    """Request id assigned by the middleware, or "unknown" outside it."""
    return getattr(request.state, "request_id", "unknown")


def _resolve_request_id(request: Request) -> str:
    incoming = request.headers.get(REQUEST_ID_HEADER)
    if incoming and _REQUEST_ID_PATTERN.match(incoming):
        return incoming
    return str(uuid.uuid4())[:8]


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each request with its id and duration.

    A well-formed X-Request-ID from the caller is reused so ids can be
    followed across services; otherwise a short id is generated. The id
    is echoed on the response and read by the error handlers.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = _resolve_request_id(request)
        request.state.request_id = request_id

        path = request.url.path
        quiet = path.startswith(_QUIET_PREFIXES)
        label = f"[{request_id}] {request.method} {path}"
        start_time = time.perf_counter()

        logger.log(logging.DEBUG if quiet else logging.INFO, f"{label} - Started")

        try:
            response = await call_next(request)
        except Exception as e:
            duration = (time.perf_counter() - start_time) * 1000
            logger.error(f"{label} - Error after {duration:.2f}ms: {e}")
            raise

        duration = (time.perf_counter() - start_time) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Response-Time-Ms"] = f"{duration:.2f}"

        if response.status_code >= 400:
            log_level = logging.WARNING
        elif quiet:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO
        logger.log(log_level, f"{label} - {response.status_code} in {duration:.2f}ms")

        return response
