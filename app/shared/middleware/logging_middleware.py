# app/shared/middleware/logging_middleware.py (async version)

"""
Middleware for HTTP request logging.

Every request gets a short identifier, echoed in the X-Request-ID header,
so the access lines of one call can be matched with the repository events
it produced.
"""

import time
import logging
from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line when a request arrives and one when its response leaves.

    Client errors are logged as warnings and server errors as errors.
    Bodies are never logged; they carry passwords.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex[:12]
        route = f"{request.method} {request.url.path}"

        if settings.ENVIRONMENT == "production":
            logger.info(f"[{request_id}] Request: {route}")
        else:
            logger.info(
                f"[{request_id}] Request: {route} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )

        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        if response.status_code >= 500:
            log = logger.error
        elif response.status_code >= 400:
            log = logger.warning
        else:
            log = logger.info
        log(f"[{request_id}] Response: {response.status_code} for {route} | Time: {elapsed:.4f}s")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
