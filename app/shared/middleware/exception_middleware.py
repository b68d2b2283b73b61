# app/shared/middleware/exception_middleware.py (async version)

"""
Middleware for centralized exception handling.

This module defines the middleware that intercepts exceptions and formats
the error responses for the client as ``{statusCode, message, errorCode}``.
"""

import time
import logging
import traceback
from typing import Callable

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from app.domain.exceptions import ErrorCode, PasswordManagerException
from app.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, error_code: ErrorCode) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "statusCode": status_code,
            "message": message,
            "errorCode": error_code.value,
        }
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report invalid request bodies and parameters as 400 Bad Request."""
    fields = ", ".join(
        f"{'.'.join(str(part) for part in error['loc'][1:]) or error['loc'][0]}: {error['msg']}"
        for error in exc.errors()
    )
    logger.warning(f"Validation error: {fields} | Path: {request.url.path}")
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        f"Invalid request: {fields}",
        ErrorCode.BAD_REQUEST,
    )


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures specific exceptions and formats the response accordingly.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            return response

        except PasswordManagerException as exc:
            # Domain exceptions already carry their status code and error code
            log = logger.error if exc.status_code >= 500 else logger.warning
            log(
                f"Domain exception: {exc.message} | Code: {exc.error_code.value} | "
                f"Status: {exc.status_code} | Path: {request.url.path}"
            )
            return error_response(exc.status_code, exc.message, exc.error_code)

        except SQLAlchemyError as exc:
            # Database errors that escaped the repositories (e.g. the final commit)
            logger.error(
                f"Database error: Type={type(exc).__name__} | "
                f"Path: {request.url.path} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )
            return error_response(
                status.HTTP_503_SERVICE_UNAVAILABLE,
                "Service is temporarily unavailable.",
                ErrorCode.STORAGE_DOWN,
            )

        except Exception as exc:
            # Unhandled exceptions, including crypto failures
            if settings.ENVIRONMENT == "production":
                error_message = "Internal Server Error"
                logger.exception(
                    f"Unhandled exception: Type={type(exc).__name__} | "
                    f"Path: {request.url.path} | "
                    f"Client: {request.client.host if request.client else 'N/A'}"
                )
            else:
                error_message = str(exc) or type(exc).__name__
                stack_trace = traceback.format_exc()
                logger.exception(
                    f"Unhandled exception: {str(exc)} | "
                    f"Path: {request.url.path} | "
                    f"Client: {request.client.host if request.client else 'N/A'}\n"
                    f"Traceback: {stack_trace}"
                )
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                error_message,
                ErrorCode.INTERNAL_SERVER_ERROR,
            )
