# app/shared/middleware/__init__.py (async version)

from app.shared.middleware.exception_middleware import AsyncExceptionMiddleware, validation_exception_handler
from app.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware

# Export all for easy imports
__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncRequestLoggingMiddleware",
    "validation_exception_handler",
]
