# app/main.py (async version)

import logging
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.openapi.utils import get_openapi
from contextlib import asynccontextmanager

from app.adapters.configuration.config import settings
from app.adapters.outbound.persistence.database import create_tables, engine

# ─── LOGGING CONFIGURATION ──────────────────────────────────────────────────────
level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)
# ────────────────────────────────────────────────────────────────────────────────

ERROR_SCHEMA = {
    "title": "ErrorResponse",
    "type": "object",
    "properties": {
        "statusCode": {"type": "integer"},
        "message": {"type": "string"},
        "errorCode": {"type": "string"},
    },
    "required": ["statusCode", "message", "errorCode"],
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Password Manager API starting ({settings.ENVIRONMENT})")
    await create_tables()

    yield

    logger.info("Password Manager API shutting down, disposing the engine")
    await engine.dispose()


app = FastAPI(
    title="Password Manager API",
    description="Stores clients and their encrypted passwords",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
    openapi_url="/openapi.json" if settings.SCHEMA_VISIBILITY else None,
)

# Middlewares, the last one added runs first
from app.shared.middleware import (
    AsyncExceptionMiddleware,
    AsyncRequestLoggingMiddleware,
    validation_exception_handler,
)

app.add_middleware(AsyncExceptionMiddleware)
app.add_middleware(AsyncRequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-Process-Time"],
)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Routers
from app.adapters.inbound.api.v1.router import api_router as api_v1_router

app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def redirect_to_docs():
    return RedirectResponse(url="/docs")


def custom_openapi():
    """
    Document validation failures the way they are answered: as 400 with
    the common error body instead of FastAPI's 422.
    """
    if app.openapi_schema:
        return app.openapi_schema

    spec = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    schemas = spec.setdefault("components", {}).setdefault("schemas", {})
    for schema in ("HTTPValidationError", "ValidationError"):
        schemas.pop(schema, None)
    schemas["ErrorResponse"] = ERROR_SCHEMA

    for path in spec.get("paths", {}).values():
        for op in path.values():
            responses = op.get("responses", {})
            if responses.pop("422", None) is not None:
                responses.setdefault("400", {
                    "description": "Invalid request",
                    "content": {
                        "application/json": {"schema": {"$ref": "#/components/schemas/ErrorResponse"}}
                    },
                })

    app.openapi_schema = spec
    return spec


app.openapi = custom_openapi
