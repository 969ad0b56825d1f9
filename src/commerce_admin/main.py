# src/commerce_admin/main.py
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import ValidationError
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from commerce_admin.api.dependencies import close_record_store, init_record_store
from commerce_admin.api.responses import (
    http_exception_handler,
    not_found_exception_handler,
    validation_exception_handler,
)
from commerce_admin.api.v1.router import api_router
from commerce_admin.core.config import get_settings
from commerce_admin.core.log_config import setup_logging
from commerce_admin.core.metrics import REQUEST_COUNT
from commerce_admin.domain.errors import EntityNotFoundError
from commerce_admin.services.seeding import seed_all

settings = get_settings()
logger = logging.getLogger(__name__)


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        REQUEST_COUNT.labels(
            method=request.method,
            path=request.url.path,
            status_code=str(response.status_code),
        ).inc()
        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # Startup: Record Store öffnen und einmalig mit Mock-Daten befüllen
    setup_logging(settings)
    store = await init_record_store(settings)
    if settings.seed_on_startup:
        await seed_all(store)
    logger.info("%s %s started", settings.app_name, settings.app_version)
    yield
    # Shutdown
    await close_record_store()


limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit],
    enabled=settings.rate_limit_enabled,
)

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Rate Limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]
app.add_middleware(SlowAPIMiddleware)

# Error envelope
app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(ValidationError, validation_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(EntityNotFoundError, not_found_exception_handler)  # type: ignore[arg-type]

# Metrics Middleware
app.add_middleware(MetricsMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)

app.include_router(api_router)


@app.get("/healthz", tags=["Health"])
async def health_check() -> dict[str, str]:
    return {"status": "ok", "version": settings.app_version}


@app.get("/readyz", tags=["Health"])
async def readiness_check() -> dict[str, str]:
    return {"status": "ready"}


@app.get("/metrics", tags=["Monitoring"])
async def metrics_endpoint() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
