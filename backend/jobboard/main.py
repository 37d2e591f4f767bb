"""Main FastAPI application."""

import time
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text

from jobboard.api import (
    alerts,
    errors,
    jobs,
    listing,
    metrics,
    recent_searches,
    saved_jobs,
    saved_searches,
    search,
)
from jobboard.core import settings, setup_logging
from jobboard.core.logging import get_logger, request_id_var
from jobboard.core.metrics import (
    HTTP_REQUEST_DURATION_SECONDS,
    HTTP_REQUESTS_IN_PROGRESS,
    HTTP_REQUESTS_TOTAL,
    set_app_info,
)
from jobboard.core.ratelimit import limiter
from jobboard.db import SessionLocal, seed_default_data
from jobboard.domain.exceptions import DomainError

# Setup logging
setup_logging()
logger = get_logger(__name__)

# Create app
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
)

# Set application info metric
set_app_info(version=settings.api_version, environment=settings.environment)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def prometheus_metrics_middleware(request: Request, call_next):
    """Collect Prometheus metrics for all HTTP requests."""
    if request.url.path == "/metrics":
        return await call_next(request)

    method = request.method
    # Numeric path segments collapse to {id} to bound label cardinality
    endpoint = "/".join(
        "{id}" if part.isdigit() else part for part in request.url.path.split("/")
    )

    HTTP_REQUESTS_IN_PROGRESS.labels(method=method, endpoint=endpoint).inc()
    start_time = time.perf_counter()

    try:
        response = await call_next(request)
        status_code = str(response.status_code)
    except Exception:
        status_code = "500"
        raise
    finally:
        duration = time.perf_counter() - start_time
        HTTP_REQUESTS_IN_PROGRESS.labels(method=method, endpoint=endpoint).dec()
        HTTP_REQUEST_DURATION_SECONDS.labels(method=method, endpoint=endpoint).observe(duration)
        HTTP_REQUESTS_TOTAL.labels(method=method, endpoint=endpoint, status_code=status_code).inc()

    return response


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Assign a request id and log one line per request."""
    request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
    token = request_id_var.set(request_id)
    start_time = time.perf_counter()
    try:
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        logger.info(
            "%s %s -> %s",
            request.method,
            request.url.path,
            response.status_code,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - start_time) * 1000, 2),
            },
        )
        return response
    finally:
        request_id_var.reset(token)


# Include routers
app.include_router(metrics.router)  # Metrics at root level (not under /api/v1)
app.include_router(listing.router)  # Listing contract path is /jobs-listing
app.include_router(jobs.router, prefix=settings.api_prefix)
app.include_router(saved_searches.router, prefix=settings.api_prefix)
app.include_router(saved_jobs.router, prefix=settings.api_prefix)
app.include_router(recent_searches.router, prefix=settings.api_prefix)
app.include_router(search.router, prefix=settings.api_prefix)
app.include_router(alerts.router, prefix=settings.api_prefix)


@app.on_event("startup")
async def seed_defaults() -> None:
    """Seed demo data on startup; failures are logged, never fatal."""
    if settings.testing:
        return
    db = SessionLocal()
    try:
        seed_default_data(db)
    except Exception as exc:  # pragma: no cover - best effort
        logger.warning("Skipping default seed: %s", exc)
        db.rollback()
    finally:
        db.close()


@app.get("/health")
async def health() -> dict:
    """Basic health check endpoint (alias for /health/live)."""
    return {"status": "healthy"}


@app.get("/health/live")
async def health_live() -> dict:
    """Liveness probe: the process answers requests."""
    return {"status": "healthy"}


@app.get("/health/ready")
async def health_ready():
    """Readiness probe: 200 when the database answers, 503 otherwise."""
    dependencies = {"database": {"status": "healthy"}}
    healthy = True
    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
        finally:
            db.close()
    except Exception as exc:
        dependencies["database"] = {"status": "unhealthy", "error": str(exc)}
        healthy = False

    result = {"status": "healthy" if healthy else "unhealthy", "dependencies": dependencies}
    if healthy:
        return result
    return JSONResponse(status_code=503, content=result)


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "message": settings.api_title,
        "version": settings.api_version,
        "docs": "/docs",
    }


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    """Translate domain errors to HTTP responses globally."""
    http_exc = errors.to_http(exc)
    return JSONResponse(
        status_code=http_exc.status_code,
        content={"detail": http_exc.detail},
    )
