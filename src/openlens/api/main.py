"""
Main Application Entry Point

FastAPI application factory, error handlers and router registration.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.middleware.base import BaseHTTPMiddleware

from openlens import __version__
from openlens.api.deps import load_search_engine
from openlens.api.metrics import MetricsMiddleware, router as metrics_router
from openlens.api.middleware.rate_limiter import limiter, rate_limit_exceeded_handler
from openlens.api.middleware.request_logging import RequestLoggingMiddleware
from openlens.api.routers import search_api, system
from openlens.core.config import settings
from openlens.core.infrastructure_config import Environment
from openlens.corpus import CorpusUnavailableError
from openlens.search import EmptyQueryError, SearchError

logger = logging.getLogger(__name__)

EMPTY_QUERY_MESSAGE = "Query parameter 'q' is required"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Corpus Publication ---
    try:
        load_search_engine()
    except CorpusUnavailableError as e:
        # Keep serving health checks; search answers 503 until data exists
        logger.error("Could not load search data: %s", e)
    yield


async def search_error_handler(request: Request, exc: SearchError):
    """User-input errors: empty query, unknown mode."""
    message = EMPTY_QUERY_MESSAGE if isinstance(exc, EmptyQueryError) else str(exc)
    return JSONResponse(status_code=400, content={"error": message})


async def corpus_unavailable_handler(request: Request, exc: CorpusUnavailableError):
    """Operational error: the exporter's data is missing or invalid."""
    return JSONResponse(
        status_code=503,
        content={"error": "Search data unavailable", "detail": str(exc)},
    )


def create_app() -> FastAPI:
    """
    FastAPI application factory

    Creates and configures the FastAPI application with all routers.
    """
    is_production = settings.ENVIRONMENT == Environment.PRODUCTION
    app = FastAPI(
        lifespan=lifespan,
        # Interactive docs are not served in production
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
        title="OpenLens Search API",
        version=__version__,
        description="Conjunctive keyword search over an exported page and image corpus.",
        openapi_tags=[
            {"name": "search", "description": "Search and corpus stats"},
            {"name": "system", "description": "Health checks"},
            {"name": "metrics", "description": "Prometheus metrics"},
        ],
    )

    # --- Rate Limiter ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Error Handlers ---
    app.add_exception_handler(SearchError, search_error_handler)
    app.add_exception_handler(CorpusUnavailableError, corpus_unavailable_handler)

    # --- Middleware (order matters: last added = first executed) ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.ALLOWED_HOSTS)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Root-level health endpoints (Kubernetes health checks)
    app.include_router(system.root_router, tags=["system"])

    # API routes with /api/v1 prefix
    app.include_router(system.router, prefix="/api/v1", tags=["system"])
    app.include_router(search_api.router, prefix="/api/v1", tags=["search"])
    app.include_router(metrics_router, prefix="/api/v1", tags=["metrics"])

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    uvicorn.run(
        "openlens.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
