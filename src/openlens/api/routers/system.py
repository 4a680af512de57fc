"""
System Router

Provides Kubernetes-compatible health check endpoints:
- /health: Simple health for load balancers
- /health/live: Liveness check (process alive)
- /health/ready: Readiness check (corpus loaded)
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from openlens.api.deps import get_search_engine
from openlens.corpus import CorpusUnavailableError

# Router for /api/v1 prefix
router = APIRouter()

# Router for root-level health endpoints
root_router = APIRouter()


def _check_corpus() -> bool:
    """Check that the search corpus is loaded."""
    try:
        get_search_engine()
    except CorpusUnavailableError:
        return False
    return True


def _get_readiness_response():
    """Get readiness status with dependency checks."""
    checks = {
        "corpus": "ok" if _check_corpus() else "unavailable",
    }

    all_healthy = all(v == "ok" for v in checks.values())
    status = "ok" if all_healthy else "unhealthy"

    return JSONResponse(
        status_code=200 if all_healthy else 503,
        content={"status": status, "checks": checks},
    )


# --- Root-level endpoints (Kubernetes health checks) ---

@root_router.get("/health")
async def health():
    """Simple health check for load balancers."""
    return {"status": "ok"}


@root_router.get("/health/live")
async def liveness():
    """Kubernetes liveness check - is the process running?"""
    return {"status": "ok"}


@root_router.get("/health/ready")
async def readiness():
    """Kubernetes readiness check - is the corpus loaded?"""
    return _get_readiness_response()


# --- /api/v1 endpoints ---

@router.get("/health")
async def health_api():
    """Health check for API clients."""
    return {"status": "ok"}
