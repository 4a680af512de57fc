# Rate Limiter for the search API
# Uses slowapi for IP-based rate limiting; limits are set per route

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from openlens.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Answer throttled clients in the same shape as other API errors."""
    return JSONResponse(
        status_code=429,
        content={"error": f"Too many requests: {exc.detail}"},
    )
