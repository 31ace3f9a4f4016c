# freshora/api/security.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware

from freshora.utils.logging import get_logger
from freshora.utils.settings import RATE_LIMIT, RATE_LIMIT_ENABLED

logger = get_logger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."

SECURITY_HEADERS = {
    "Content-Security-Policy": "default-src 'self'; img-src 'self' data:; object-src 'none'; frame-ancestors 'none'",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    # SlowAPIMiddleware calls the registered handler without awaiting it
    logger.warning(f"Rate limit hit by {get_remote_address(request)} on {request.url.path}")
    return JSONResponse(status_code=429, content={"success": False, "error": RATE_LIMIT_MESSAGE})


def setup_rate_limiting(app: FastAPI, rate_limit: str | None = None) -> Limiter:
    """
    One limiter per app with in-memory storage. The limit is shared by all
    routes, counted per client address.
    Use storage_uri="redis://..." when running several workers.
    """
    limiter = Limiter(
        key_func=get_remote_address,
        application_limits=[rate_limit or RATE_LIMIT],
        enabled=RATE_LIMIT_ENABLED,
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
    return limiter
