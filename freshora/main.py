# freshora/main.py
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from freshora.api.routers import carts, health, items, orders, services
from freshora.api.security import SecurityHeadersMiddleware, setup_rate_limiting
from freshora.data.database import Database
from freshora.domain.errors import AppError
from freshora.utils.logging import get_logger, setup_logging
from freshora.utils.settings import DATABASE_URL, FRONTEND_URL, PORT, is_development

logger = get_logger(__name__)


def _error(status_code: int, error: str, **extra) -> JSONResponse:
    body = {"success": False, "error": error}
    body.update({k: v for k, v in extra.items() if v is not None})
    return JSONResponse(status_code=status_code, content=body)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
            message = exc.message if is_development() else "Internal server error"
            return _error(exc.status_code, message)
        return _error(exc.status_code, exc.message, errors=exc.errors)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = [
            {
                # drop the "body"/"query"/"path" prefix
                "field": ".".join(str(p) for p in err["loc"][1:]) or str(err["loc"][0]),
                "message": err["msg"],
            }
            for err in exc.errors()
        ]
        return _error(400, "Validation failed", errors=errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404 and exc.detail == "Not Found":
            return _error(404, "Route not found")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        details = str(exc) if is_development() else None
        return _error(500, "Internal server error", details=details)


def create_app(database: Database | None = None, rate_limit: str | None = None) -> FastAPI:
    """
    Builds the API around an explicit Database handle.
    Tables are created here; the engine is disposed on shutdown.
    rate_limit overrides RATE_LIMIT, e.g. "5 per minute".
    """
    setup_logging()

    db = database or Database(DATABASE_URL)
    db.create_all()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Freshora API started")
        yield
        db.dispose()
        logger.info("Freshora API stopped")

    app = FastAPI(
        title="Freshora Laundry API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.db = db

    # added innermost first: a 429 still gets security and CORS headers
    setup_rate_limiting(app, rate_limit)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in FRONTEND_URL.split(",")],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{request.method} {request.url.path} {response.status_code} {duration_ms:.1f}ms")
        return response

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(services.router)
    app.include_router(items.router)
    app.include_router(carts.router)
    app.include_router(orders.router)

    return app


if __name__ == "__main__":
    uvicorn.run("freshora.main:create_app", factory=True, host="0.0.0.0", port=PORT)
