"""
Storefront Orders - Main FastAPI Application.

REST API for composing orders, hosted checkout sessions and sales
reporting.
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import time

from api.routes import health, orders
from core.domain.exceptions import (
    DomainError,
    GatewayError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from core.infrastructure.database.config import close_database, init_database
from core.infrastructure.logging import configure_logging
from core.settings import get_app_settings


settings = get_app_settings()

# Setup logging
configure_logging(settings.api.log_level)
logger = logging.getLogger(__name__)


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title=settings.api.title,
    description="""
    Order composition and checkout for the storefront.

    Features:
    - Compose orders from line items priced from the catalog
    - Hosted checkout sessions (Stripe)
    - Order status updates and cascading delete
    - Sales totals and order counts
    """,
    version=settings.api.version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)


# =============================================================================
# CORS MIDDLEWARE
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()

    logger.info(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )

    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

_STATUS_BY_ERROR = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    PersistenceError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    GatewayError: status.HTTP_502_BAD_GATEWAY,
}


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    """Translate domain errors into {success: false, message} responses."""
    status_code = next(
        (code for error_type, code in _STATUS_BY_ERROR.items() if isinstance(exc, error_type)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if status_code >= 500:
        logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
    else:
        logger.info(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
    return _failure(status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client input errors."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return _failure(status.HTTP_400_BAD_REQUEST, f"Invalid request: {details}")


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


# =============================================================================
# STARTUP/SHUTDOWN EVENTS
# =============================================================================

@app.on_event("startup")
async def startup_event():
    """Run on application startup."""
    logger.info("🚀 Storefront Orders API starting up...")
    await init_database()
    logger.info("📚 Swagger UI available at: /docs")


@app.on_event("shutdown")
async def shutdown_event():
    """Run on application shutdown."""
    await close_database()
    logger.info("👋 Storefront Orders API shutting down...")


# =============================================================================
# INCLUDE ROUTERS
# =============================================================================

app.include_router(
    health.router,
    tags=["Health"]
)

app.include_router(
    orders.router,
    prefix=f"{settings.api.prefix}/orders",
    tags=["Orders"]
)


# =============================================================================
# ROOT ENDPOINT
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """API root endpoint."""
    return {
        "message": settings.api.title,
        "version": settings.api.version,
        "docs": "/docs",
        "health": "/health"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
