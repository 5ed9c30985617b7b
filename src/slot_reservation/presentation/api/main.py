"""FastAPI main application module."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from ...domain.errors import BookingError, MalformedRequestError
from ...infrastructure.logging import log_business_rule_violation
from ...infrastructure.services import initialize_services, shutdown_services
from .routes import health, slots, bookings
from .config import get_settings
from .middleware.logging import RequestResponseLoggingMiddleware


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    # Startup
    logger.info("Starting Slot Reservation API")
    await initialize_services()

    yield

    # Shutdown
    logger.info("Shutting down Slot Reservation API")
    await shutdown_services()


def add_exception_handlers(app: FastAPI) -> None:
    """Add custom exception handlers to the FastAPI application."""

    @app.exception_handler(BookingError)
    async def booking_error_handler(request: Request, exc: BookingError):
        """Handle rejected slot queries and claims."""
        log_business_rule_violation(
            logger,
            exc.kind.value,
            str(exc),
            request_method=request.method,
            request_path=request.url.path,
        )
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle request bodies that cannot be decoded."""
        error = MalformedRequestError()
        logger.warning(
            f"Malformed request on {request.url.path}",
            extra={"request_method": request.method, "validation_errors": exc.errors()}
        )
        return JSONResponse(status_code=400, content={"error": str(error)})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        """Handle faults that are not booking outcomes."""
        logger.error(
            f"Unexpected error on {request.method} {request.url.path}: {exc}",
            exc_info=exc
        )
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(use_lifespan: bool = True) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Slot Reservation Service",
        description="API for querying and atomically claiming hourly appointment slots",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan if use_lifespan else None
    )

    # Add custom exception handlers
    add_exception_handlers(app)

    app.add_middleware(RequestResponseLoggingMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=False,
        allow_methods=settings.allowed_methods,
        allow_headers=settings.allowed_headers,
    )

    # Include routers
    app.include_router(health.router, tags=["health"])
    app.include_router(slots.router, prefix="/slots", tags=["slots"])
    app.include_router(bookings.router, prefix="/bookings", tags=["bookings"])

    return app


# Create app instance
app = create_app()
