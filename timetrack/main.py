"""FastAPI application entry point."""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from timetrack.clock import SystemClock
from timetrack.config import settings
from timetrack.routers import entries, export, reports, timers, webhooks
from timetrack.store import TimeStore
from timetrack.utils.timeutil import isoformat_utc


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Invalid request"


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as client errors."""
    return JSONResponse(
        status_code=400,
        content={"detail": _describe_validation_error(exc)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log unexpected failures and hide their details from the client."""
    logger.exception("Unexpected error handling %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


def create_app(store: Optional[TimeStore] = None, clock=None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Time store to serve (a fresh in-memory store if None)
        clock: Clock for "now" (the system UTC clock if None)

    Returns:
        Configured FastAPI application instance
    """
    configure_logging()

    app = FastAPI(
        title="Time Tracking API",
        description="Timers, time entries and reports for issues",
        version=settings.service_version,
        debug=settings.debug,
    )

    app.state.store = store if store is not None else TimeStore()
    app.state.clock = clock if clock is not None else SystemClock()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Include routers
    app.include_router(timers.router)
    app.include_router(entries.router)
    app.include_router(reports.router)
    app.include_router(export.router)
    app.include_router(webhooks.router)

    @app.get("/health")
    async def health(request: Request):
        """Health check endpoint."""
        store = request.app.state.store
        return {
            "status": "healthy",
            "service": settings.service_name,
            "version": settings.service_version,
            "timestamp": isoformat_utc(request.app.state.clock.now()),
            "active_timers": store.count_active_timers(),
            "total_entries": store.count_entries(),
        }

    return app


app = create_app()
