"""
Main entrypoint for the Booking Manager API.

This module assembles the FastAPI application, sets up logging, CORS
and request logging middleware, registers the error handlers and
includes the API routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn, e.g.::

    uvicorn booking_manager_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.endpoints import health
from .api.router import router as api_router
from .core.config import settings
from .core.errors import BookingManagerError
from .core.logging_config import setup_logging
from .core.store import init_store


logger = logging.getLogger(__name__)


async def booking_manager_error_handler(request: Request, exc: BookingManagerError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed bodies and path parameters with 400 instead of 422."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        problems.append(f"{location}: {error.get('msg')}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request. " + "; ".join(problems)},
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown paths and unsupported methods on known paths are both
    # reported as a plain 404.
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "Not found"})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def _log_request(request: Request, status_code: int, started: float) -> None:
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s %s %.1f ms", request.method, request.url.path, status_code, elapsed_ms)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    This function performs one‑time setup tasks such as configuring
    logging, installing middleware, registering exception handlers and
    including the routers.  It returns a fully configured FastAPI
    instance ready to be served.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # The unhandled error handler answers with a 500.
            _log_request(request, status.HTTP_500_INTERNAL_SERVER_ERROR, started)
            raise
        _log_request(request, response.status_code, started)
        return response

    app.add_exception_handler(BookingManagerError, booking_manager_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(health.router, tags=["health"])
    app.include_router(api_router, prefix="/api")

    # Seed the in‑memory stores when the server starts.
    @app.on_event("startup")
    async def startup_event() -> None:
        init_store()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
