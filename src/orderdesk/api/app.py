"""FastAPI application factory.

Wires configuration, logging, CORS, request logging and the
error-body mapping shared by every route.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from http import HTTPStatus
from pathlib import Path
from typing import AsyncIterator, Generator, Mapping

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from orderdesk.config import get_settings
from orderdesk.db.repo import DbSession
from orderdesk.db.session import get_session, init_db
from orderdesk.models.types import ErrorResponse
from orderdesk.orders.validation import OrderValidationError

logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the API process."""
    log_level = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def get_db_session(request: Request) -> Generator[DbSession, None, None]:
    """Dependency to get database session.

    Yields:
        Database session that is automatically closed after request.
    """
    session = get_session(request.app.state.db_path)
    try:
        yield session
    finally:
        session.close()


def _error_response(
    status_code: int,
    error: str,
    message: str,
    details: list[str] | None = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


def _register_error_handlers(app: FastAPI) -> None:
    """Map exceptions to {error, message[, details]} bodies."""

    @app.exception_handler(OrderValidationError)
    async def order_validation_error(request: Request, exc: OrderValidationError):
        return _error_response(400, "Validation failed", "Invalid order data", exc.errors)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        details = [
            f"{'.'.join(str(part) for part in err['loc'][1:])}: {err['msg']}"
            for err in exc.errors()
        ]
        return _error_response(
            400, "Invalid request parameters", "Request could not be parsed", details
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        # keep headers such as Allow on 405
        return _error_response(
            exc.status_code,
            HTTPStatus(exc.status_code).phrase,
            str(exc.detail),
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _error_response(500, "Internal server error", "Failed to process request")


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and create tables when the server starts."""
    configure_logging()
    init_db(app.state.db_path)
    yield


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        db_path: Optional path to database file. Defaults to the configured path.

    Returns:
        Configured FastAPI application.
    """
    settings = get_settings()

    app = FastAPI(
        title="Orderdesk API",
        description="Order management with aggregate statistics",
        version="0.1.0",
        lifespan=_lifespan,
    )
    app.state.db_path = db_path if db_path is not None else settings.db_path

    # Add CORS middleware for dashboard access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        client = request.client.host if request.client else "-"
        logger.info(f"{request.method} {request.url.path} - {client}")
        return await call_next(request)

    _register_error_handlers(app)

    # Include routes
    from orderdesk.api.routes import orders

    app.include_router(orders.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
