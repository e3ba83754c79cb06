"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- /user (register, login, reset-password, get, delete)
- /message (addMessage, getMessages)
- /socket (WebSocket broadcast subscription)
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka import Provider
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from chatroom.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from chatroom.config.settings import get_config
from chatroom.infrastructure.realtime import WebSocketBroadcaster
from chatroom.presentation.api import (
    messages_router,
    realtime_router,
    users_router,
)
from chatroom.setup.ioc import create_container, store_provider

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: start the broadcast dispatcher
    - Shutdown: stop it, then close the DI container (disconnects Prisma)
    """
    app.state.broadcaster.start()
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await app.state.broadcaster.stop()
    await app.state.dishka_container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def create_fastapi_app(
    *store_providers: Provider,
    broadcaster: Optional[WebSocketBroadcaster] = None,
) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        store_providers: dishka providers for the repository ports; defaults to
            the one selected by the STORE_BACKEND of the APP_ENV config
        broadcaster: shared broadcaster; a fresh one is created if omitted

    Returns:
        FastAPI application instance
    """
    config = get_config()
    setup_logging(config.LOG_LEVEL, config.LOG_PATH, config.LOG_FORMAT)

    if not store_providers:
        store_providers = (store_provider(config.STORE_BACKEND),)
    if broadcaster is None:
        broadcaster = WebSocketBroadcaster(max_queue_size=config.BROADCAST_QUEUE_SIZE)

    app = FastAPI(
        title="Chatroom API",
        description="Users, messages and real-time message broadcast",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.broadcaster = broadcaster

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    container = create_container(broadcaster, *store_providers)
    setup_dishka(container, app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Framework-level validation errors (e.g. a body that is not JSON)
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        details = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
            for err in exc.errors()
        ]
        logger.info(f"[VALIDATION ERROR] {request.method} {request.url.path}: {details}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Validation error", "details": details},
        )

    # HTTP exception handler - every error body is {"error": ...}
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code >= 500:
            logger.error(f"[HTTP ERROR {exc.status_code}] {request.url.path}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": f"Internal server error: {str(exc)}"},
        )

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "FastAPI server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy", "subscribers": broadcaster.subscriber_count}

    # Register routers
    app.include_router(users_router)  # /user/...
    app.include_router(messages_router)  # /message/...
    app.include_router(realtime_router)  # WS /socket

    return app


# Create the app instance
app = create_fastapi_app()
