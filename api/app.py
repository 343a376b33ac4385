"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    SportFwdError,
    ValidationError,
)
from .routes import health, users
from modules.admin.routes import router as admin_router
from modules.connections.routes import router as connections_router
from modules.events.routes import router as events_router
from modules.feed.routes import router as feed_router
from modules.groups.routes import router as groups_router
from modules.media.routes import router as media_router
from modules.messaging.routes import router as conversations_router
from modules.messaging.routes import messages_router
from modules.notifications.routes import router as notifications_router
from modules.posts.routes import router as posts_router
from modules.profiles.routes import router as profiles_router
from modules.verification.routes import router as verification_router

logger = logging.getLogger(__name__)

# Most specific first; the first matching kind decides the status
ERROR_STATUS: list[tuple[type[SportFwdError], int]] = [
    (NotFoundError, 404),
    (ValidationError, 422),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (ConflictError, 409),
    (ExternalServiceError, 502),
]


def status_for(error: SportFwdError) -> int:
    """HTTP status for a domain error, 500 when unclassified."""
    for kind, status_code in ERROR_STATUS:
        if isinstance(error, kind):
            return status_code
    return 500


async def handle_sportfwd_error(request: Request, exc: SportFwdError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}: {exc.message}")
    return JSONResponse(status_code=status_code, content=exc.to_dict())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Social network API for athletes, coaches, teams and sponsors",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(SportFwdError, handle_sportfwd_error)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(profiles_router, prefix="/api/profiles", tags=["profiles"])
    app.include_router(media_router, prefix="/api/media", tags=["media"])
    app.include_router(posts_router, prefix="/api/posts", tags=["posts"])
    app.include_router(feed_router, prefix="/api/feed", tags=["feed"])
    app.include_router(connections_router, prefix="/api/connections", tags=["connections"])
    app.include_router(notifications_router, prefix="/api/notifications", tags=["notifications"])
    app.include_router(conversations_router, prefix="/api/conversations", tags=["messaging"])
    app.include_router(messages_router, prefix="/api/messages", tags=["messaging"])
    app.include_router(groups_router, prefix="/api/groups", tags=["groups"])
    app.include_router(events_router, prefix="/api/events", tags=["events"])
    app.include_router(verification_router, prefix="/api/verification", tags=["verification"])
    app.include_router(admin_router, prefix="/api/admin", tags=["admin"])

    return app


# Application instance for uvicorn
app = create_app()
