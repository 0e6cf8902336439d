"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.logging_setup import configure_logging
from .dependencies import get_container
from .errors import register_exception_handlers
from .routes import health, users
from modules.todos.routes import router as todos_router
from modules.sharing.routes import router as sharing_router, invitations_router
from modules.recently_deleted.routes import router as recently_deleted_router
from modules.assistant.routes import router as assistant_router
from modules.realtime.routes import router as realtime_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Starts the realtime listener when enabled and Supabase is configured,
    and stops it on shutdown.
    """
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")

    listener = None
    if settings.enable_realtime and settings.supabase_url and settings.supabase_service_role_key:
        listener = get_container().realtime_listener
        try:
            await listener.start()
        except Exception as e:
            logger.error(f"Realtime listener failed to start, live updates disabled: {e}")
            listener = None
    elif settings.enable_realtime:
        logger.warning("Realtime enabled but Supabase is not configured, skipping listener")

    yield

    if listener is not None:
        await listener.stop()
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Collaborative todo API with sharing, recently deleted and AI task assistance",
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

    register_exception_handlers(app)

    # Register routes (stream before todos so /stream is not read as a todo ID)
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(realtime_router, prefix="/api/todos", tags=["realtime"])
    app.include_router(todos_router, prefix="/api/todos", tags=["todos"])
    app.include_router(sharing_router, prefix="/api/todos", tags=["sharing"])
    app.include_router(invitations_router, prefix="/api/invitations", tags=["sharing"])
    app.include_router(recently_deleted_router, prefix="/api/recently-deleted", tags=["recently-deleted"])
    app.include_router(assistant_router, prefix="/api/assistant", tags=["assistant"])

    return app


# Application instance for uvicorn
app = create_app()
