"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.exception_handlers import register_exception_handlers
from app.api.routes import api_router
from app.core.config import settings
from app.core.logfire_setup import instrument_app, setup_logfire
from app.db.session import close_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    if not settings.storage_configured:
        logger.warning(
            "Object storage is not fully configured (missing: %s); attachment brokers will fail",
            ", ".join(settings.missing_storage_settings()),
        )
    yield
    await close_db()


def create_app() -> FastAPI:
    """Build the application with middleware, handlers and routes."""
    setup_logfire()

    application = FastAPI(
        title=settings.PROJECT_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    register_exception_handlers(application)
    application.include_router(api_router, prefix=settings.API_PREFIX)
    instrument_app(application)
    return application


app = create_app()
