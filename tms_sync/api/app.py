# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI Application Factory.

This module provides the application factory for the course API, the
REST surface that HttpRemoteStore talks to. Run it with:

    uvicorn --factory tms_sync.api.app:create_app --port 3001
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tms_sync import __version__
from tms_sync.api.dependencies import error_envelope
from tms_sync.api.routes import health
from tms_sync.api.v1 import router as v1_router
from tms_sync.core.config import Settings, get_settings
from tms_sync.infrastructure.store.base import RemoteStore
from tms_sync.infrastructure.store.exceptions import NotFoundError, StoreError, UnavailableError
from tms_sync.infrastructure.store.factory import create_store
from tms_sync.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Initializes the remote store on startup and closes it on shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    store: RemoteStore = app.state.store
    logger.info("Starting course API with %s", type(store).__name__)

    await store.initialize()

    yield

    try:
        await store.close()
    except Exception as e:
        logger.warning("Error closing remote store: %s", str(e))

    logger.info("Shutting down course API")


async def _not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=error_envelope(exc.message))


async def _unavailable_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=error_envelope(exc.message),
    )


def create_app(store: RemoteStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Remote store to serve; built from settings when omitted.
        settings: Application settings; loaded from the environment when omitted.

    Returns:
        Configured FastAPI application instance.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title="TMS Sync API",
        description="Course, roster and grant document store",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        # Disable automatic redirects from /path to /path/
        # This prevents 307 redirects that lose Authorization headers
        redirect_slashes=False,
    )

    # =========================================================================
    # State
    # =========================================================================
    app.state.store = store if store is not None else create_store(settings)

    # =========================================================================
    # Exception handlers
    # =========================================================================
    app.add_exception_handler(NotFoundError, _not_found_handler)
    app.add_exception_handler(UnavailableError, _unavailable_handler)
    app.add_exception_handler(StoreError, _unavailable_handler)

    # =========================================================================
    # Middleware
    # =========================================================================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins_list,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allow_methods,
        allow_headers=settings.cors.allow_headers,
    )

    # =========================================================================
    # Routes
    # =========================================================================
    app.include_router(health.router, tags=["Health"])
    app.include_router(v1_router)

    return app
