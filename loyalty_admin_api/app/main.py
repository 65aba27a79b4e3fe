"""
Main entrypoint for the Loyalty Admin API.

This module assembles the FastAPI application, sets up logging,
creates the in‑memory entity store and includes versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn loyalty_admin_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.store import init_store
from .api.v1.router import router as v1_router


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    A fresh ``EntityStore`` is attached to ``app.state.store`` right
    away, so the app is usable even when the ASGI lifespan is not run,
    and is rebuilt at every startup so that a restart resets the data
    to its seed contents.

    Parameters
    ----------
    app_settings : Settings, optional
        Settings to use instead of the module‑level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so the store can log.
    setup_logging(app_settings.log_level, app_settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.store = init_store(app_settings)
        yield
        logging.getLogger(__name__).info("Shutting down %s", app_settings.project_name)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.store = init_store(app_settings)

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
