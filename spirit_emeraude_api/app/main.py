"""
Main entrypoint for the Spirit Emeraude content API.

This module assembles the FastAPI application: it sets up logging,
builds the in-memory record store, registers the error handlers that
render failures in the response envelope and includes the versioned
routers.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app`` so it can be served
with uvicorn::

    uvicorn spirit_emeraude_api.app.main:app --reload

Tests call ``create_app(store=RecordStore(...))`` to get an
application bound to an isolated store.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import RecordStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[RecordStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[RecordStore]
        Store to serve.  When omitted a new store is built, seeded
        according to ``settings.seed_data``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so store seeding below is logged.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store if store is not None else RecordStore(seed=settings.seed_data)

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    logger.info("Content API mounted under %s", settings.api_prefix)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
