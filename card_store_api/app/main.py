"""
Main entrypoint for the Card Store API.

This module assembles the FastAPI application, sets up logging,
creates the in-memory card store and includes the versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn card_store_api.app.main:app --port 3000
"""

import logging
from typing import Iterable, Optional

from fastapi import FastAPI

from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.card_service import CardStore


logger = logging.getLogger(__name__)


def create_app(seed: Optional[Iterable[dict]] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Every call builds a fresh ``CardStore``, so two applications never
    share cards.  ``seed`` replaces the default seed records when given.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.card_store = CardStore(seed=seed)
    register_exception_handlers(app)

    # The card routes are served at the root (``/cards``).  The same
    # router is also mounted under ``/api/v1`` for clients that use
    # versioned paths; both prefixes share one store.  Only the root
    # routes appear in the OpenAPI schema to keep operation IDs unique.
    app.include_router(v1_router)
    app.include_router(v1_router, prefix="/api/v1", include_in_schema=False)

    logger.info("Card store ready with %d cards", len(app.state.card_store))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
