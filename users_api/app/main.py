"""
Main entrypoint for the Users API.

This module assembles the FastAPI application: it sets up logging,
creates the in-memory store and the service that owns it, includes
the API router under ``/api`` and registers the error handlers and
the catch-all route.  ``create_app`` builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn users_api.app.main:app --port 4000
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import UserStore
from .api.router import router as api_router
from .api.endpoints import fallback
from .services.user_service import UserService


def create_app(store: Optional[UserStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        Store the application will serve.  A new, empty store is
        created when omitted; tests pass their own to inspect it.
    settings : Optional[Settings]
        Settings to use instead of the module-level defaults.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.state.user_store = store if store is not None else UserStore()
    app.state.user_service = UserService(app.state.user_store)

    app.include_router(api_router, prefix="/api")
    # Registered last so that it only sees requests nothing else matched.
    app.include_router(fallback.router)

    register_exception_handlers(app)

    logging.getLogger(__name__).debug("Application %s %s configured", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
