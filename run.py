"""Entry point for the Users API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``4000``); see
``users_api/app/core/config.py`` for the other variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from users_api.app.core.config import settings
from users_api.app.main import app


async def main() -> None:
    """Start the API server and serve until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Server is running on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
