"""Entry point for the Jarvis API.

Serves the FastAPI application with Uvicorn.  Host, port and log level
are read from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``); see
``jarvis_api/app/core/config.py`` for every supported variable.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from jarvis_api.app.core.config import settings
from jarvis_api.app.main import app


async def run_api() -> None:
    """Start the API server and block until it shuts down."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
