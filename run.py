"""Entry point for serving the Loyalty Admin API.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the environment variables ``API_HOST`` and ``API_PORT``
(defaults ``0.0.0.0`` and ``8000``); everything else is configured
through the variables described in ``core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from loyalty_admin_api.app.core.config import settings
from loyalty_admin_api.app.main import app


async def serve() -> None:
    """Serve the API until interrupted."""
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Serving %s on %s:%s", settings.project_name, host, port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(serve())
    except (KeyboardInterrupt, SystemExit):
        pass
