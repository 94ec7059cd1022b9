"""Entry point for the Sales Demo API.

Serves ``sales_demo_api.app.main:app`` with Uvicorn on the host and
port from the settings (``HOST``, ``PORT`` or ``MCP_PORT``; defaults
``0.0.0.0:3333``).  Ctrl-C and SIGTERM stop the server cleanly.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from sales_demo_api.app.core.config import settings
from sales_demo_api.app.main import app


async def main() -> None:
    """Run the API server until it is asked to stop."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Sales demo API listening on http://%s:%d/api/v1", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
