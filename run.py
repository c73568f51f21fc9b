"""Entry point serving the content API with uvicorn.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (see ``spirit_emeraude_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from spirit_emeraude_api.app.core.config import settings
from spirit_emeraude_api.app.main import app


async def run_api() -> None:
    """Start the content API using Uvicorn."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
