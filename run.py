"""Entry point for the Pet Clinic API server.

This script launches the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Configuration such as ACTIVE_PROFILE, DATABASE_URL and LOG_LEVEL is
read from environment variables; see ``petclinic/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from petclinic.app.main import app


async def main() -> None:
    """Serve the API until interrupted.

    Host and port are read from environment variables `PETCLINIC_HOST`
    and `PETCLINIC_PORT`. Defaults are `0.0.0.0` and `8000`.
    """
    host = os.getenv("PETCLINIC_HOST", "0.0.0.0")
    port = int(os.getenv("PETCLINIC_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    logging.getLogger(__name__).info("Starting Pet Clinic API on %s:%s", host, port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
