"""
Main entrypoint for the Pet Clinic API.

This module assembles the FastAPI application, sets up logging, wires
the storage services for the configured profile and includes the
versioned routers.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``
so it can be served with uvicorn, e.g.::

    uvicorn petclinic.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import InvalidEntityError
from .core.logging_config import setup_logging
from .services.data_loader import load_sample_data
from .services.registry import build_services


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use instead of the module level settings read
        from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI instance with its storage services in
        ``app.state.services``.

    Raises
    ------
    ValueError
        If ``settings.active_profile`` names an unknown storage profile.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    services = build_services(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.load_sample_data:
            load_sample_data(app.state.services)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.services = services

    app.include_router(v1_router, prefix="/api/v1")

    @app.exception_handler(InvalidEntityError)
    async def invalid_entity_handler(request: Request, exc: InvalidEntityError) -> JSONResponse:
        logging.getLogger(__name__).warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
