"""
Main entrypoint for the Jarvis API.

This module assembles the FastAPI application, sets up logging,
registers error handlers and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn jarvis_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.exceptions import UserServiceError
from .core.logging_config import setup_logging
from .services.user_service import UserService

logger = logging.getLogger(__name__)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Invalid request"


def create_app(
    settings: Optional[Settings] = None,
    user_service: Optional[UserService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    user_service : Optional[UserService]
        Store backing the users routes.  A fresh, empty store is
        created when omitted, so every application owns its own data.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.user_service = user_service if user_service is not None else UserService()

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.exception_handler(UserServiceError)
    async def handle_user_service_error(_: Request, exc: UserServiceError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    # Malformed bodies and path parameters are client errors and share the
    # ``{"message": ...}`` shape instead of FastAPI's default 422 payload.
    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
        message = _describe_validation_errors(exc)
        logger.warning("Rejected request: %s", message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})

    logger.debug("Application created with API prefix %r", settings.api_prefix)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
