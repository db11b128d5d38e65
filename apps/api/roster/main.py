from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from roster import __version__
from roster.api import router as api_router
from roster.core.config import get_settings
from roster.core.errors import RosterError
from roster.core.logging import setup_logging

logger = logging.getLogger(__name__)


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turn unexpected exceptions into a generic 500 inside the CORS layer."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(status_code=500, content={"message": "Internal server error"})


def _install_error_handlers(app: FastAPI) -> None:
    """Render every failure as ``{"message": ...}`` with the matching status."""

    @app.exception_handler(RosterError)
    async def roster_error_handler(request: Request, exc: RosterError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"message": "Invalid request body"})


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)
    app = FastAPI(title="Class Roster API", version=__version__)

    # Added first so it runs inside CORS and 500s still carry CORS headers
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _install_error_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()
