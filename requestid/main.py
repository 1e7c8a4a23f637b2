from __future__ import annotations

from fastapi import FastAPI

from requestid.core.errors import (
    MissingRequestIDError,
    missing_request_id_handler,
    unhandled_exception_handler,
)
from requestid.core.logging import configure_logging, log_middleware
from requestid.middlewares.request_id import RequestIDMiddleware
from requestid.routes.health import router as health_router
from requestid.routes.request_id import router as request_id_router
from requestid.settings import settings


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(MissingRequestIDError)
    async def missing_id_handler(request, exc: MissingRequestIDError):
        return missing_request_id_handler(request, exc)

    @app.exception_handler(Exception)
    async def any_exception_handler(request, exc: Exception):
        return unhandled_exception_handler(request, exc)


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title=settings.app_name, debug=settings.debug)

    # --- Middlewares (last added runs first) ---
    app.middleware("http")(log_middleware)
    app.add_middleware(RequestIDMiddleware)

    # --- Routes ---
    app.include_router(health_router)
    app.include_router(request_id_router)

    # --- Error Handlers ---
    register_error_handlers(app)

    return app


app = create_app()
