"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from nutrimate.api.calculator import router as calculator_router
from nutrimate.api.entitlements import router as entitlements_router
from nutrimate.api.grocery import router as grocery_router
from nutrimate.api.users import router as users_router
from nutrimate.app_logging import configure_logging
from nutrimate.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="NutriMate")
    app.state.container = container

    app.include_router(calculator_router)
    app.include_router(entitlements_router)
    app.include_router(grocery_router)
    app.include_router(users_router)

    @app.exception_handler(RuntimeError)
    async def storage_error(request: Request, exc: RuntimeError) -> JSONResponse:
        logger.exception("Storage failure on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
