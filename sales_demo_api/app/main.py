"""
Main entrypoint for the Sales Demo API.

``create_app`` configures logging, generates the synthetic dataset for
this application instance, mounts the versioned routers and registers
the fallback error handler.  The module-level ``app`` makes the
service runnable with any ASGI server, e.g.::

    uvicorn sales_demo_api.app.main:app --reload
"""

import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import SalesStore, build_store, get_sales_store

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured application owning its own sales store.
    """
    # Logging first so that store construction below is logged.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.sales_store = build_store(settings)

    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/health", tags=["health"])
    async def health(store: SalesStore = Depends(get_sales_store)) -> dict:
        return {"status": "ok", "records": len(store)}

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        # Details stay in the server log; clients get a generic message.
        logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
