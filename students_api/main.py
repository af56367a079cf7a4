import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from students_api.api.router import api_router
from students_api.core.config import get_settings, load_settings
from students_api.core.exceptions import InitializationError
from students_api.core.handlers import register_exception_handlers
from students_api.core.logging import setup_logging
from students_api.storage.base import IStudentStorage
from students_api.storage.factory import create_storage


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Storage injected by the caller (run() or tests) is left as is
    if getattr(app.state, "storage", None) is None:
        app.state.storage = create_storage(get_settings())
    try:
        yield
    finally:
        app.state.storage.close()


def create_app(storage: Optional[IStudentStorage] = None) -> FastAPI:
    """
    Build the application.

    Settings are read here, not at import time. Without an injected store the
    lifespan opens one: uvicorn students_api.main:create_app --factory
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.storage = storage

    register_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root():
        """
        Health check endpoint
        """
        return {
            "message": f"Welcome to {settings.PROJECT_NAME}",
            "docs": "/docs",
            "version": settings.APP_VERSION,
            "env": settings.ENV,
        }

    return app


def run():
    """
    Start the HTTP server.

    uvicorn handles SIGINT/SIGTERM: it stops accepting connections and
    waits up to SHUTDOWN_TIMEOUT seconds for in-flight requests.
    """
    logger = setup_logging()
    settings = load_settings()
    logging.getLogger().setLevel(settings.LOG_LEVEL)

    try:
        storage = create_storage(settings)
    except InitializationError as e:
        logger.critical(f"Failed to initialize storage: {e}")
        sys.exit(1)

    app = create_app(storage)

    logger.info(f"Starting server on {settings.http_address}")
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT,
    )
    logger.info("Server shutdown successfully")


if __name__ == "__main__":
    run()
