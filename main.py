"""FastAPI application factory and main entry point."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

import config
import logging_config
from api import router as api_router
from api.errors import (
    WaitlistAPIError,
    request_validation_handler,
    unhandled_error_handler,
    waitlist_error_handler,
)
from db import close_db, init_db

__version__ = "0.1.0"

# Setup logging
logging_config.setup_logging(config.settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    # Startup
    await init_db(app)
    yield
    # Shutdown
    await close_db(app)


def create_app() -> FastAPI:
    """
    Build the application with its own empty signup store.

    Returns:
        FastAPI: Configured application
    """
    app = FastAPI(
        title=config.settings.APP_NAME,
        description="Waitlist signup API for the landing page",
        version=__version__,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(WaitlistAPIError, waitlist_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include API router
    app.include_router(api_router.api_router, prefix=config.settings.API_PREFIX)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": config.settings.APP_NAME,
            "version": __version__,
        }

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=config.settings.HOST, port=config.settings.PORT)
