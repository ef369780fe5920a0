"""
FastAPI application entry point.

Wires the routers, CORS and error handling together. The ModelManager is built
once at startup and shared by every request.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from dsagenie import __version__
from .errors import validation_exception_handler
from .routers import health, tutor, video
from dsagenie.models.manager import ModelManager, read_config

logger = logging.getLogger(__name__)

# Global application state
app_state = {}

DEFAULT_CORS = {"allow_origins": ["*"], "allow_methods": ["GET", "POST"]}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Builds the ModelManager and warns about missing credentials.
    Endpoints that need a missing credential keep answering with an error
    until it is added.
    """
    model_manager = ModelManager()
    app_state["model_manager"] = model_manager

    for name in model_manager.missing_credentials():
        logger.warning(f"{name} is not set. Explanation, pseudocode, and code endpoints will return an error until you add it.")
    for name in model_manager.youtube.missing_settings():
        logger.warning(f"{name} is not set. The video endpoint will return an error until you add it.")

    logger.info("DSAGenie API ready to accept requests")

    yield  # Server runs here

    logger.info("Shutting down DSAGenie API")
    model_manager.cleanup()
    app_state.clear()


def create_app(cors: dict = None) -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    CORS settings default to the `cors` section of the config file.
    """
    load_dotenv()
    if cors is None:
        cors = read_config().get("cors") or {}

    app = FastAPI(
        title="DSAGenie API",
        description="Explanations, pseudocode, solutions and tutorial videos for coding problems",
        version=__version__,
        lifespan=lifespan
    )

    cors = {**DEFAULT_CORS, **cors}
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors["allow_origins"],
        allow_methods=cors["allow_methods"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(tutor.router, prefix="/api", tags=["tutor"])
    app.include_router(video.router, prefix="/api", tags=["video"])

    @app.get("/")
    async def root():
        """Root endpoint with basic API information."""
        return {
            "name": "DSAGenie API",
            "version": __version__,
            "status": "operational",
            "endpoints": {
                "health": "/health",
                "explanation": "/api/explanation",
                "pseudocode": "/api/pseudocode",
                "code": "/api/code",
                "youtube": "/api/youtube",
                "docs": "/docs",
            }
        }

    return app


# Create the FastAPI app instance
app = create_app()
