#!/usr/bin/env python3
"""
Career Pilot Web API - FastAPI Application

Drives the career pilot controller over HTTP with automatic API documentation.

Usage:
    python main.py serve

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging

from fastapi import FastAPI

from .dependencies import get_config
from .exceptions import register_exception_handlers
from .routers import (
    state_router,
    profile_router,
    search_router,
    analysis_router,
    chat_router,
    tracker_router
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create the FastAPI app with routers and exception handlers registered."""
    app = FastAPI(
        title="Career Pilot API",
        description="Profile, job discovery, deep analysis, chat and application tracking",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )

    register_exception_handlers(app)

    app.include_router(state_router)
    app.include_router(profile_router)
    app.include_router(search_router)
    app.include_router(analysis_router)
    app.include_router(chat_router)
    app.include_router(tracker_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "career-pilot"}

    return app


app = create_app()


def main():
    """Run the web server."""
    import uvicorn

    config = get_config()
    logger.info(f"Starting Career Pilot API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
