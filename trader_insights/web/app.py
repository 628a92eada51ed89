"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import FileResponse

from .manager import AnalysisManager, get_analysis_manager
from .routes import router as api_router

logger = logging.getLogger(__name__)

static_dir = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Starting Polymarket Strategy Analyzer...")
    yield
    logger.info("Shutting down...")


def create_app(manager: Optional[AnalysisManager] = None) -> FastAPI:
    """Build the web app, optionally bound to a specific analysis manager."""
    app = FastAPI(
        title="Polymarket Strategy Analyzer",
        description="AI-powered analysis of top weekly profit traders",
        version="1.0.0",
        lifespan=lifespan
    )

    app.include_router(api_router, prefix="/api", tags=["API"])

    if manager is not None:
        app.dependency_overrides[get_analysis_manager] = lambda: manager

    @app.get("/")
    async def serve_index():
        """Serve the results page."""
        return FileResponse(
            str(static_dir / "index.html"),
            media_type="text/html",
            headers={"Cache-Control": "no-cache, no-store, must-revalidate"}
        )

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
