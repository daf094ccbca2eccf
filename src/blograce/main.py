"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text

from blograce.api.content import router as content_router
from blograce.api.v1.router import router as api_router
from blograce.api.web.views import router as web_router
from blograce.config import get_settings

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    from blograce.infrastructure.document_store_client import get_document_store

    logger.info("Starting Blog Race Analyzer...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Document store: {settings.document_store_url}")

    yield

    # Shutdown: release the document store HTTP session
    await get_document_store().close()
    logger.info("Shutting down Blog Race Analyzer...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    docs_kwargs = {}
    if settings.is_production:
        docs_kwargs = {"docs_url": None, "redoc_url": None, "openapi_url": None}

    app = FastAPI(
        title="Blog Race Analyzer",
        description="Blog URL summaries with Urdu translation",
        version="0.1.0",
        lifespan=lifespan,
        **docs_kwargs,
    )

    # Mount static files
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # Include routers
    app.include_router(api_router)
    app.include_router(content_router)
    app.include_router(web_router)

    @app.get("/health")
    async def health_check() -> JSONResponse:
        """Lightweight health check with DB connectivity test."""
        from blograce.infrastructure.database import async_session_factory

        try:
            async with async_session_factory() as session:
                await session.execute(text("SELECT 1"))
            return JSONResponse({"status": "healthy", "database": "connected"})
        except Exception:
            logger.exception("Health check failed")
            return JSONResponse(
                {"status": "unhealthy", "database": "disconnected"},
                status_code=503,
            )

    return app


# Create app instance
app = create_app()
