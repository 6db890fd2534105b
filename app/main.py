"""
APOD Explorer API

Server-side gateways for NASA's Astronomy Picture of the Day with
AI-enhanced explanations.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.core.errors import register_exception_handlers
from app.routers import explain_router, health_router, nasa_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan events."""
    # Startup
    logger.info(f"🔭 Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"📍 API prefix: {settings.api_prefix}")
    logger.info(f"🤖 Explanation provider: {settings.explanation_provider}")
    logger.info(f"🔧 Debug mode: {settings.debug}")

    if not settings.nasa_api_key:
        logger.warning("⚠️  NASA_API_KEY is not set; /nasa requests will fail")

    yield

    # Shutdown
    logger.info("👋 Shutting down APOD Explorer API")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="NASA Astronomy Picture of the Day gateway with AI-enhanced explanations",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


# Root endpoint
@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "docs": "/docs",
    }


# Include routers
app.include_router(health_router)
app.include_router(nasa_router, prefix=settings.api_prefix)
app.include_router(explain_router, prefix=settings.api_prefix)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )
