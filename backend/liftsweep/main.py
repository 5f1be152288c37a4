"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from liftsweep import __version__
from liftsweep.config import get_settings
from liftsweep.api import api_router
from liftsweep.api.library import load_reference_library
from liftsweep.database import async_engine, create_tables

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Starting {settings.app_name}")
    await create_tables()
    app.state.library = await load_reference_library()
    yield
    await async_engine.dispose()
    logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(
    title=settings.app_name,
    description="""
    Lift/Sweep Motion Classifier API

    Classifies a motion recording (8 joints per time bin, one velocity,
    position and effort sample per joint) as a **lift** or a **sweep**.

    ## Classification Principle

    Each (joint, bin) sample is compared with the same coordinate of every
    reference recording. The closer category gets that sample's vote, and
    the category with the most votes wins.

    **Exact distance ties vote lift.**
    """,
    version=__version__,
    lifespan=lifespan
)

# Include API routes
app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": __version__
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "app": settings.app_name,
        "docs": "/docs",
        "health": "/health"
    }
