"""FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from play_whe_analytics.config import settings


def setup_logging(log_file: str = settings.LOG_FILE, debug: bool = settings.DEBUG) -> None:
    """Configure loguru: stderr always, a rotating file when ``log_file`` is set."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else "INFO")
    if log_file:
        logger.add(log_file, rotation="10 MB", retention="7 days", level="INFO")


setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("Starting {} ...", settings.APP_NAME)

    yield

    from play_whe_analytics.db.engine import engine
    await engine.dispose()
    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Play Whe draw history: gaps, frequencies, rows and lanes",
    lifespan=lifespan,
)

# Include API routers
from play_whe_analytics.api.v1.router import api_router  # noqa: E402
app.include_router(api_router, prefix="/api/v1")
