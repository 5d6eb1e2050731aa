"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI

from chimchat.config import get_settings
from chimchat.infrastructure.logging.log_config import setup_logging
from chimchat.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: configure logging."""
    settings = get_settings()
    setup_logging()
    logger.info(
        "Starting %s %s (%s) against %s",
        settings.app_title,
        settings.app_version,
        settings.app_env,
        settings.chim_base_url,
    )
    yield


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "chimchat.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
