"""FastAPI application entry point."""
import logging

from fastapi import FastAPI

from api.routers import bookmarks, home
from core.config import get_settings

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the application and register its routers."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_title,
        description="Lists saved bookmarks.",
        version="0.1.0",
        debug=settings.debug,
    )
    app.include_router(home.router)
    app.include_router(bookmarks.router)
    logger.info("Application created: %s", settings.app_title)
    return app


app = create_app()
