"""Bookmark listing page."""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from api.templating import templates
from core.config import Settings, get_settings
from services import bookmark_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["bookmarks"])


@router.get("/bookmarks", response_class=HTMLResponse)
async def list_bookmarks(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    """Render every bookmark as a list of URLs."""
    bookmarks = bookmark_service.get_all_bookmarks()
    logger.debug("Rendering %d bookmarks", len(bookmarks))
    return templates.TemplateResponse(
        request,
        "bookmarks/index.html",
        {"bookmarks": bookmarks, "title": settings.app_title},
    )
