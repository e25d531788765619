"""Landing page endpoint."""
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from core.config import Settings, get_settings

router = APIRouter(tags=["home"])


@router.get("/", response_class=PlainTextResponse)
async def home(settings: Settings = Depends(get_settings)) -> str:
    """Return the application greeting."""
    return settings.app_title
