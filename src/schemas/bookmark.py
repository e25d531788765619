"""Pydantic schemas for bookmarks."""
from pydantic import BaseModel, ConfigDict, field_validator


class Bookmark(BaseModel):
    """A saved link shown on the bookmarks page."""

    model_config = ConfigDict(frozen=True)

    url: str

    @field_validator("url")
    @classmethod
    def check_url_not_blank(cls, v: str) -> str:
        """Strip surrounding whitespace and reject empty URLs."""
        v = v.strip()
        if not v:
            raise ValueError("Bookmark url must be a non-empty string")
        return v
