"""Read access to the bookmark collection."""
from schemas.bookmark import Bookmark

_BOOKMARKS: tuple[Bookmark, ...] = (
    Bookmark(url="http://www.bbc.co.uk"),
    Bookmark(url="http://www.facebook.com"),
    Bookmark(url="http://www.imgur.com"),
)


def get_all_bookmarks() -> list[Bookmark]:
    """Return every bookmark, in the order they were saved."""
    return list(_BOOKMARKS)
