"""Domain models for photos."""

from dataclasses import dataclass
from datetime import datetime

DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 800


@dataclass(frozen=True)
class PhotoRecord:
    """A stored photo with its category name and tag names."""

    id: int
    title: str
    description: str | None
    category_id: int
    category_name: str | None
    file_url: str
    thumbnail_url: str
    width: int
    height: int
    upload_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class NewPhoto:
    """Input for creating a photo."""

    title: str
    category_id: int
    file_url: str
    thumbnail_url: str
    description: str | None = None
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    tags: tuple[str, ...] = ()
