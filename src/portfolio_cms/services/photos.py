"""Photo business logic."""

from dataclasses import dataclass
from typing import Protocol

from portfolio_cms.domain.errors import NotFoundError, ValidationError
from portfolio_cms.domain.photos import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    NewPhoto,
    PhotoRecord,
)
from portfolio_cms.services.categories import CategoryRepository

MAX_PAGE_SIZE = 100

_UPDATABLE_FIELDS = (
    "title",
    "description",
    "category_id",
    "file_url",
    "thumbnail_url",
    "width",
    "height",
)

_REQUIRED_FIELDS = (
    "title",
    "category_id",
    "file_url",
    "thumbnail_url",
    "width",
    "height",
)


class PhotoRepository(Protocol):
    """Persistence interface for photos and their tags."""

    def list_photos(
        self, category_id: int | None, limit: int, offset: int
    ) -> list[PhotoRecord]:
        """Return photos, newest first, optionally filtered by category."""

    def get_photo(self, photo_id: int) -> PhotoRecord | None:
        """Return a photo with its category name and tags, if present."""

    def create_photo(self, photo: NewPhoto) -> int:
        """Insert a photo with its tags and return the generated id."""

    def update_photo(
        self,
        photo_id: int,
        fields: dict[str, object],
        tags: tuple[str, ...] | None,
    ) -> None:
        """Update columns and, when tags is given, replace the photo's tags."""

    def delete_photo(self, photo_id: int) -> None:
        """Delete a photo and its tag links."""


@dataclass
class PhotoService:
    """Application service for photos."""

    repository: PhotoRepository
    category_repository: CategoryRepository

    def list_photos(
        self, category_id: int | None = None, limit: int = 20, page: int = 1
    ) -> list[PhotoRecord]:
        """Return a page of photos."""
        limit = min(max(limit, 1), MAX_PAGE_SIZE)
        page = max(page, 1)
        return self.repository.list_photos(category_id, limit, (page - 1) * limit)

    def get_photo(self, photo_id: int) -> PhotoRecord:
        """Return a photo or raise NotFoundError."""
        photo = self.repository.get_photo(photo_id)
        if photo is None:
            raise NotFoundError("Photo not found")
        return photo

    def create_photo(  # noqa: PLR0913
        self,
        title: str | None,
        category_id: int | None,
        file_url: str | None,
        thumbnail_url: str | None,
        description: str | None = None,
        width: int | None = None,
        height: int | None = None,
        tags: list[str] | None = None,
    ) -> int:
        """Validate input and create a photo."""
        if not title or not category_id or not file_url or not thumbnail_url:
            raise ValidationError(
                "Title, category, file URL, and thumbnail URL are required"
            )
        self._ensure_category(category_id)
        return self.repository.create_photo(
            NewPhoto(
                title=title,
                category_id=category_id,
                file_url=file_url,
                thumbnail_url=thumbnail_url,
                description=description,
                width=width or DEFAULT_WIDTH,
                height=height or DEFAULT_HEIGHT,
                tags=clean_tags(tags or []),
            )
        )

    def update_photo(
        self,
        photo_id: int,
        changes: dict[str, object],
        tags: list[str] | None = None,
    ) -> None:
        """Apply a partial update; tags, when given, replace the existing ones."""
        self.get_photo(photo_id)
        fields = {
            key: value for key, value in changes.items() if key in _UPDATABLE_FIELDS
        }
        for key in _REQUIRED_FIELDS:
            if key in fields and not fields[key]:
                raise ValidationError(f"{key} must not be empty")
        if "category_id" in fields:
            self._ensure_category(int(fields["category_id"]))
        self.repository.update_photo(
            photo_id,
            fields,
            clean_tags(tags) if tags is not None else None,
        )

    def delete_photo(self, photo_id: int) -> None:
        """Delete a photo."""
        self.get_photo(photo_id)
        self.repository.delete_photo(photo_id)

    def _ensure_category(self, category_id: int) -> None:
        if self.category_repository.get_category(category_id) is None:
            raise NotFoundError("Category not found")


def clean_tags(tags: list[str]) -> tuple[str, ...]:
    """Strip blanks and duplicates while keeping the given order."""
    seen: dict[str, None] = {}
    for tag in tags:
        name = tag.strip()
        if name:
            seen.setdefault(name, None)
    return tuple(seen)
