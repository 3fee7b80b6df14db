"""Category business logic."""

from dataclasses import dataclass
from typing import Protocol

from portfolio_cms.domain.categories import CategoryRecord
from portfolio_cms.domain.errors import ConflictError, NotFoundError, ValidationError


class CategoryRepository(Protocol):
    """Persistence interface for categories."""

    def list_categories(self) -> list[CategoryRecord]:
        """Return all categories ordered by name."""

    def get_category(self, category_id: int) -> CategoryRecord | None:
        """Return a category by id, if present."""

    def find_by_name(self, name: str, exclude_id: int | None) -> CategoryRecord | None:
        """Return another category with the given name, if present."""

    def create_category(self, name: str, description: str) -> int:
        """Insert a category and return its generated id."""

    def update_category(self, category_id: int, name: str, description: str) -> None:
        """Replace a category's name and description."""

    def delete_category(self, category_id: int) -> None:
        """Delete a category."""

    def count_photos(self, category_id: int) -> int:
        """Return how many photos reference the category."""


@dataclass
class CategoryService:
    """Application service for categories."""

    repository: CategoryRepository

    def list_categories(self) -> list[CategoryRecord]:
        """Return all categories."""
        return self.repository.list_categories()

    def get_category(self, category_id: int) -> CategoryRecord:
        """Return a category or raise NotFoundError."""
        category = self.repository.get_category(category_id)
        if category is None:
            raise NotFoundError("Category not found")
        return category

    def create_category(self, name: str | None, description: str | None) -> int:
        """Create a category with a unique name."""
        if not name:
            raise ValidationError("Category name is required")
        if self.repository.find_by_name(name, exclude_id=None):
            raise ConflictError("Category with this name already exists")
        return self.repository.create_category(name, description or "")

    def update_category(
        self, category_id: int, name: str | None, description: str | None
    ) -> None:
        """Rename or re-describe a category."""
        if not name:
            raise ValidationError("Category name is required")
        self.get_category(category_id)
        if self.repository.find_by_name(name, exclude_id=category_id):
            raise ConflictError("Category with this name already exists")
        self.repository.update_category(category_id, name, description or "")

    def delete_category(self, category_id: int) -> None:
        """Delete a category that no photo uses."""
        self.get_category(category_id)
        photo_count = self.repository.count_photos(category_id)
        if photo_count > 0:
            raise ConflictError(
                "Cannot delete category that is used by photos",
                details={"count": photo_count},
            )
        self.repository.delete_category(category_id)
