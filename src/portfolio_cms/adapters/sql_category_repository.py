"""SQL-backed category repository."""

from dataclasses import dataclass
from typing import Any

from portfolio_cms.adapters.sql_client import SqlClient
from portfolio_cms.domain.categories import CategoryRecord
from portfolio_cms.services.categories import CategoryRepository

_COLUMNS = "id, name, description, created_at, updated_at"


@dataclass
class SqlCategoryRepository(CategoryRepository):
    """Category persistence on top of the pooled SQL client."""

    client: SqlClient

    def list_categories(self) -> list[CategoryRecord]:
        """Return all categories ordered by name."""
        rows = self.client.query(f"SELECT {_COLUMNS} FROM categories ORDER BY name")
        return [_to_category(row) for row in rows]

    def get_category(self, category_id: int) -> CategoryRecord | None:
        """Return a category by id, if present."""
        rows = self.client.query(
            f"SELECT {_COLUMNS} FROM categories WHERE id = %s", (category_id,)
        )
        return _to_category(rows[0]) if rows else None

    def find_by_name(self, name: str, exclude_id: int | None) -> CategoryRecord | None:
        """Return a different category with the same name, if present."""
        rows = self.client.query(
            f"SELECT {_COLUMNS} FROM categories WHERE name = %s AND id <> %s LIMIT 1",
            (name, exclude_id if exclude_id is not None else -1),
        )
        return _to_category(rows[0]) if rows else None

    def create_category(self, name: str, description: str) -> int:
        """Insert a category and return its generated id."""
        rows = self.client.query(
            "INSERT INTO categories (name, description) VALUES (%s, %s) RETURNING id",
            (name, description),
        )
        if not rows:
            raise RuntimeError("Failed to create category")
        return int(rows[0]["id"])

    def update_category(self, category_id: int, name: str, description: str) -> None:
        """Replace name and description."""
        self.client.query(
            "UPDATE categories SET name = %s, description = %s, updated_at = NOW() "
            "WHERE id = %s",
            (name, description, category_id),
        )

    def delete_category(self, category_id: int) -> None:
        """Delete a category."""
        self.client.query("DELETE FROM categories WHERE id = %s", (category_id,))

    def count_photos(self, category_id: int) -> int:
        """Return how many photos reference the category."""
        rows = self.client.query(
            "SELECT COUNT(*) AS count FROM photos WHERE category_id = %s",
            (category_id,),
        )
        return int(rows[0]["count"]) if rows else 0


def _to_category(row: dict[str, Any]) -> CategoryRecord:
    return CategoryRecord(
        id=int(row["id"]),
        name=row["name"],
        description=row.get("description") or "",
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )
