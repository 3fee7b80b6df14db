"""SQL-backed photo repository."""

from dataclasses import dataclass
from typing import Any

from portfolio_cms.adapters.sql_client import SqlClient, SqlConnection
from portfolio_cms.adapters.sql_tags import upsert_tag
from portfolio_cms.domain.photos import NewPhoto, PhotoRecord
from portfolio_cms.services.photos import PhotoRepository

_SELECT_PHOTOS = """
SELECT p.id, p.title, p.description, p.category_id, c.name AS category_name,
       p.file_url, p.thumbnail_url, p.width, p.height,
       p.upload_date, p.created_at, p.updated_at,
       ARRAY(
         SELECT t.name FROM tags t
         JOIN photo_tags pt ON pt.tag_id = t.id
         WHERE pt.photo_id = p.id
         ORDER BY t.name
       ) AS tags
FROM photos p
JOIN categories c ON c.id = p.category_id
"""

_UPDATABLE_COLUMNS = frozenset(
    {
        "title",
        "description",
        "category_id",
        "file_url",
        "thumbnail_url",
        "width",
        "height",
    }
)


@dataclass
class SqlPhotoRepository(PhotoRepository):
    """Photo and tag persistence on top of the pooled SQL client."""

    client: SqlClient

    def list_photos(
        self, category_id: int | None, limit: int, offset: int
    ) -> list[PhotoRecord]:
        """Return photos, newest first, optionally filtered by category."""
        if category_id is None:
            rows = self.client.query(
                _SELECT_PHOTOS
                + "ORDER BY p.upload_date DESC, p.id DESC LIMIT %s OFFSET %s",
                (limit, offset),
            )
        else:
            rows = self.client.query(
                _SELECT_PHOTOS
                + "WHERE p.category_id = %s "
                "ORDER BY p.upload_date DESC, p.id DESC LIMIT %s OFFSET %s",
                (category_id, limit, offset),
            )
        return [_to_photo(row) for row in rows]

    def get_photo(self, photo_id: int) -> PhotoRecord | None:
        """Return a photo with category name and tags, if present."""
        rows = self.client.query(_SELECT_PHOTOS + "WHERE p.id = %s", (photo_id,))
        return _to_photo(rows[0]) if rows else None

    def create_photo(self, photo: NewPhoto) -> int:
        """Insert the photo and its tag links in one transaction."""

        def _create(conn: SqlConnection) -> int:
            rows = conn.execute(
                "INSERT INTO photos (title, description, category_id, "
                "file_url, thumbnail_url, width, height) "
                "VALUES (%s, %s, %s, %s, %s, %s, %s) RETURNING id",
                (
                    photo.title,
                    photo.description,
                    photo.category_id,
                    photo.file_url,
                    photo.thumbnail_url,
                    photo.width,
                    photo.height,
                ),
            )
            if not rows:
                raise RuntimeError("Failed to create photo")
            photo_id = int(rows[0]["id"])
            _link_tags(conn, photo_id, photo.tags)
            return photo_id

        return self.client.transaction(_create)

    def update_photo(
        self,
        photo_id: int,
        fields: dict[str, object],
        tags: tuple[str, ...] | None,
    ) -> None:
        """Update columns and optionally replace tags in one transaction."""
        unknown = set(fields) - _UPDATABLE_COLUMNS
        if unknown:
            raise ValueError(f"Unknown photo columns: {sorted(unknown)}")

        def _update(conn: SqlConnection) -> None:
            if fields:
                assignments = ", ".join(f"{column} = %s" for column in fields)
                conn.execute(
                    f"UPDATE photos SET {assignments}, updated_at = NOW() "
                    "WHERE id = %s",
                    [*fields.values(), photo_id],
                )
            if tags is not None:
                conn.execute("DELETE FROM photo_tags WHERE photo_id = %s", (photo_id,))
                _link_tags(conn, photo_id, tags)

        self.client.transaction(_update)

    def delete_photo(self, photo_id: int) -> None:
        """Delete tag links, then the photo, in one transaction."""

        def _delete(conn: SqlConnection) -> None:
            conn.execute("DELETE FROM photo_tags WHERE photo_id = %s", (photo_id,))
            conn.execute("DELETE FROM photos WHERE id = %s", (photo_id,))

        self.client.transaction(_delete)


def _link_tags(conn: SqlConnection, photo_id: int, tags: tuple[str, ...]) -> None:
    for tag in tags:
        conn.execute(
            "INSERT INTO photo_tags (photo_id, tag_id) VALUES (%s, %s) "
            "ON CONFLICT DO NOTHING",
            (photo_id, upsert_tag(conn, tag)),
        )


def _to_photo(row: dict[str, Any]) -> PhotoRecord:
    return PhotoRecord(
        id=int(row["id"]),
        title=row["title"],
        description=row.get("description"),
        category_id=int(row["category_id"]),
        category_name=row.get("category_name"),
        file_url=row["file_url"],
        thumbnail_url=row["thumbnail_url"],
        width=int(row["width"]),
        height=int(row["height"]),
        upload_date=row.get("upload_date"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
        tags=tuple(row.get("tags") or ()),
    )
