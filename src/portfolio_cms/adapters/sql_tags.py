"""Tag upserts shared by photo and article repositories."""

from portfolio_cms.adapters.sql_client import SqlConnection


def upsert_tag(conn: SqlConnection, name: str) -> int:
    """Return the id of the named tag, creating it when missing."""
    # The no-op update makes RETURNING yield the id of an existing tag too.
    rows = conn.execute(
        "INSERT INTO tags (name) VALUES (%s) "
        "ON CONFLICT (name) DO UPDATE SET name = EXCLUDED.name RETURNING id",
        (name,),
    )
    return int(rows[0]["id"])
