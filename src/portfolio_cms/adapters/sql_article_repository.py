"""SQL-backed article repository."""

from dataclasses import dataclass
from typing import Any

from portfolio_cms.adapters.sql_client import SqlClient, SqlConnection
from portfolio_cms.adapters.sql_tags import upsert_tag
from portfolio_cms.domain.articles import ArticleFilter, ArticleRecord, NewArticle
from portfolio_cms.services.articles import ArticleRepository

_SELECT_ARTICLES = """
SELECT a.id, a.title, a.slug, a.content, a.summary, a.featured_image,
       a.author_id, u.username AS author_name,
       a.category_id, c.name AS category_name,
       a.published, a.published_at, a.created_at, a.updated_at,
       ARRAY(
         SELECT t.name FROM tags t
         JOIN article_tags atg ON atg.tag_id = t.id
         WHERE atg.article_id = a.id
         ORDER BY t.name
       ) AS tags
FROM articles a
LEFT JOIN users u ON u.id = a.author_id
LEFT JOIN categories c ON c.id = a.category_id
"""

_HAS_TAG = (
    "EXISTS (SELECT 1 FROM article_tags atg JOIN tags t ON t.id = atg.tag_id "
    "WHERE atg.article_id = a.id AND t.name {op} %s)"
)

_UPDATABLE_COLUMNS = frozenset(
    {
        "title",
        "slug",
        "content",
        "summary",
        "featured_image",
        "category_id",
    }
)


@dataclass
class SqlArticleRepository(ArticleRepository):
    """Article and tag persistence on top of the pooled SQL client."""

    client: SqlClient

    def list_articles(
        self, article_filter: ArticleFilter, limit: int, offset: int
    ) -> list[ArticleRecord]:
        """Return matching articles, most recently published first."""
        where, params = _where_clause(article_filter)
        rows = self.client.query(
            _SELECT_ARTICLES
            + where
            + " ORDER BY a.published_at DESC NULLS LAST, a.id DESC "
            "LIMIT %s OFFSET %s",
            (*params, limit, offset),
        )
        return [_to_article(row) for row in rows]

    def count_articles(self, article_filter: ArticleFilter) -> int:
        where, params = _where_clause(article_filter)
        rows = self.client.query(
            "SELECT COUNT(*) AS count FROM articles a " + where, params
        )
        return int(rows[0]["count"]) if rows else 0

    def get_article(self, article_id: int) -> ArticleRecord | None:
        rows = self.client.query(_SELECT_ARTICLES + "WHERE a.id = %s", (article_id,))
        return _to_article(rows[0]) if rows else None

    def get_article_by_slug(self, slug: str) -> ArticleRecord | None:
        rows = self.client.query(_SELECT_ARTICLES + "WHERE a.slug = %s", (slug,))
        return _to_article(rows[0]) if rows else None

    def slug_taken(self, slug: str, exclude_id: int | None) -> bool:
        rows = self.client.query(
            "SELECT id FROM articles WHERE slug = %s AND id <> %s LIMIT 1",
            (slug, exclude_id if exclude_id is not None else -1),
        )
        return bool(rows)

    def create_article(self, article: NewArticle) -> int:
        """Insert the article and its tag links in one transaction."""

        def _create(conn: SqlConnection) -> int:
            rows = conn.execute(
                "INSERT INTO articles (title, slug, content, summary, "
                "featured_image, author_id, category_id, published, published_at) "
                "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, "
                "CASE WHEN %s THEN NOW() END) RETURNING id",
                (
                    article.title,
                    article.slug,
                    article.content,
                    article.summary,
                    article.featured_image,
                    article.author_id,
                    article.category_id,
                    article.published,
                    article.published,
                ),
            )
            if not rows:
                raise RuntimeError("Failed to create article")
            article_id = int(rows[0]["id"])
            _link_tags(conn, article_id, article.tags)
            return article_id

        return self.client.transaction(_create)

    def update_article(
        self,
        article_id: int,
        fields: dict[str, object],
        tags: tuple[str, ...] | None,
    ) -> None:
        """Update columns and optionally replace tags in one transaction."""
        columns = dict(fields)
        published = columns.pop("published", None)
        unknown = set(columns) - _UPDATABLE_COLUMNS
        if unknown:
            raise ValueError(f"Unknown article columns: {sorted(unknown)}")
        assignments = [f"{column} = %s" for column in columns]
        params: list[object] = list(columns.values())
        if published is not None:
            # First publication stamps published_at; unpublishing clears it.
            assignments.append(
                "published = %s, published_at = "
                "CASE WHEN %s THEN COALESCE(published_at, NOW()) ELSE NULL END"
            )
            params.extend([published, published])

        def _update(conn: SqlConnection) -> None:
            if assignments:
                conn.execute(
                    f"UPDATE articles SET {', '.join(assignments)}, "
                    "updated_at = NOW() WHERE id = %s",
                    [*params, article_id],
                )
            if tags is not None:
                conn.execute(
                    "DELETE FROM article_tags WHERE article_id = %s", (article_id,)
                )
                _link_tags(conn, article_id, tags)

        self.client.transaction(_update)

    def delete_article(self, article_id: int) -> None:
        """Delete tag links, then the article, in one transaction."""

        def _delete(conn: SqlConnection) -> None:
            conn.execute(
                "DELETE FROM article_tags WHERE article_id = %s", (article_id,)
            )
            conn.execute("DELETE FROM articles WHERE id = %s", (article_id,))

        self.client.transaction(_delete)


def _where_clause(article_filter: ArticleFilter) -> tuple[str, tuple[object, ...]]:
    clauses: list[str] = []
    params: list[object] = []
    if article_filter.category_id is not None:
        clauses.append("a.category_id = %s")
        params.append(article_filter.category_id)
    if article_filter.author_id is not None:
        clauses.append("a.author_id = %s")
        params.append(article_filter.author_id)
    if article_filter.published is not None:
        clauses.append("a.published = %s")
        params.append(article_filter.published)
    if article_filter.tag:
        clauses.append(_HAS_TAG.format(op="="))
        params.append(article_filter.tag)
    if article_filter.search:
        pattern = f"%{article_filter.search}%"
        clauses.append(
            "(a.title ILIKE %s OR a.content ILIKE %s OR a.summary ILIKE %s OR "
            + _HAS_TAG.format(op="ILIKE")
            + ")"
        )
        params.extend([pattern] * 4)
    if not clauses:
        return "", ()
    return "WHERE " + " AND ".join(clauses), tuple(params)


def _link_tags(conn: SqlConnection, article_id: int, tags: tuple[str, ...]) -> None:
    for tag in tags:
        conn.execute(
            "INSERT INTO article_tags (article_id, tag_id) VALUES (%s, %s) "
            "ON CONFLICT DO NOTHING",
            (article_id, upsert_tag(conn, tag)),
        )


def _to_article(row: dict[str, Any]) -> ArticleRecord:
    category_id = row.get("category_id")
    author_id = row.get("author_id")
    return ArticleRecord(
        id=int(row["id"]),
        title=row["title"],
        slug=row["slug"],
        content=row["content"],
        summary=row.get("summary") or "",
        featured_image=row.get("featured_image"),
        author_id=int(author_id) if author_id is not None else None,
        author_name=row.get("author_name"),
        category_id=int(category_id) if category_id is not None else None,
        category_name=row.get("category_name"),
        published=bool(row.get("published")),
        published_at=row.get("published_at"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
        tags=tuple(row.get("tags") or ()),
    )
