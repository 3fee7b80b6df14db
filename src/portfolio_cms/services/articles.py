"""Article business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from portfolio_cms.domain.articles import (
    DEFAULT_PAGE_SIZE,
    ArticleFilter,
    ArticlePage,
    ArticleRecord,
    NewArticle,
    slugify,
    summarize,
)
from portfolio_cms.domain.errors import ConflictError, NotFoundError, ValidationError
from portfolio_cms.services.categories import CategoryRepository
from portfolio_cms.services.photos import MAX_PAGE_SIZE, clean_tags

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = (
    "title",
    "content",
    "summary",
    "featured_image",
    "category_id",
    "published",
)


class ArticleRepository(Protocol):
    """Persistence interface for articles and their tags."""

    def list_articles(
        self, article_filter: ArticleFilter, limit: int, offset: int
    ) -> list[ArticleRecord]:
        """Return matching articles, most recently published first."""

    def count_articles(self, article_filter: ArticleFilter) -> int:
        """Return how many articles match the filter."""

    def get_article(self, article_id: int) -> ArticleRecord | None:
        """Return an article by id, if present."""

    def get_article_by_slug(self, slug: str) -> ArticleRecord | None:
        """Return an article by slug, if present."""

    def slug_taken(self, slug: str, exclude_id: int | None) -> bool:
        """Return True when another article already uses the slug."""

    def create_article(self, article: NewArticle) -> int:
        """Insert an article with its tags and return the generated id."""

    def update_article(
        self,
        article_id: int,
        fields: dict[str, object],
        tags: tuple[str, ...] | None,
    ) -> None:
        """Update columns and, when tags is given, replace the article's tags.

        A ``published`` value in fields also sets or clears ``published_at``.
        """

    def delete_article(self, article_id: int) -> None:
        """Delete an article and its tag links."""


@dataclass
class ArticleService:
    """Application service for articles."""

    repository: ArticleRepository
    category_repository: CategoryRepository

    def list_articles(
        self,
        article_filter: ArticleFilter,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> ArticlePage:
        """Return one page of articles matching the filter."""
        limit = min(max(limit, 1), MAX_PAGE_SIZE)
        page = max(page, 1)
        items = self.repository.list_articles(
            article_filter, limit, (page - 1) * limit
        )
        total = self.repository.count_articles(article_filter)
        return ArticlePage(items=items, total=total, page=page, limit=limit)

    def get_article(
        self, article_id: int, include_drafts: bool = False
    ) -> ArticleRecord:
        """Return an article; drafts are hidden unless include_drafts is set."""
        return _visible(self.repository.get_article(article_id), include_drafts)

    def get_article_by_slug(
        self, slug: str, include_drafts: bool = False
    ) -> ArticleRecord:
        """Return an article by slug; drafts are hidden unless requested."""
        return _visible(self.repository.get_article_by_slug(slug), include_drafts)

    def create_article(  # noqa: PLR0913
        self,
        title: str | None,
        content: str | None,
        author_id: int | None,
        category_id: int | None = None,
        summary: str | None = None,
        featured_image: str | None = None,
        published: bool = False,
        tags: list[str] | None = None,
    ) -> ArticleRecord:
        """Validate input and create an article with a unique slug."""
        if not title or not content:
            raise ValidationError("Title and content are required")
        slug = self._unique_slug(title, exclude_id=None)
        if category_id is not None:
            self._ensure_category(category_id)
        article_id = self.repository.create_article(
            NewArticle(
                title=title,
                slug=slug,
                content=content,
                summary=summary or summarize(content),
                author_id=author_id,
                category_id=category_id,
                featured_image=featured_image,
                published=published,
                tags=clean_tags(tags or []),
            )
        )
        logger.info("Article created", extra={"article_id": article_id})
        return self.get_article(article_id, include_drafts=True)

    def update_article(
        self,
        article_id: int,
        changes: dict[str, object],
        tags: list[str] | None = None,
    ) -> ArticleRecord:
        """Apply a partial update; a new title also renames the slug."""
        current = self.get_article(article_id, include_drafts=True)
        fields = {
            key: value for key, value in changes.items() if key in _UPDATABLE_FIELDS
        }
        for key in ("title", "content", "published"):
            if key in fields and fields[key] in (None, ""):
                raise ValidationError(f"{key} must not be empty")
        title = fields.get("title")
        if isinstance(title, str) and title != current.title:
            fields["slug"] = self._unique_slug(title, exclude_id=article_id)
        if fields.get("category_id") is not None:
            self._ensure_category(int(fields["category_id"]))
        self.repository.update_article(
            article_id,
            fields,
            clean_tags(tags) if tags is not None else None,
        )
        return self.get_article(article_id, include_drafts=True)

    def delete_article(self, article_id: int) -> None:
        """Delete an article."""
        self.get_article(article_id, include_drafts=True)
        self.repository.delete_article(article_id)

    def _unique_slug(self, title: str, exclude_id: int | None) -> str:
        slug = slugify(title)
        if not slug:
            raise ValidationError("Title must contain letters or digits")
        if self.repository.slug_taken(slug, exclude_id):
            raise ConflictError("An article with a similar title already exists")
        return slug

    def _ensure_category(self, category_id: int) -> None:
        if self.category_repository.get_category(category_id) is None:
            raise ValidationError("Invalid category")


def _visible(article: ArticleRecord | None, include_drafts: bool) -> ArticleRecord:
    if article is None or (not article.published and not include_drafts):
        raise NotFoundError("Article not found")
    return article
