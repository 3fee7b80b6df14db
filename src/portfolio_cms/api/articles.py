"""Journal article endpoints."""

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request, status

from portfolio_cms.api.deps import optional_session, require_admin
from portfolio_cms.api.models import CreateArticleRequest, UpdateArticleRequest
from portfolio_cms.api.serializers import serialize_article, serialize_category
from portfolio_cms.domain.articles import DEFAULT_PAGE_SIZE, ArticleFilter
from portfolio_cms.domain.users import UserRecord
from portfolio_cms.services.photos import MAX_PAGE_SIZE

if TYPE_CHECKING:
    from portfolio_cms.containers import AppContainer

router = APIRouter(prefix="/api/articles", tags=["articles"])


def _can_see_drafts(user: UserRecord | None) -> bool:
    return user is not None and user.is_admin


@router.get("")
def list_articles(  # noqa: PLR0913
    request: Request,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    category: int | None = None,
    author: int | None = None,
    tag: str | None = None,
    search: str | None = None,
    published: bool | None = None,
    user: UserRecord | None = Depends(optional_session),
) -> dict[str, object]:
    """Return a page of articles; only admins may list drafts."""
    container: AppContainer = request.app.state.container
    article_filter = ArticleFilter(
        category_id=category,
        author_id=author,
        published=published if _can_see_drafts(user) else True,
        tag=tag.strip() if tag else None,
        search=search.strip() if search else None,
    )
    result = container.article_service.list_articles(
        article_filter, page=page, limit=limit
    )
    return {
        "items": [serialize_article(article) for article in result.items],
        "total": result.total,
        "page": result.page,
        "limit": result.limit,
        "totalPages": result.total_pages,
    }


@router.get("/categories")
def list_article_categories(request: Request) -> list[dict[str, object]]:
    """Categories an article can be filed under."""
    container: AppContainer = request.app.state.container
    return [
        serialize_category(category)
        for category in container.category_service.list_categories()
    ]


@router.get("/slug/{slug}")
def get_article_by_slug(
    slug: str,
    request: Request,
    user: UserRecord | None = Depends(optional_session),
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    article = container.article_service.get_article_by_slug(
        slug, include_drafts=_can_see_drafts(user)
    )
    return serialize_article(article)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_article(
    payload: CreateArticleRequest,
    request: Request,
    user: UserRecord = Depends(require_admin),
) -> dict[str, object]:
    """Create an article authored by the signed-in admin."""
    container: AppContainer = request.app.state.container
    article = container.article_service.create_article(
        title=payload.title,
        content=payload.content,
        author_id=user.id,
        category_id=payload.category_id,
        summary=payload.summary,
        featured_image=payload.featured_image,
        published=payload.published,
        tags=payload.tags,
    )
    return {
        "message": "Article created successfully",
        "article": serialize_article(article),
    }


@router.get("/{article_id}")
def get_article(
    article_id: int,
    request: Request,
    user: UserRecord | None = Depends(optional_session),
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    article = container.article_service.get_article(
        article_id, include_drafts=_can_see_drafts(user)
    )
    return serialize_article(article)


@router.put("/{article_id}", dependencies=[Depends(require_admin)])
def update_article(
    article_id: int, payload: UpdateArticleRequest, request: Request
) -> dict[str, object]:
    """Update the fields present in the body; tags replace the existing set."""
    container: AppContainer = request.app.state.container
    changes = payload.model_dump(exclude_unset=True)
    tags = changes.pop("tags", None)
    article = container.article_service.update_article(article_id, changes, tags)
    return {
        "message": "Article updated successfully",
        "article": serialize_article(article),
    }


@router.delete("/{article_id}", dependencies=[Depends(require_admin)])
def delete_article(article_id: int, request: Request) -> dict[str, str]:
    container: AppContainer = request.app.state.container
    container.article_service.delete_article(article_id)
    return {"message": "Article deleted successfully"}
