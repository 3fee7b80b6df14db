"""JSON shapes for domain records."""

from datetime import datetime

from portfolio_cms.domain.articles import ArticleRecord
from portfolio_cms.domain.categories import CategoryRecord
from portfolio_cms.domain.photos import PhotoRecord
from portfolio_cms.domain.site_settings import SiteSettings
from portfolio_cms.domain.users import UserRecord


def _timestamp(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def serialize_user(user: UserRecord) -> dict[str, object]:
    """Public user fields; the password hash never leaves the service layer."""
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "role": user.role,
        "created_at": _timestamp(user.created_at),
        "updated_at": _timestamp(user.updated_at),
    }


def serialize_photo(photo: PhotoRecord) -> dict[str, object]:
    return {
        "id": photo.id,
        "title": photo.title,
        "description": photo.description,
        "category_id": photo.category_id,
        "category_name": photo.category_name,
        "file_url": photo.file_url,
        "thumbnail_url": photo.thumbnail_url,
        "width": photo.width,
        "height": photo.height,
        "upload_date": _timestamp(photo.upload_date),
        "created_at": _timestamp(photo.created_at),
        "updated_at": _timestamp(photo.updated_at),
        "tags": list(photo.tags),
    }


def serialize_category(category: CategoryRecord) -> dict[str, object]:
    return {
        "id": category.id,
        "name": category.name,
        "description": category.description,
        "created_at": _timestamp(category.created_at),
        "updated_at": _timestamp(category.updated_at),
    }


def serialize_article(article: ArticleRecord) -> dict[str, object]:
    return {
        "id": article.id,
        "title": article.title,
        "slug": article.slug,
        "content": article.content,
        "summary": article.summary,
        "featured_image": article.featured_image,
        "author_id": article.author_id,
        "author_name": article.author_name,
        "category_id": article.category_id,
        "category_name": article.category_name,
        "published": article.published,
        "published_at": _timestamp(article.published_at),
        "created_at": _timestamp(article.created_at),
        "updated_at": _timestamp(article.updated_at),
        "tags": list(article.tags),
    }


def serialize_settings(settings: SiteSettings) -> dict[str, object]:
    """Settings in the camelCase shape the admin panel edits."""
    return {
        "siteName": settings.site_name,
        "siteDescription": settings.site_description,
        "contactEmail": settings.contact_email,
        "logoUrl": settings.logo_url,
        "primaryColor": settings.primary_color,
        "secondaryColor": settings.secondary_color,
        "socialMedia": dict(settings.social_media),
        "metaTags": dict(settings.meta_tags),
        "updatedAt": _timestamp(settings.updated_at),
    }
