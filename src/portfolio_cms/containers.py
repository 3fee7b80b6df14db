"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from portfolio_cms.adapters.sql_article_repository import SqlArticleRepository
from portfolio_cms.adapters.sql_category_repository import SqlCategoryRepository
from portfolio_cms.adapters.sql_client import PooledSqlClient, SqlClient
from portfolio_cms.adapters.sql_photo_repository import SqlPhotoRepository
from portfolio_cms.adapters.sql_settings_repository import SqlSettingsRepository
from portfolio_cms.adapters.sql_user_repository import SqlUserRepository
from portfolio_cms.config import Settings
from portfolio_cms.services.articles import ArticleService
from portfolio_cms.services.auth import AuthService
from portfolio_cms.services.categories import CategoryService
from portfolio_cms.services.photos import PhotoService
from portfolio_cms.services.site_settings import SettingsService
from portfolio_cms.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    sql_client: SqlClient
    auth_service: AuthService
    user_service: UserService
    photo_service: PhotoService
    category_service: CategoryService
    article_service: ArticleService
    settings_service: SettingsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    sql_client = PooledSqlClient.create(
        resolved_settings.database_url,
        min_size=resolved_settings.db_pool_min_size,
        max_size=resolved_settings.db_pool_max_size,
    )
    user_repository = SqlUserRepository(sql_client)
    category_repository = SqlCategoryRepository(sql_client)
    photo_repository = SqlPhotoRepository(sql_client)
    auth_service = AuthService(
        repository=user_repository,
        jwt_secret=resolved_settings.jwt_secret,
        token_expires_minutes=resolved_settings.jwt_expires_minutes,
    )
    user_service = UserService(repository=user_repository, auth_service=auth_service)
    category_service = CategoryService(category_repository)
    photo_service = PhotoService(
        repository=photo_repository,
        category_repository=category_repository,
    )
    article_service = ArticleService(
        repository=SqlArticleRepository(sql_client),
        category_repository=category_repository,
    )
    settings_service = SettingsService(SqlSettingsRepository(sql_client))

    async def close_resources() -> None:
        sql_client.close()

    return AppContainer(
        settings=resolved_settings,
        sql_client=sql_client,
        auth_service=auth_service,
        user_service=user_service,
        photo_service=photo_service,
        category_service=category_service,
        article_service=article_service,
        settings_service=settings_service,
        close_resources=close_resources,
    )
