"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from portfolio_cms.adapters.sql_schema import apply_schema
from portfolio_cms.api.admin import router as admin_router
from portfolio_cms.api.articles import router as articles_router
from portfolio_cms.api.auth import router as auth_router
from portfolio_cms.api.categories import router as categories_router
from portfolio_cms.api.photos import router as photos_router
from portfolio_cms.api.site_settings import router as settings_router
from portfolio_cms.api.users import router as users_router
from portfolio_cms.app_logging import configure_logging
from portfolio_cms.containers import AppContainer
from portfolio_cms.domain.errors import PortfolioError

logger = logging.getLogger(__name__)


def run_startup_tasks(container: AppContainer) -> None:
    """Apply the schema when enabled, bootstrap the first admin, then ping the pool."""
    settings = container.settings
    try:
        if settings.db_apply_schema:
            apply_schema(container.sql_client)
        container.auth_service.bootstrap_admin(
            settings.bootstrap_admin_username,
            settings.bootstrap_admin_email,
            settings.bootstrap_admin_password,
        )
    except Exception:
        logger.exception("Startup tasks failed")
        raise
    if container.sql_client.check_connection():
        logger.info("Database connection established")
    else:
        logger.warning("Database is unavailable")


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        run_startup_tasks(app.state.container)
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Portfolio CMS", lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(PortfolioError)
    async def portfolio_error_handler(
        request: Request, exc: PortfolioError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message, **exc.details},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Rejected request", extra={"path": request.url.path})
        return JSONResponse(status_code=400, content={"message": "Invalid request"})

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(photos_router)
    app.include_router(categories_router)
    app.include_router(articles_router)
    app.include_router(settings_router)
    app.include_router(admin_router)

    @app.get("/health")
    def health(request: Request) -> dict[str, str]:
        """Health check reporting database reachability."""
        state_container: AppContainer = request.app.state.container
        reachable = state_container.sql_client.check_connection()
        database = "ok" if reachable else "unavailable"
        return {"status": "ok", "database": database}

    return app
