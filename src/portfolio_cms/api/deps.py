"""Request-scoped dependencies shared by the API routers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Request, Response
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from portfolio_cms.adapters.cookie_session_store import CookieSessionStore
from portfolio_cms.domain.errors import AuthenticationError, ForbiddenOperationError
from portfolio_cms.domain.users import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from portfolio_cms.containers import AppContainer

_bearer = HTTPBearer(auto_error=False)


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


def get_session_store(request: Request, response: Response) -> CookieSessionStore:
    """Return the cookie-backed session store for this request."""
    settings = get_container(request).settings
    return CookieSessionStore(
        request=request,
        response=response,
        cookie_name=settings.auth_cookie_name,
        max_age_seconds=settings.session_max_age_seconds,
        secure=settings.auth_cookie_secure,
    )


def require_session(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    session_store: CookieSessionStore = Depends(get_session_store),
) -> UserRecord:
    """Resolve the signed-in user from the bearer header or session cookie."""
    token = credentials.credentials if credentials else session_store.get()
    if not token:
        raise AuthenticationError("Authentication required")
    auth_service = get_container(request).auth_service
    claims = auth_service.verify_token(token)
    if claims is None:
        raise AuthenticationError("Invalid or expired token")
    try:
        user_id = int(str(claims.get("sub")))
    except ValueError as exc:
        raise AuthenticationError("Invalid or expired token") from exc
    user = auth_service.get_user_by_id(user_id)
    if user is None:
        raise AuthenticationError("Invalid or expired token")
    return user


def require_admin(user: UserRecord = Depends(require_session)) -> UserRecord:
    """Ensure the signed-in user is an admin."""
    if not user.is_admin:
        raise ForbiddenOperationError("Admin access required")
    return user


def optional_session(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    session_store: CookieSessionStore = Depends(get_session_store),
) -> UserRecord | None:
    """Like ``require_session`` but returns None for anonymous callers."""
    try:
        return require_session(request, credentials, session_store)
    except AuthenticationError:
        return None
