"""Login, logout and session endpoints for the admin panel."""

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from portfolio_cms.adapters.cookie_session_store import CookieSessionStore
from portfolio_cms.api.deps import get_session_store, require_session
from portfolio_cms.api.models import ChangePasswordRequest, LoginRequest
from portfolio_cms.api.serializers import serialize_user
from portfolio_cms.domain.errors import AuthenticationError, ValidationError
from portfolio_cms.domain.users import UserRecord

if TYPE_CHECKING:
    from portfolio_cms.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login")
def login(
    payload: LoginRequest,
    request: Request,
    session_store: CookieSessionStore = Depends(get_session_store),
) -> dict[str, object]:
    """Check credentials, start a session and return the token."""
    if not payload.username or not payload.password:
        raise ValidationError("Username and password are required")
    container: AppContainer = request.app.state.container
    result = container.auth_service.authenticate(payload.username, payload.password)
    if result is None:
        raise AuthenticationError("Invalid credentials")
    session_store.set(result.token)
    return {"user": serialize_user(result.user), "token": result.token}


@router.post("/logout")
def logout(
    session_store: CookieSessionStore = Depends(get_session_store),
) -> dict[str, str]:
    """End the session by expiring the cookie."""
    session_store.clear()
    return {"message": "Logged out successfully"}


@router.get("/me")
def current_user(user: UserRecord = Depends(require_session)) -> dict[str, object]:
    return serialize_user(user)


@router.put("/password")
def change_password(
    payload: ChangePasswordRequest,
    request: Request,
    user: UserRecord = Depends(require_session),
) -> dict[str, str]:
    """Change the signed-in user's password."""
    container: AppContainer = request.app.state.container
    container.auth_service.update_password(
        user.id, payload.current_password or "", payload.new_password or ""
    )
    logger.info("Password changed", extra={"user_id": user.id})
    return {"message": "Password updated successfully"}


@router.post("/refresh")
def refresh_token(
    request: Request,
    user: UserRecord = Depends(require_session),
    session_store: CookieSessionStore = Depends(get_session_store),
) -> dict[str, object]:
    """Issue a fresh token for a valid session and renew the cookie."""
    container: AppContainer = request.app.state.container
    token = container.auth_service.issue_token(user)
    session_store.set(token)
    return {"user": serialize_user(user), "token": token}
