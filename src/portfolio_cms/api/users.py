"""User management endpoints."""

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status

from portfolio_cms.api.deps import require_admin
from portfolio_cms.api.models import CreateUserRequest, UpdateUserRequest
from portfolio_cms.api.serializers import serialize_user
from portfolio_cms.domain.errors import ForbiddenOperationError
from portfolio_cms.domain.users import PROTECTED_USER_ID

if TYPE_CHECKING:
    from portfolio_cms.containers import AppContainer

router = APIRouter(prefix="/api/users", tags=["users"])

_admin_only = [Depends(require_admin)]


def refuse_protected_user(user_id: int) -> None:
    """Refuse deleting the protected admin account, whoever asks."""
    if user_id == PROTECTED_USER_ID:
        raise ForbiddenOperationError("Cannot delete admin user")


@router.get("", dependencies=_admin_only)
def list_users(request: Request) -> list[dict[str, object]]:
    """Return every user without password hashes."""
    container: AppContainer = request.app.state.container
    return [serialize_user(user) for user in container.user_service.list_users()]


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=_admin_only)
def create_user(payload: CreateUserRequest, request: Request) -> dict[str, object]:
    """Create a user; the role defaults to ``user``."""
    container: AppContainer = request.app.state.container
    user = container.user_service.create_user(
        username=payload.username,
        email=payload.email,
        password=payload.password,
        role=payload.role,
    )
    return {"message": "User created successfully", "userId": user.id}


@router.get("/{user_id}", dependencies=_admin_only)
def get_user(user_id: int, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    return serialize_user(container.user_service.get_user(user_id))


@router.put("/{user_id}", dependencies=_admin_only)
def update_user(
    user_id: int, payload: UpdateUserRequest, request: Request
) -> dict[str, str]:
    """Apply a partial update to a user."""
    container: AppContainer = request.app.state.container
    container.user_service.update_user(
        user_id,
        username=payload.username,
        email=payload.email,
        role=payload.role,
        password=payload.password,
    )
    return {"message": "User updated successfully"}


@router.delete(
    "/{user_id}",
    dependencies=[Depends(refuse_protected_user), Depends(require_admin)],
)
def delete_user(user_id: int, request: Request) -> dict[str, str]:
    """Delete a user; admin accounts are protected."""
    container: AppContainer = request.app.state.container
    container.user_service.delete_user(user_id)
    return {"message": "User deleted successfully"}
