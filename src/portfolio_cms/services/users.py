"""User management business logic."""

from dataclasses import dataclass

from portfolio_cms.domain.errors import (
    ConflictError,
    ForbiddenOperationError,
    NotFoundError,
    ValidationError,
)
from portfolio_cms.domain.users import (
    PROTECTED_USER_ID,
    ROLE_USER,
    ROLES,
    NewUser,
    UserRecord,
)
from portfolio_cms.services.auth import AuthService, UserRepository


@dataclass
class UserService:
    """Application service for admin user management."""

    repository: UserRepository
    auth_service: AuthService

    def list_users(self) -> list[UserRecord]:
        """Return all users."""
        return self.repository.list_users()

    def get_user(self, user_id: int) -> UserRecord:
        """Return a user or raise NotFoundError."""
        user = self.repository.get_user(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def create_user(
        self,
        username: str | None,
        email: str | None,
        password: str | None,
        role: str | None = None,
    ) -> UserRecord:
        """Validate input and register a new user."""
        if not username or not email or not password:
            raise ValidationError("Username, email, and password are required")
        resolved_role = role or ROLE_USER
        _check_role(resolved_role)
        if self.repository.find_conflicting_user(username, email, exclude_id=None):
            raise ConflictError("Username or email already in use")
        return self.auth_service.register(
            NewUser(
                username=username,
                email=email,
                password=password,
                role=resolved_role,
            )
        )

    def update_user(
        self,
        user_id: int,
        username: str | None = None,
        email: str | None = None,
        role: str | None = None,
        password: str | None = None,
    ) -> None:
        """Apply a partial update to a user."""
        self.get_user(user_id)
        if username or email:
            conflict = self.repository.find_conflicting_user(
                username or None, email or None, exclude_id=user_id
            )
            if conflict:
                raise ConflictError(
                    "Username or email already in use by another account"
                )
        fields: dict[str, object] = {}
        if username:
            fields["username"] = username
        if email:
            fields["email"] = email
        if role:
            _check_role(role)
            fields["role"] = role
        if password:
            fields["password"] = self.auth_service.hash_password(password)
        if not fields:
            raise ValidationError("No fields to update")
        self.repository.update_user(user_id, fields)

    def delete_user(self, user_id: int) -> None:
        """Delete a user unless it is protected."""
        if user_id == PROTECTED_USER_ID:
            raise ForbiddenOperationError("Cannot delete admin user")
        user = self.get_user(user_id)
        if user.is_admin:
            raise ForbiddenOperationError("Cannot delete admin user")
        self.repository.delete_user(user_id)


def _check_role(role: str) -> None:
    if role not in ROLES:
        raise ValidationError("Role must be either 'admin' or 'user'")
