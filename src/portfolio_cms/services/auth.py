"""Authentication service."""

import logging
from dataclasses import dataclass
from typing import Protocol

import jwt

from portfolio_cms.domain.errors import (
    AuthenticationError,
    NotFoundError,
    ValidationError,
)
from portfolio_cms.domain.users import (
    ROLE_ADMIN,
    AuthResult,
    NewUser,
    UserCredentials,
    UserRecord,
)
from portfolio_cms.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for users."""

    def list_users(self) -> list[UserRecord]:
        """Return all users ordered by id."""

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return a user by id, if present."""

    def get_credentials(self, login: str) -> UserCredentials | None:
        """Return the user and password hash for a username or email."""

    def get_credentials_by_id(self, user_id: int) -> UserCredentials | None:
        """Return the user and password hash for an id."""

    def find_conflicting_user(
        self, username: str | None, email: str | None, exclude_id: int | None
    ) -> UserRecord | None:
        """Return another user already using the username or email."""

    def create_user(
        self, username: str, email: str, password_hash: str, role: str
    ) -> int:
        """Insert a user and return its generated id."""

    def update_user(self, user_id: int, fields: dict[str, object]) -> None:
        """Update the given columns of a user."""

    def delete_user(self, user_id: int) -> None:
        """Delete a user."""

    def count_users(self) -> int:
        """Return the number of stored users."""


@dataclass
class AuthService:
    """Credential checks, registration and token handling."""

    repository: UserRepository
    jwt_secret: str
    token_expires_minutes: int = 240

    def authenticate(self, login: str, password: str) -> AuthResult | None:
        """Return the user and a token, or None when the credentials don't match.

        Unknown users and wrong passwords produce the same result.
        """
        credentials = self.repository.get_credentials(login)
        if credentials is None or not verify_password(
            password, credentials.password_hash
        ):
            logger.info("Authentication failed", extra={"login": login})
            return None
        user = credentials.user
        logger.info("Authentication succeeded", extra={"user_id": user.id})
        return AuthResult(user=user, token=self.issue_token(user))

    def get_user_by_id(self, user_id: int) -> UserRecord | None:
        """Return a user by id, if present."""
        return self.repository.get_user(user_id)

    def register(self, new_user: NewUser) -> UserRecord:
        """Create a user with a hashed password and return its public fields."""
        user_id = self.repository.create_user(
            username=new_user.username,
            email=new_user.email,
            password_hash=hash_password(new_user.password),
            role=new_user.role,
        )
        created = self.repository.get_user(user_id)
        if created is None:
            return UserRecord(
                id=user_id,
                username=new_user.username,
                email=new_user.email,
                role=new_user.role,
            )
        return created

    def update_password(
        self, user_id: int, current_password: str, new_password: str
    ) -> None:
        """Replace a user's password after checking the current one."""
        if not current_password or not new_password:
            raise ValidationError("Current and new password are required")
        credentials = self.repository.get_credentials_by_id(user_id)
        if credentials is None:
            raise NotFoundError("User not found")
        if not verify_password(current_password, credentials.password_hash):
            raise AuthenticationError("Current password is incorrect")
        self.repository.update_user(user_id, {"password": hash_password(new_password)})

    def hash_password(self, password: str) -> str:
        """Hash a password for storage."""
        return hash_password(password)

    def issue_token(self, user: UserRecord) -> str:
        """Create an access token for a user."""
        return create_access_token(
            secret=self.jwt_secret,
            user_id=user.id,
            username=user.username,
            role=user.role,
            expires_minutes=self.token_expires_minutes,
        )

    def verify_token(self, token: str) -> dict[str, object] | None:
        """Return token claims, or None when the token is invalid or expired."""
        if not token:
            return None
        try:
            return decode_access_token(token=token, secret=self.jwt_secret)
        except jwt.InvalidTokenError:
            return None

    def bootstrap_admin(
        self, username: str, email: str, password: str | None
    ) -> UserRecord | None:
        """Create the first admin when no users exist yet."""
        if not username or not password:
            return None
        if self.repository.count_users() > 0:
            return None
        admin = self.register(
            NewUser(username=username, email=email, password=password, role=ROLE_ADMIN)
        )
        logger.info("Bootstrapped initial admin user", extra={"username": username})
        return admin
