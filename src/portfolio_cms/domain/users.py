"""Domain models for users and authentication."""

from dataclasses import dataclass
from datetime import datetime

ROLE_ADMIN = "admin"
ROLE_USER = "user"
ROLES = frozenset({ROLE_ADMIN, ROLE_USER})

# The bootstrap administrator can never be removed.
PROTECTED_USER_ID = 1


@dataclass(frozen=True)
class UserRecord:
    """Public view of a stored user. Never carries the password."""

    id: int
    username: str
    email: str
    role: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


@dataclass(frozen=True)
class UserCredentials:
    """A user together with its stored password hash."""

    user: UserRecord
    password_hash: str


@dataclass(frozen=True)
class NewUser:
    """Input for registering a user."""

    username: str
    email: str
    password: str
    role: str = ROLE_USER


@dataclass(frozen=True)
class AuthResult:
    """Successful authentication: public user fields plus an access token."""

    user: UserRecord
    token: str
