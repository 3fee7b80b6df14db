"""SQL-backed user repository."""

from dataclasses import dataclass
from typing import Any

from portfolio_cms.adapters.sql_client import SqlClient
from portfolio_cms.domain.users import UserCredentials, UserRecord
from portfolio_cms.services.auth import UserRepository

_PUBLIC_COLUMNS = "id, username, email, role, created_at, updated_at"
_UPDATABLE_COLUMNS = frozenset({"username", "email", "role", "password"})


@dataclass
class SqlUserRepository(UserRepository):
    """User persistence on top of the pooled SQL client."""

    client: SqlClient

    def list_users(self) -> list[UserRecord]:
        """Return all users ordered by id."""
        rows = self.client.query(f"SELECT {_PUBLIC_COLUMNS} FROM users ORDER BY id")
        return [_to_user(row) for row in rows]

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return a user by id, if present."""
        rows = self.client.query(
            f"SELECT {_PUBLIC_COLUMNS} FROM users WHERE id = %s", (user_id,)
        )
        return _to_user(rows[0]) if rows else None

    def get_credentials(self, login: str) -> UserCredentials | None:
        """Return the user and password hash matching a username or email."""
        rows = self.client.query(
            f"SELECT {_PUBLIC_COLUMNS}, password FROM users "
            "WHERE username = %s OR email = %s LIMIT 1",
            (login, login),
        )
        return _to_credentials(rows[0]) if rows else None

    def get_credentials_by_id(self, user_id: int) -> UserCredentials | None:
        """Return the user and password hash for an id."""
        rows = self.client.query(
            f"SELECT {_PUBLIC_COLUMNS}, password FROM users WHERE id = %s",
            (user_id,),
        )
        return _to_credentials(rows[0]) if rows else None

    def find_conflicting_user(
        self, username: str | None, email: str | None, exclude_id: int | None
    ) -> UserRecord | None:
        """Return a different user already holding the username or email."""
        rows = self.client.query(
            f"SELECT {_PUBLIC_COLUMNS} FROM users "
            "WHERE (username = %s OR email = %s) AND id <> %s LIMIT 1",
            (username, email, exclude_id if exclude_id is not None else -1),
        )
        return _to_user(rows[0]) if rows else None

    def create_user(
        self, username: str, email: str, password_hash: str, role: str
    ) -> int:
        """Insert a user and return its generated id."""
        rows = self.client.query(
            "INSERT INTO users (username, email, password, role) "
            "VALUES (%s, %s, %s, %s) RETURNING id",
            (username, email, password_hash, role),
        )
        if not rows:
            raise RuntimeError("Failed to create user")
        return int(rows[0]["id"])

    def update_user(self, user_id: int, fields: dict[str, object]) -> None:
        """Update the given columns and bump updated_at."""
        unknown = set(fields) - _UPDATABLE_COLUMNS
        if unknown:
            raise ValueError(f"Unknown user columns: {sorted(unknown)}")
        if not fields:
            return
        assignments = ", ".join(f"{column} = %s" for column in fields)
        self.client.query(
            f"UPDATE users SET {assignments}, updated_at = NOW() WHERE id = %s",
            [*fields.values(), user_id],
        )

    def delete_user(self, user_id: int) -> None:
        """Delete a user."""
        self.client.query("DELETE FROM users WHERE id = %s", (user_id,))

    def count_users(self) -> int:
        """Return the number of stored users."""
        rows = self.client.query("SELECT COUNT(*) AS count FROM users")
        return int(rows[0]["count"]) if rows else 0


def _to_user(row: dict[str, Any]) -> UserRecord:
    return UserRecord(
        id=int(row["id"]),
        username=row["username"],
        email=row["email"],
        role=row["role"],
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


def _to_credentials(row: dict[str, Any]) -> UserCredentials:
    return UserCredentials(user=_to_user(row), password_hash=row["password"])
