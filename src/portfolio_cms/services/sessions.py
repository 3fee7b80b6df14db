"""Client session storage."""

from typing import Protocol


class SessionStore(Protocol):
    """Holds the session token for one client, independent of storage medium."""

    def set(self, token: str) -> None:
        """Store the session token."""

    def get(self) -> str | None:
        """Return the stored token, if any."""

    def clear(self) -> None:
        """Forget the stored token."""
