"""Cookie-backed session store."""

from dataclasses import dataclass

from fastapi import Request, Response

from portfolio_cms.services.sessions import SessionStore

SESSION_COOKIE_PATH = "/"
SESSION_COOKIE_SAMESITE = "strict"


@dataclass
class CookieSessionStore(SessionStore):
    """Keeps the session token in an httpOnly cookie for one request/response."""

    request: Request
    response: Response
    cookie_name: str
    max_age_seconds: int
    secure: bool = False

    def set(self, token: str) -> None:
        """Attach the token cookie to the response."""
        self.response.set_cookie(
            key=self.cookie_name,
            value=token,
            max_age=self.max_age_seconds,
            path=SESSION_COOKIE_PATH,
            secure=self.secure,
            httponly=True,
            samesite=SESSION_COOKIE_SAMESITE,
        )

    def get(self) -> str | None:
        """Return the token sent by the client, if any."""
        return self.request.cookies.get(self.cookie_name) or None

    def clear(self) -> None:
        """Expire the token cookie immediately."""
        self.response.delete_cookie(
            key=self.cookie_name,
            path=SESSION_COOKIE_PATH,
            secure=self.secure,
            httponly=True,
            samesite=SESSION_COOKIE_SAMESITE,
        )
