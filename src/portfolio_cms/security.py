"""Password hashing and access tokens."""

from datetime import UTC, datetime, timedelta

import jwt
from passlib.context import CryptContext

_pwd = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
_JWT_ALG = "HS256"


def hash_password(password: str) -> str:
    """Hash a plain-text password."""
    if not password:
        raise ValueError("password must not be blank")
    return _pwd.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Return True when the password matches the stored hash."""
    if not password or not password_hash:
        return False
    try:
        return _pwd.verify(password, password_hash)
    except ValueError:
        # Unrecognized or malformed hash.
        return False


def create_access_token(
    *,
    secret: str,
    user_id: int,
    username: str,
    role: str,
    expires_minutes: int,
) -> str:
    """Create a signed JWT for a user."""
    if not secret:
        raise ValueError("jwt secret must not be blank")
    now = datetime.now(tz=UTC)
    expires_at = now + timedelta(minutes=max(1, expires_minutes))
    payload: dict[str, object] = {
        "sub": str(user_id),
        "username": username,
        "role": role,
        "iat": int(now.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=_JWT_ALG)


def decode_access_token(*, token: str, secret: str) -> dict[str, object]:
    """Decode and verify a JWT; raises jwt.InvalidTokenError on failure."""
    return jwt.decode(token, secret, algorithms=[_JWT_ALG])
