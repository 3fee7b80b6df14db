"""Tests for password hashing and access tokens."""

import jwt
import pytest

from portfolio_cms.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_hash_and_verify_password() -> None:
    hashed = hash_password("s3cret")

    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("other", hashed)


def test_verify_password_with_malformed_hash() -> None:
    assert not verify_password("s3cret", "not-a-hash")
    assert not verify_password("", "anything")


def test_hash_password_rejects_blank() -> None:
    with pytest.raises(ValueError):
        hash_password("")


def test_access_token_round_trip() -> None:
    token = create_access_token(
        secret="k", user_id=4, username="kim", role="user", expires_minutes=5
    )

    claims = decode_access_token(token=token, secret="k")

    assert claims["sub"] == "4"
    assert claims["role"] == "user"
    assert claims["exp"] > claims["iat"]


def test_expired_token_is_rejected() -> None:
    token = jwt.encode({"sub": "1", "exp": 1}, "k", algorithm="HS256")

    with pytest.raises(jwt.ExpiredSignatureError):
        decode_access_token(token=token, secret="k")
