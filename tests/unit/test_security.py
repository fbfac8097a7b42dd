"""Tests for password hashing and access tokens."""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from estates.infrastructure.security.jwt import create_access_token, verify_token
from estates.infrastructure.security.password import (
    get_password_hash,
    get_password_hash_async,
    verify_password,
    verify_password_async,
)


def test_password_round_trip() -> None:
    hashed = get_password_hash("correct horse")
    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed) is True
    assert verify_password("wrong horse", hashed) is False


def test_long_passwords_are_compared_in_full() -> None:
    base = "x" * 80
    hashed = get_password_hash(base + "a")
    assert verify_password(base + "b", hashed) is False


def test_verify_against_malformed_hash_is_false() -> None:
    assert verify_password("anything", "not-a-bcrypt-hash") is False


async def test_async_helpers() -> None:
    hashed = await get_password_hash_async("pw")
    assert await verify_password_async("pw", hashed) is True


def test_token_carries_subject_and_claims() -> None:
    token = create_access_token("ann@example.com", claims={"authority": "USER"})
    payload = verify_token(token)
    assert payload["sub"] == "ann@example.com"
    assert payload["authority"] == "USER"
    assert "exp" in payload


def test_expired_token_rejected() -> None:
    token = create_access_token("ann@example.com", expires_delta=timedelta(seconds=-5))
    with pytest.raises(ValueError, match="Invalid token"):
        verify_token(token)


def test_token_signed_with_another_key_rejected() -> None:
    token = jwt.encode(
        {"sub": "ann@example.com", "exp": datetime.now(UTC) + timedelta(minutes=5)},
        "some-other-secret",
        algorithm="HS256",
    )
    with pytest.raises(ValueError):
        verify_token(token)
