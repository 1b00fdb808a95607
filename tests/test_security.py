from datetime import datetime, timedelta, timezone

import jwt

from storefront.config.settings import get_settings
from storefront.security import generate_token, hash_password, verify_password, verify_token


def test_token_carries_claims_and_expiry():
    token = generate_token({"userId": "abc", "name": "Ana", "isAdmin": False})
    claims = verify_token(token)

    assert claims["userId"] == "abc"
    assert claims["name"] == "Ana"
    assert claims["isAdmin"] is False
    assert claims["exp"] - claims["iat"] == get_settings().jwt_expire_days * 24 * 3600


def test_expired_token_is_rejected():
    settings = get_settings()
    past = datetime.now(timezone.utc) - timedelta(days=1)
    token = jwt.encode(
        {"userId": "abc", "iat": past - timedelta(days=7), "exp": past},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )
    assert verify_token(token) is None


def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode({"userId": "abc", "isAdmin": True}, "someone-else", algorithm="HS256")
    assert verify_token(token) is None


def test_garbage_and_empty_tokens_are_rejected():
    assert verify_token("not-a-jwt") is None
    assert verify_token("") is None


def test_password_hash_round_trip():
    hashed = hash_password("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)


def test_verify_password_tolerates_malformed_hash():
    assert verify_password("s3cret", "not-a-bcrypt-hash") is False
    assert verify_password("", "anything") is False
