"""
Token, password and Google sign-in helpers.
"""
import logging
from datetime import timedelta
from typing import Any, Dict, Optional

import bcrypt
import jwt
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token

from .config.settings import get_settings
from .utils.serializers import utc_now

logger = logging.getLogger(__name__)


def generate_token(payload: Dict[str, Any]) -> str:
    settings = get_settings()
    issued_at = utc_now()
    claims = dict(payload)
    claims["iat"] = issued_at
    claims["exp"] = issued_at + timedelta(days=settings.jwt_expire_days)
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> Optional[Dict[str, Any]]:
    """Decode a session token, returning None when it is invalid or expired."""
    raw = (token or "").strip()
    if not raw:
        return None

    settings = get_settings()
    try:
        return jwt.decode(raw, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.InvalidTokenError as exc:
        logger.debug(f"Rejected token: {exc}")
        return None


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise ValueError("Password is empty.")
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    return bcrypt.hashpw(password, salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def verify_google_id_token(token: str, client_id: str) -> Dict[str, Any]:
    """
    Verify a Google Sign-In ID token and return its claims.

    Raises:
        ValueError: If the token is malformed, expired, or issued for another audience
    """
    return id_token.verify_oauth2_token(token, google_requests.Request(), client_id)
