"""Password hashing and access-token helpers.

Passwords are hashed with passlib's pbkdf2_sha256 scheme. Access tokens are
HS256 JWTs carrying the user's id, username, email and role.
"""

import os
import time
from typing import Any

import jwt
from passlib.context import CryptContext

JWT_ALGORITHM = "HS256"
DEFAULT_TOKEN_TTL_SECONDS = 24 * 60 * 60

_DEV_SECRET = "nexora-dev-secret"

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class TokenError(Exception):
    """Raised when an access token cannot be decoded or has expired."""


def _jwt_secret() -> str:
    secret = os.getenv("JWT_SECRET")
    if secret:
        return secret
    env = (os.getenv("ENV") or os.getenv("PROTEAN_ENV") or "development").lower()
    if env == "production":
        raise RuntimeError("JWT_SECRET must be set in production")
    return _DEV_SECRET


def token_ttl_seconds() -> int:
    return int(os.getenv("JWT_EXPIRES_SECONDS", str(DEFAULT_TOKEN_TTL_SECONDS)))


def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    if not hashed:
        return False
    return pwd_context.verify(plain, hashed)


def create_access_token(claims: dict[str, Any], expires_in: int | None = None) -> str:
    """Sign `claims` into a JWT that expires after `expires_in` seconds."""
    now = int(time.time())
    payload = dict(claims)
    payload["iat"] = now
    payload["exp"] = now + (expires_in if expires_in is not None else token_ttl_seconds())
    return jwt.encode(payload, _jwt_secret(), algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    try:
        return jwt.decode(token, _jwt_secret(), algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError as exc:
        raise TokenError("Token has expired") from exc
    except jwt.PyJWTError as exc:
        raise TokenError("Invalid token") from exc
