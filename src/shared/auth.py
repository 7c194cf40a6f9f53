"""FastAPI authentication dependencies shared by every context.

The access token is read from the `token` cookie first and from an
`Authorization: Bearer` header second. Revoked tokens are rejected before
the signature is even checked.
"""

from collections.abc import Iterable
from dataclasses import dataclass

import structlog
from fastapi import HTTPException, Request

from shared.security import TokenError, decode_access_token
from shared.tokens import get_blacklist

logger = structlog.get_logger(__name__)

TOKEN_COOKIE = "token"


@dataclass(frozen=True)
class CurrentUser:
    """Identity of the caller, as carried by the access token."""

    id: str
    username: str
    email: str
    role: str
    token: str


def extract_token(request: Request) -> str | None:
    token = request.cookies.get(TOKEN_COOKIE)
    if token:
        return token

    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None


def authenticate(roles: Iterable[str] = ("user",)):
    """Build a dependency that admits callers holding one of `roles`."""
    allowed = frozenset(roles)

    async def dependency(request: Request) -> CurrentUser:
        token = extract_token(request)
        if not token:
            raise HTTPException(status_code=401, detail="Unauthorized, No token provided")

        if get_blacklist().is_revoked(token):
            raise HTTPException(status_code=401, detail="Unauthorized: Invalid token")

        try:
            claims = decode_access_token(token)
        except TokenError as exc:
            logger.info("Rejected access token", reason=str(exc))
            raise HTTPException(status_code=401, detail="Unauthorized: Invalid token") from exc

        if claims.get("role") not in allowed:
            raise HTTPException(status_code=403, detail="Forbidden: Insufficient permission")

        return CurrentUser(
            id=str(claims["id"]),
            username=claims.get("username", ""),
            email=claims.get("email", ""),
            role=claims["role"],
            token=token,
        )

    return dependency
