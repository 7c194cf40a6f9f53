"""In-process token blacklist for development and testing."""

import time
from collections.abc import Callable

from shared.tokens.port import TokenBlacklist


class InMemoryTokenBlacklist(TokenBlacklist):
    """Keeps revoked tokens in a dict keyed by token, valued by expiry time."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, float] = {}

    def revoke(self, token: str, ttl_seconds: int) -> None:
        self._entries[token] = self._clock() + ttl_seconds

    def is_revoked(self, token: str) -> bool:
        expires_at = self._entries.get(token)
        if expires_at is None:
            return False
        if expires_at <= self._clock():
            del self._entries[token]
            return False
        return True

    def reset(self) -> None:
        self._entries.clear()
