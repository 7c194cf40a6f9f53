"""Redis-backed token blacklist.

Each revoked token is stored as `blacklist:{token}` with a Redis expiry, so
entries disappear on their own once the token could no longer be used.
"""

import redis

from shared.tokens.port import TokenBlacklist

KEY_PREFIX = "blacklist:"


class RedisTokenBlacklist(TokenBlacklist):
    def __init__(self, client: redis.Redis) -> None:
        self.client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisTokenBlacklist":
        return cls(redis.from_url(url, decode_responses=True, socket_connect_timeout=5))

    def revoke(self, token: str, ttl_seconds: int) -> None:
        self.client.set(f"{KEY_PREFIX}{token}", "true", ex=ttl_seconds)

    def is_revoked(self, token: str) -> bool:
        return bool(self.client.exists(f"{KEY_PREFIX}{token}"))
