"""Token blacklist port (abstract interface).

Logged-out tokens stay revoked until they would have expired anyway.
"""

from abc import ABC, abstractmethod


class TokenBlacklist(ABC):
    """Abstract token blacklist."""

    @abstractmethod
    def revoke(self, token: str, ttl_seconds: int) -> None:
        """Mark `token` as revoked for `ttl_seconds`."""
        ...

    @abstractmethod
    def is_revoked(self, token: str) -> bool: ...
