"""Token blacklist factory.

Provides get_blacklist() / set_blacklist() to swap implementations:
- RedisTokenBlacklist when REDIS_URL is configured
- InMemoryTokenBlacklist otherwise (development and tests)
"""

import os

from shared.tokens.memory_adapter import InMemoryTokenBlacklist
from shared.tokens.port import TokenBlacklist

_current_blacklist: TokenBlacklist | None = None


def get_blacklist() -> TokenBlacklist:
    """Return the active token blacklist, creating it on first use."""
    global _current_blacklist
    if _current_blacklist is None:
        redis_url = os.getenv("REDIS_URL")
        if redis_url:
            from shared.tokens.redis_adapter import RedisTokenBlacklist

            _current_blacklist = RedisTokenBlacklist.from_url(redis_url)
        else:
            _current_blacklist = InMemoryTokenBlacklist()
    return _current_blacklist


def set_blacklist(blacklist: TokenBlacklist) -> None:
    """Override the active token blacklist (useful for tests)."""
    global _current_blacklist
    _current_blacklist = blacklist


def reset_blacklist() -> None:
    """Reset to the default blacklist."""
    global _current_blacklist
    _current_blacklist = None
