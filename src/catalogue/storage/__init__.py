"""Image storage factory.

Provides get_storage() / set_storage() to swap implementations:
- ImageKitStorage when IMAGEKIT_PRIVATE_KEY is configured
- FakeImageStorage for development and testing
"""

import os

from catalogue.storage.fake_adapter import FakeImageStorage
from catalogue.storage.port import ImageStorage

_current_storage: ImageStorage | None = None


def get_storage() -> ImageStorage:
    """Return the current image storage, creating it on first use."""
    global _current_storage
    if _current_storage is None:
        if os.getenv("IMAGEKIT_PRIVATE_KEY"):
            from catalogue.storage.imagekit_adapter import ImageKitStorage

            _current_storage = ImageKitStorage.from_env()
        else:
            _current_storage = FakeImageStorage()
    return _current_storage


def set_storage(storage: ImageStorage) -> None:
    """Override the active image storage (useful for tests)."""
    global _current_storage
    _current_storage = storage


def reset_storage() -> None:
    """Reset to the default image storage."""
    global _current_storage
    _current_storage = None
