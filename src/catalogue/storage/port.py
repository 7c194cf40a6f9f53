"""Image storage port (abstract interface).

Product images are uploaded to an external media service; the catalogue
keeps only the resulting URLs and the provider's file id.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class StoredImage:
    """Location of an uploaded image."""

    url: str
    thumbnail: str | None
    file_id: str

    def as_dict(self) -> dict:
        return {"url": self.url, "thumbnail": self.thumbnail, "id": self.file_id}


class ImageStorageError(Exception):
    """Raised when an upload is rejected or the storage is unreachable."""


class ImageStorage(ABC):
    """Abstract image storage interface."""

    @abstractmethod
    async def upload(self, content: bytes, filename: str) -> StoredImage:
        """Store `content` and return where it can be fetched from."""
        ...
