"""ImageKit image storage adapter.

Uses ImageKit's upload API directly: a multipart POST authenticated with the
account's private key as the basic-auth user name.
"""

import base64
import os
from uuid import uuid4

import httpx
import structlog

from catalogue.storage.port import ImageStorage, ImageStorageError, StoredImage

logger = structlog.get_logger(__name__)

UPLOAD_URL = "https://upload.imagekit.io/api/v1/files/upload"


class ImageKitStorage(ImageStorage):
    def __init__(self, private_key: str, folder: str = "/nexora/products", timeout: float = 30.0) -> None:
        self.private_key = private_key
        self.folder = folder
        self.timeout = timeout

    @classmethod
    def from_env(cls) -> "ImageKitStorage":
        return cls(
            private_key=os.environ["IMAGEKIT_PRIVATE_KEY"],
            folder=os.getenv("IMAGEKIT_FOLDER", "/nexora/products"),
        )

    async def upload(self, content: bytes, filename: str) -> StoredImage:
        data = {
            "file": base64.b64encode(content).decode("ascii"),
            "fileName": filename or f"{uuid4().hex}.jpg",
            "folder": self.folder,
            "useUniqueFileName": "true",
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout, auth=(self.private_key, "")) as client:
                response = await client.post(UPLOAD_URL, data=data)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error("ImageKit rejected upload", status=exc.response.status_code, body=exc.response.text[:500])
            raise ImageStorageError(f"Image upload failed with status {exc.response.status_code}") from exc
        except httpx.RequestError as exc:
            logger.error("ImageKit unreachable", error=str(exc))
            raise ImageStorageError(f"Image upload failed: {exc}") from exc

        payload = response.json()
        return StoredImage(
            url=payload["url"],
            thumbnail=payload.get("thumbnailUrl"),
            file_id=payload["fileId"],
        )
