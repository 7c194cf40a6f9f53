"""In-memory image storage for development and testing."""

from uuid import uuid4

from catalogue.storage.port import ImageStorage, ImageStorageError, StoredImage


class FakeImageStorage(ImageStorage):
    """Records uploads and hands back deterministic-looking URLs."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.uploads: list[dict] = []

    def configure(self, should_succeed: bool) -> None:
        self.should_succeed = should_succeed

    async def upload(self, content: bytes, filename: str) -> StoredImage:
        if not self.should_succeed:
            raise ImageStorageError("Image upload failed")

        file_id = f"fake_{uuid4().hex[:12]}"
        self.uploads.append({"filename": filename, "size": len(content), "file_id": file_id})
        return StoredImage(
            url=f"https://images.example.test/{file_id}/{filename}",
            thumbnail=f"https://images.example.test/{file_id}/tr:n-thumb/{filename}",
            file_id=file_id,
        )
