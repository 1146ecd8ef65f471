"""Progress photo service backed by object storage."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.progress import ProgressPhoto

_CONTENT_TYPE_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/heic": "heic",
}

_logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Persistence interface for progress photo rows."""

    def list_photos(self, user_id: UUID) -> list[ProgressPhoto]:
        """Return photos, most recent first."""

    def get_photo(self, user_id: UUID, photo_id: UUID) -> ProgressPhoto | None:
        """Return a photo row by id, if present."""

    def create_photo(
        self, user_id: UUID, photo_path: str, day: date, notes: str | None
    ) -> ProgressPhoto:
        """Create a photo row and return it."""

    def delete_photo(self, user_id: UUID, photo_id: UUID) -> None:
        """Delete a photo row."""


class PhotoStorage(Protocol):
    """Object storage for photo bytes."""

    def upload(self, path: str, content: bytes, content_type: str) -> None:
        """Store bytes at path."""

    def create_signed_url(self, path: str, expires_in: int) -> str | None:
        """Return a time-limited read URL for path."""

    def remove(self, paths: list[str]) -> None:
        """Delete stored objects."""


@dataclass
class PhotoService:
    """Uploads, lists and deletes progress photos."""

    repository: PhotoRepository
    storage: PhotoStorage
    signed_url_ttl_seconds: int = 3600

    def upload_photo(
        self,
        user_id: UUID,
        content: bytes,
        content_type: str,
        day: date,
        notes: str | None = None,
    ) -> ProgressPhoto:
        """Store the image and record it; the row is only written on upload."""
        if not content:
            raise ValueError("Photo content is empty")
        path = photo_path_for(user_id, content_type, datetime.now(tz=UTC))
        self.storage.upload(path, content, content_type)
        try:
            photo = self.repository.create_photo(user_id, path, day, notes or None)
        except Exception:
            _logger.warning("Removing orphaned photo: path=%s", path)
            self.storage.remove([path])
            raise
        _logger.info("Stored progress photo: user_id=%s path=%s", user_id, path)
        return photo

    def list_photos(self, user_id: UUID) -> list[ProgressPhoto]:
        """Return photos with signed URLs, falling back to the stored path."""
        photos = []
        for photo in self.repository.list_photos(user_id):
            url = self.storage.create_signed_url(
                photo.photo_path, self.signed_url_ttl_seconds
            )
            photos.append(
                ProgressPhoto(
                    id=photo.id,
                    photo_path=photo.photo_path,
                    day=photo.day,
                    notes=photo.notes,
                    url=url or photo.photo_path,
                )
            )
        return photos

    def delete_photo(self, user_id: UUID, photo_id: UUID) -> bool:
        """Remove the stored object and its row; False when unknown."""
        photo = self.repository.get_photo(user_id, photo_id)
        if photo is None:
            return False
        self.storage.remove([photo.photo_path])
        self.repository.delete_photo(user_id, photo_id)
        return True


def photo_path_for(user_id: UUID, content_type: str, now: datetime) -> str:
    """Return the object key for a new photo."""
    extension = _CONTENT_TYPE_EXTENSIONS.get(content_type.lower(), "jpg")
    return f"{user_id}/{int(now.timestamp() * 1000)}.{extension}"
