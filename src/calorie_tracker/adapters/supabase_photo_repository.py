"""Supabase-backed progress photo repository and storage."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from calorie_tracker.domain.progress import ProgressPhoto
from calorie_tracker.services.photos import PhotoRepository, PhotoStorage


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation for photo metadata persistence."""

    client: Client

    def list_photos(self, user_id: UUID) -> list[ProgressPhoto]:
        """Return photo rows, most recent first."""
        response = (
            self.client.table("progress_photos")
            .select("*")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .execute()
        )
        return [_parse_photo(row) for row in response.data or []]

    def get_photo(self, user_id: UUID, photo_id: UUID) -> ProgressPhoto | None:
        """Return a photo row by id."""
        response = (
            self.client.table("progress_photos")
            .select("*")
            .eq("id", str(photo_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_photo(response.data[0])

    def create_photo(
        self, user_id: UUID, photo_path: str, day: date, notes: str | None
    ) -> ProgressPhoto:
        """Create a photo metadata row and return it."""
        response = (
            self.client.table("progress_photos")
            .insert(
                {
                    "user_id": str(user_id),
                    "photo_url": photo_path,
                    "date": day.isoformat(),
                    "notes": notes,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create photo metadata")
        return _parse_photo(response.data[0])

    def delete_photo(self, user_id: UUID, photo_id: UUID) -> None:
        """Delete a photo metadata row."""
        self.client.table("progress_photos").delete().eq("id", str(photo_id)).eq(
            "user_id", str(user_id)
        ).execute()


@dataclass
class SupabasePhotoStorage(PhotoStorage):
    """Supabase Storage bucket holding photo bytes."""

    client: Client
    bucket: str = "progress-photos"

    def upload(self, path: str, content: bytes, content_type: str) -> None:
        """Upload bytes to the bucket."""
        self.client.storage.from_(self.bucket).upload(
            path, content, {"content-type": content_type}
        )

    def create_signed_url(self, path: str, expires_in: int) -> str | None:
        """Return a signed URL for a stored object."""
        result = self.client.storage.from_(self.bucket).create_signed_url(
            path, expires_in
        )
        if not isinstance(result, dict):
            return None
        return result.get("signedUrl") or result.get("signedURL")

    def remove(self, paths: list[str]) -> None:
        """Remove objects from the bucket."""
        self.client.storage.from_(self.bucket).remove(paths)


def _parse_photo(row: dict[str, object]) -> ProgressPhoto:
    return ProgressPhoto(
        id=UUID(str(row["id"])),
        photo_path=str(row.get("photo_url", "")),
        day=date.fromisoformat(str(row["date"])),
        notes=row.get("notes"),
    )
