"""Supabase-backed profile repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from calorie_tracker.domain.models import AuthUser, Profile
from calorie_tracker.services.users import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile row for a user, if present."""
        response = (
            self.client.table("profiles")
            .select("id, email, full_name")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_profile(response.data[0])
        return None

    def create_profile(self, user: AuthUser) -> Profile:
        """Create a profile row and return it."""
        response = (
            self.client.table("profiles")
            .insert(
                {
                    "id": str(user.id),
                    "email": user.email,
                    "full_name": user.full_name,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create profile in Supabase")
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> Profile:
    return Profile(
        id=UUID(str(row["id"])),
        email=row.get("email"),
        full_name=row.get("full_name"),
    )
