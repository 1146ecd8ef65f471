"""Supabase Auth client for session tokens."""

from dataclasses import dataclass
from uuid import UUID

from supabase import AuthApiError, Client

from calorie_tracker.domain.models import AuthUser
from calorie_tracker.services.users import AuthClient


@dataclass
class SupabaseAuthClient(AuthClient):
    """Validates access tokens against Supabase Auth."""

    client: Client

    def get_user(self, access_token: str) -> AuthUser | None:
        """Return the token owner, or None when Supabase rejects the token."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthApiError:
            return None
        if response is None or response.user is None:
            return None
        user = response.user
        metadata = user.user_metadata or {}
        return AuthUser(
            id=UUID(str(user.id)),
            email=user.email,
            full_name=str(metadata.get("full_name") or ""),
        )

    def sign_out(self, access_token: str) -> None:
        """Revoke every session of the token owner."""
        self.client.auth.admin.sign_out(access_token)
