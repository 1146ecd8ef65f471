"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.models import AuthUser, Profile


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile for a user, if present."""

    def create_profile(self, user: AuthUser) -> Profile:
        """Create and return a profile for an authenticated user."""


class AuthClient(Protocol):
    """Session-based authentication provider."""

    def get_user(self, access_token: str) -> AuthUser | None:
        """Return the user owning a session token, if it is valid."""

    def sign_out(self, access_token: str) -> None:
        """Invalidate the session behind a token."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: ProfileRepository

    def ensure_profile(self, user: AuthUser) -> Profile:
        """Ensure a profile row exists for the user and return it."""
        existing = self.repository.get_profile(user.id)
        if existing:
            return existing
        return self.repository.create_profile(user)


@dataclass
class AuthService:
    """Resolves bearer tokens to users."""

    client: AuthClient

    def authenticate(self, access_token: str | None) -> AuthUser | None:
        if not access_token:
            return None
        return self.client.get_user(access_token)

    def sign_out(self, access_token: str) -> None:
        self.client.sign_out(access_token)
