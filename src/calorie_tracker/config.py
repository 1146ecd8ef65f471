"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from calorie_tracker.domain.goals import CalorieGoals

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    photo_bucket: str = "progress-photos"
    signed_url_ttl_seconds: int = 3600
    progress_window_days: int = 30
    cache_ttl_seconds: int = 60
    default_goal_calories: float = 2000
    default_goal_protein: float = 150
    default_goal_carbs: float = 200
    default_goal_fats: float = 70
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def default_goals(self) -> CalorieGoals:
        """Return the goals created for users without a goals record."""
        return CalorieGoals(
            calories=self.default_goal_calories,
            protein=self.default_goal_protein,
            carbs=self.default_goal_carbs,
            fats=self.default_goal_fats,
        )


def parse_bearer_token(raw: str | None) -> str | None:
    """Extract the token from an Authorization header value."""
    if raw is None:
        return None
    scheme, _, token = raw.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    token = token.strip()
    return token or None
