"""Supabase repository for daily goals."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from calorie_tracker.domain.goals import CalorieGoals
from calorie_tracker.services.goals import GoalsRepository


@dataclass
class SupabaseGoalsRepository(GoalsRepository):
    """Supabase implementation for the daily_goals table."""

    client: Client

    def get_goals(self, user_id: UUID) -> CalorieGoals | None:
        """Return the stored goals for a user."""
        response = (
            self.client.table("daily_goals")
            .select("calories, protein, carbs, fats")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_goals(response.data[0])

    def create_goals(self, user_id: UUID, goals: CalorieGoals) -> CalorieGoals:
        """Insert the goals row and return it."""
        response = (
            self.client.table("daily_goals")
            .insert({"user_id": str(user_id), **_goals_payload(goals)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create daily goals")
        return _parse_goals(response.data[0])

    def upsert_goals(self, user_id: UUID, goals: CalorieGoals) -> CalorieGoals:
        """Insert or update the goals row keyed by user_id."""
        response = (
            self.client.table("daily_goals")
            .upsert(
                {
                    "user_id": str(user_id),
                    **_goals_payload(goals),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update daily goals")
        return _parse_goals(response.data[0])


def _goals_payload(goals: CalorieGoals) -> dict[str, float]:
    return {
        "calories": goals.calories,
        "protein": goals.protein,
        "carbs": goals.carbs,
        "fats": goals.fats,
    }


def _parse_goals(row: dict[str, object]) -> CalorieGoals:
    return CalorieGoals(
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fats=float(row.get("fats") or 0.0),
    )
