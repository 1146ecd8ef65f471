"""Supabase implementation for the user food database."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from calorie_tracker.domain.foods import Food, FoodInput
from calorie_tracker.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for foods."""

    client: Client

    def list_foods(self, user_id: UUID) -> list[Food]:
        """Return the user's foods ordered by name."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("user_id", str(user_id))
            .order("name")
            .execute()
        )
        return [parse_food(row) for row in response.data or []]

    def create_food(self, user_id: UUID, payload: FoodInput) -> Food:
        """Create a food row and return it."""
        response = (
            self.client.table("foods")
            .insert({"user_id": str(user_id), **payload.model_dump()})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food")
        return parse_food(response.data[0])

    def create_foods(self, user_id: UUID, payloads: list[FoodInput]) -> int:
        """Create several food rows in one insert."""
        if not payloads:
            return 0
        response = (
            self.client.table("foods")
            .insert(
                [
                    {"user_id": str(user_id), **payload.model_dump()}
                    for payload in payloads
                ]
            )
            .execute()
        )
        return len(response.data or [])

    def update_food(
        self, user_id: UUID, food_id: UUID, payload: FoodInput
    ) -> Food | None:
        """Update a food row and return it; None when no owned row matches."""
        response = (
            self.client.table("foods")
            .update(payload.model_dump())
            .eq("id", str(food_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return parse_food(response.data[0])

    def delete_food(self, user_id: UUID, food_id: UUID) -> None:
        """Delete a food row."""
        self.client.table("foods").delete().eq("id", str(food_id)).eq(
            "user_id", str(user_id)
        ).execute()


def parse_food(row: dict[str, object]) -> Food:
    """Parse a foods row into a domain model."""
    return Food(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        calories_per_100g=float(row.get("calories_per_100g") or 0.0),
        protein_per_100g=float(row.get("protein_per_100g") or 0.0),
        carbs_per_100g=float(row.get("carbs_per_100g") or 0.0),
        fats_per_100g=float(row.get("fats_per_100g") or 0.0),
    )
