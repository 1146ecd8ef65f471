"""Supabase repository for meal sections and entries."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.supabase_food_repository import parse_food
from calorie_tracker.domain.meals import (
    EntryRow,
    MealEntry,
    MealEntryInput,
    MealSection,
)
from calorie_tracker.services.meals import MealRepository

_SECTION_WITH_ENTRIES = (
    "*, meal_entries!meal_entries_meal_section_id_fkey (*, foods (*))"
)


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal sections and entries."""

    client: Client

    def list_sections(self, user_id: UUID) -> list[MealSection]:
        """Return sections ordered by order_index."""
        response = (
            self.client.table("meal_sections")
            .select("id, name, order_index")
            .eq("user_id", str(user_id))
            .order("order_index")
            .execute()
        )
        return [_parse_section(row) for row in response.data or []]

    def list_sections_with_entries(
        self, user_id: UUID, day: date
    ) -> list[MealSection]:
        """Return sections with the entries logged on day embedded."""
        response = (
            self.client.table("meal_sections")
            .select(_SECTION_WITH_ENTRIES)
            .eq("user_id", str(user_id))
            .eq("meal_entries.date", day.isoformat())
            .order("order_index")
            .execute()
        )
        return [_parse_section(row) for row in response.data or []]

    def create_sections(self, user_id: UUID, names: Sequence[str]) -> list[MealSection]:
        """Insert sections with order indices 0..n-1."""
        response = (
            self.client.table("meal_sections")
            .insert(
                [
                    {"user_id": str(user_id), "name": name, "order_index": index}
                    for index, name in enumerate(names)
                ]
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal sections")
        return [_parse_section(row) for row in response.data]

    def rename_section(self, user_id: UUID, section_id: UUID, name: str) -> None:
        """Update a section name."""
        self.client.table("meal_sections").update({"name": name}).eq(
            "id", str(section_id)
        ).eq("user_id", str(user_id)).execute()

    def create_entry(self, user_id: UUID, payload: MealEntryInput) -> UUID:
        """Insert a meal entry and return its id."""
        response = (
            self.client.table("meal_entries")
            .insert(
                {
                    "user_id": str(user_id),
                    "food_id": str(payload.food_id),
                    "meal_section_id": str(payload.meal_section_id),
                    "date": payload.day.isoformat(),
                    "quantity": payload.quantity,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal entry")
        return UUID(str(response.data[0]["id"]))

    def create_entries(self, user_id: UUID, rows: list[EntryRow]) -> int:
        """Insert several meal entries in one call."""
        if not rows:
            return 0
        response = (
            self.client.table("meal_entries")
            .insert(
                [
                    {
                        "user_id": str(user_id),
                        "food_id": str(row.food_id),
                        "meal_section_id": str(row.meal_section_id),
                        "date": row.day.isoformat(),
                        "quantity": row.quantity,
                    }
                    for row in rows
                ]
            )
            .execute()
        )
        return len(response.data or [])

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete a meal entry."""
        self.client.table("meal_entries").delete().eq("id", str(entry_id)).eq(
            "user_id", str(user_id)
        ).execute()

    def list_entries_on(self, user_id: UUID, day: date) -> list[EntryRow]:
        """Return entries logged on a day."""
        response = (
            self.client.table("meal_entries")
            .select("food_id, meal_section_id, date, quantity")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .execute()
        )
        return [_parse_entry_row(row) for row in response.data or []]

    def list_entries_since(self, user_id: UUID, start: date) -> list[EntryRow]:
        """Return entries dated on or after start with their foods."""
        response = (
            self.client.table("meal_entries")
            .select("food_id, meal_section_id, date, quantity, foods (*)")
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .order("date")
            .execute()
        )
        return [_parse_entry_row(row) for row in response.data or []]


def _parse_section(row: dict[str, object]) -> MealSection:
    entries = row.get("meal_entries") or []
    return MealSection(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        order_index=int(row.get("order_index") or 0),
        entries=[_parse_entry(entry) for entry in entries if entry.get("foods")],
    )


def _parse_entry(row: dict[str, object]) -> MealEntry:
    return MealEntry(
        id=UUID(str(row["id"])),
        food_id=UUID(str(row["food_id"])),
        meal_section_id=UUID(str(row["meal_section_id"])),
        day=date.fromisoformat(str(row["date"])),
        quantity=float(row.get("quantity") or 0.0),
        food=parse_food(row["foods"]),
    )


def _parse_entry_row(row: dict[str, object]) -> EntryRow:
    food_row = row.get("foods")
    return EntryRow(
        food_id=UUID(str(row["food_id"])),
        meal_section_id=UUID(str(row["meal_section_id"])),
        day=date.fromisoformat(str(row["date"])),
        quantity=float(row.get("quantity") or 0.0),
        food=parse_food(food_row) if isinstance(food_row, dict) else None,
    )
