"""Supabase repository for weight entries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from calorie_tracker.domain.progress import WeightEntry, WeightInput
from calorie_tracker.services.weights import WeightRepository


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for the weight_entries table."""

    client: Client

    def list_entries(self, user_id: UUID) -> list[WeightEntry]:
        """Return weight entries, most recent first."""
        response = (
            self.client.table("weight_entries")
            .select("*")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def list_entries_since(self, user_id: UUID, start: date) -> list[WeightEntry]:
        """Return weight entries on or after start, oldest first."""
        response = (
            self.client.table("weight_entries")
            .select("*")
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .order("date")
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def create_entry(self, user_id: UUID, payload: WeightInput) -> WeightEntry:
        """Insert a weight entry and return it."""
        response = (
            self.client.table("weight_entries")
            .insert(
                {
                    "user_id": str(user_id),
                    "weight": payload.weight,
                    "date": payload.day.isoformat(),
                    "notes": payload.notes or None,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create weight entry")
        return _parse_entry(response.data[0])

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete a weight entry."""
        self.client.table("weight_entries").delete().eq("id", str(entry_id)).eq(
            "user_id", str(user_id)
        ).execute()


def _parse_entry(row: dict[str, object]) -> WeightEntry:
    return WeightEntry(
        id=UUID(str(row["id"])),
        weight=float(row.get("weight") or 0.0),
        day=date.fromisoformat(str(row["date"])),
        notes=row.get("notes"),
    )
