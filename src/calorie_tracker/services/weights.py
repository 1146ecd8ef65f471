"""Weight tracking service."""

from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.progress import WeightEntry, WeightInput, WeightSummary
from calorie_tracker.services.cache import Cache, QueryCache


class WeightRepository(Protocol):
    """Persistence interface for weight entries."""

    def list_entries(self, user_id: UUID) -> list[WeightEntry]:
        """Return weight entries, most recent first."""

    def list_entries_since(self, user_id: UUID, start: date) -> list[WeightEntry]:
        """Return entries dated on or after start, oldest first."""

    def create_entry(self, user_id: UUID, payload: WeightInput) -> WeightEntry:
        """Create a weight entry and return it."""

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete a weight entry."""


@dataclass
class WeightService:
    """Service for weight entries."""

    repository: WeightRepository
    cache: Cache = field(default_factory=QueryCache)

    def list_entries(self, user_id: UUID) -> list[WeightEntry]:
        return self.repository.list_entries(user_id)

    def add_entry(self, user_id: UUID, payload: WeightInput) -> WeightEntry:
        entry = self.repository.create_entry(user_id, payload)
        self.cache.invalidate("progress", user_id)
        return entry

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        self.repository.delete_entry(user_id, entry_id)
        self.cache.invalidate("progress", user_id)

    def summary(self, user_id: UUID) -> WeightSummary:
        """Return the latest weight and the one logged before it."""
        entries = self.repository.list_entries(user_id)
        latest = entries[0].weight if entries else None
        previous = entries[1].weight if len(entries) > 1 else None
        return WeightSummary(latest=latest, previous=previous)
