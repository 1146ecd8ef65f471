"""Services for managing the user food database."""

import logging
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.foods import Food, FoodInput, ImportSummary, ParsedFood
from calorie_tracker.services.cache import Cache, QueryCache

IMPORT_BATCH_SIZE = 10

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Persistence interface for foods."""

    def list_foods(self, user_id: UUID) -> list[Food]:
        """Return the user's foods ordered by name."""

    def create_food(self, user_id: UUID, payload: FoodInput) -> Food:
        """Create a food and return it."""

    def create_foods(self, user_id: UUID, payloads: list[FoodInput]) -> int:
        """Create several foods in one call and return how many were stored."""

    def update_food(
        self, user_id: UUID, food_id: UUID, payload: FoodInput
    ) -> Food | None:
        """Update a food and return it, or None when it is not the user's."""

    def delete_food(self, user_id: UUID, food_id: UUID) -> None:
        """Delete a food."""


@dataclass
class FoodService:
    """Application service for food database operations."""

    repository: FoodRepository
    cache: Cache = field(default_factory=QueryCache)
    cache_ttl_seconds: int = 60

    def list_foods(self, user_id: UUID) -> list[Food]:
        """Return the user's foods, served from cache when fresh."""
        key = ("foods", user_id, None)
        cached = self.cache.get(key)
        if isinstance(cached, list):
            return cached
        foods = self.repository.list_foods(user_id)
        self.cache.set(key, foods, ttl_seconds=self.cache_ttl_seconds)
        return foods

    def create_food(self, user_id: UUID, payload: FoodInput) -> Food:
        food = self.repository.create_food(user_id, payload)
        self._invalidate(user_id)
        return food

    def update_food(
        self, user_id: UUID, food_id: UUID, payload: FoodInput
    ) -> Food | None:
        food = self.repository.update_food(user_id, food_id, payload)
        if food is not None:
            self._invalidate(user_id)
        return food

    def delete_food(self, user_id: UUID, food_id: UUID) -> None:
        self.repository.delete_food(user_id, food_id)
        self._invalidate(user_id)

    def import_foods(
        self,
        user_id: UUID,
        rows: list[ParsedFood],
        batch_size: int = IMPORT_BATCH_SIZE,
    ) -> ImportSummary:
        """Insert the valid rows in batches; invalid rows are skipped.

        Batches are independent writes, so a failure part way through leaves
        the earlier batches stored.
        """
        valid = [row.to_input() for row in rows if row.is_valid]
        skipped = len(rows) - len(valid)
        imported = 0
        batches = 0
        try:
            for start in range(0, len(valid), batch_size):
                imported += self.repository.create_foods(
                    user_id, valid[start : start + batch_size]
                )
                batches += 1
        finally:
            if batches:
                self._invalidate(user_id)
        _logger.info(
            "Imported foods: user_id=%s imported=%s skipped=%s",
            user_id,
            imported,
            skipped,
        )
        return ImportSummary(imported=imported, skipped=skipped, batches=batches)

    def _invalidate(self, user_id: UUID) -> None:
        # Foods are embedded in dashboard entries and progress totals.
        self.cache.invalidate("foods", user_id)
        self.cache.invalidate("dashboard", user_id)
        self.cache.invalidate("progress", user_id)
