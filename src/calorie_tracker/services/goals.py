"""Daily goals service."""

import logging
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.goals import CalorieGoals, GoalsInput
from calorie_tracker.services.cache import Cache, QueryCache

_logger = logging.getLogger(__name__)


class GoalsRepository(Protocol):
    """Persistence interface for daily goals."""

    def get_goals(self, user_id: UUID) -> CalorieGoals | None:
        """Return the user's goals if a record exists."""

    def create_goals(self, user_id: UUID, goals: CalorieGoals) -> CalorieGoals:
        """Create the goals record and return it."""

    def upsert_goals(self, user_id: UUID, goals: CalorieGoals) -> CalorieGoals:
        """Insert or replace the goals record keyed by user."""


@dataclass
class GoalsService:
    """Service for reading and updating daily goals."""

    repository: GoalsRepository
    default_goals: CalorieGoals
    cache: Cache = field(default_factory=QueryCache)

    def get_goals(self, user_id: UUID) -> CalorieGoals:
        """Return the user's goals, creating the defaults when absent."""
        existing = self.repository.get_goals(user_id)
        if existing is not None:
            return existing
        _logger.info("Creating default goals: user_id=%s", user_id)
        return self.repository.create_goals(user_id, self.default_goals)

    def update_goals(self, user_id: UUID, payload: GoalsInput) -> CalorieGoals:
        goals = self.repository.upsert_goals(user_id, payload.to_goals())
        self.cache.invalidate("dashboard", user_id)
        return goals
