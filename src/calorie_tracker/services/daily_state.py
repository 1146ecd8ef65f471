"""Resolution of the per-day dashboard state."""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from calorie_tracker.domain.goals import CalorieGoals
from calorie_tracker.domain.meals import DEFAULT_SECTION_NAMES, MealSection
from calorie_tracker.domain.models import DailyState
from calorie_tracker.services.cache import Cache, QueryCache
from calorie_tracker.services.foods import FoodRepository
from calorie_tracker.services.goals import GoalsRepository
from calorie_tracker.services.meals import MealRepository

_logger = logging.getLogger(__name__)


@dataclass
class DailyStateService:
    """Guarantees a user has sections and goals, then loads a day.

    Foods, sections with the day's entries and goals are fetched
    concurrently. Missing sections or goals are created with defaults on
    first access; later calls find them and create nothing. Two first calls
    racing for the same user are not deduplicated here.
    """

    food_repository: FoodRepository
    meal_repository: MealRepository
    goals_repository: GoalsRepository
    default_goals: CalorieGoals
    cache: Cache = field(default_factory=QueryCache)
    cache_ttl_seconds: int = 60

    async def resolve(self, user_id: UUID, day: date) -> DailyState:
        """Return foods, sections and goals for a user on a day."""
        key = ("dashboard", user_id, day)
        cached = self.cache.get(key)
        if isinstance(cached, DailyState):
            return cached

        foods, sections, goals = await asyncio.gather(
            asyncio.to_thread(self.food_repository.list_foods, user_id),
            asyncio.to_thread(
                self.meal_repository.list_sections_with_entries, user_id, day
            ),
            asyncio.to_thread(self.goals_repository.get_goals, user_id),
        )
        if not sections:
            sections = await asyncio.to_thread(
                self._create_default_sections, user_id
            )
        if goals is None:
            _logger.info("Creating default goals: user_id=%s", user_id)
            goals = await asyncio.to_thread(
                self.goals_repository.create_goals, user_id, self.default_goals
            )

        state = DailyState(foods=foods, meal_sections=sections, calorie_goals=goals)
        self.cache.set(key, state, ttl_seconds=self.cache_ttl_seconds)
        return state

    def _create_default_sections(self, user_id: UUID) -> list[MealSection]:
        _logger.info("Creating default meal sections: user_id=%s", user_id)
        created = self.meal_repository.create_sections(user_id, DEFAULT_SECTION_NAMES)
        return sorted(created, key=lambda section: section.order_index)
