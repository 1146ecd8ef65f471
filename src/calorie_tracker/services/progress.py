"""Progress chart data: daily series and weekly averages."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, timedelta
from uuid import UUID

from calorie_tracker.domain.meals import round_half_up
from calorie_tracker.domain.progress import (
    DailyNutrition,
    ProgressReport,
    WeeklyAverage,
)
from calorie_tracker.services.cache import Cache, QueryCache
from calorie_tracker.services.meals import MealRepository
from calorie_tracker.services.nutrition import daily_series
from calorie_tracker.services.weights import WeightRepository

# Values follow date.weekday(): Monday is 0, Sunday is 6.
MONDAY = 0
SUNDAY = 6


def week_start_for(day: date, week_start: int = SUNDAY) -> date:
    """Return the first day of the calendar week containing day."""
    offset = (day.weekday() - week_start) % 7
    return day - timedelta(days=offset)


def weekly_averages(
    days: Iterable[DailyNutrition], week_start: int = SUNDAY
) -> list[WeeklyAverage]:
    """Average calories per calendar week.

    Weeks keep the order in which they first appear; weeks without days are
    not emitted, so callers sort by date first for a chronological chart.
    """
    buckets: dict[date, list[float]] = {}
    for item in days:
        start = week_start_for(item.day, week_start)
        buckets.setdefault(start, []).append(item.totals.calories)
    return [
        WeeklyAverage(
            week_start=start,
            label=start.strftime("%b %d"),
            avg_calories=round_half_up(sum(values) / len(values)),
        )
        for start, values in buckets.items()
    ]


@dataclass
class ProgressService:
    """Builds chart data for a trailing window of days."""

    meal_repository: MealRepository
    weight_repository: WeightRepository
    window_days: int = 30
    week_start: int = SUNDAY
    cache: Cache = field(default_factory=QueryCache)
    cache_ttl_seconds: int = 60

    def get_progress(
        self, user_id: UUID, today: date, days: int | None = None
    ) -> ProgressReport:
        """Return nutrition, weight and weekly series since today - days."""
        window = self.window_days if days is None else days
        key = ("progress", user_id, today)
        cached = self.cache.get(key)
        if window == self.window_days and isinstance(cached, ProgressReport):
            return cached

        start = today - timedelta(days=window)
        nutrition = daily_series(
            self.meal_repository.list_entries_since(user_id, start)
        )
        weights = self.weight_repository.list_entries_since(user_id, start)
        report = ProgressReport(
            start=start,
            end=today,
            nutrition=nutrition,
            weights=weights,
            weekly=weekly_averages(nutrition, self.week_start),
        )
        if window == self.window_days:
            self.cache.set(key, report, ttl_seconds=self.cache_ttl_seconds)
        return report
