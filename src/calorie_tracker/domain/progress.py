"""Domain models for weight tracking and progress charts."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from calorie_tracker.domain.meals import NutritionTotals


@dataclass(frozen=True)
class WeightEntry:
    """A body weight measurement in kilograms."""

    id: UUID
    weight: float
    day: date
    notes: str | None = None


class WeightInput(BaseModel):
    """Validated payload for logging a weight."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    weight: float = Field(gt=0)
    day: date
    notes: str | None = None


@dataclass(frozen=True)
class WeightSummary:
    """Latest weight and the change against the previous entry."""

    latest: float | None
    previous: float | None

    @property
    def change(self) -> float | None:
        if self.latest is None or self.previous is None:
            return None
        return self.latest - self.previous


@dataclass(frozen=True)
class ProgressPhoto:
    """A progress photo stored in object storage."""

    id: UUID
    photo_path: str
    day: date
    notes: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class DailyNutrition:
    """Nutrition totals for a single day."""

    day: date
    totals: NutritionTotals


@dataclass(frozen=True)
class WeeklyAverage:
    """Average daily calories for one calendar week."""

    week_start: date
    label: str
    avg_calories: int


@dataclass(frozen=True)
class ProgressReport:
    """Chart data for a trailing window of days."""

    start: date
    end: date
    nutrition: list[DailyNutrition]
    weights: list[WeightEntry]
    weekly: list[WeeklyAverage]
