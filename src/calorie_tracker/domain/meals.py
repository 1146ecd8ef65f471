"""Domain models for meal logging."""

import math
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from calorie_tracker.domain.foods import Food

DEFAULT_SECTION_NAMES = (
    "Breakfast",
    "Lunch",
    "Dinner",
    "Snack 1",
    "Snack 2",
    "Late Night",
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class NutritionTotals:
    """Calories and macros summed over a set of entries."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0

    def __add__(self, other: "NutritionTotals") -> "NutritionTotals":
        return NutritionTotals(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fats=self.fats + other.fats,
        )

    def rounded(self) -> "NutritionTotals":
        """Return totals rounded to whole numbers for display."""
        return NutritionTotals(
            calories=round_half_up(self.calories),
            protein=round_half_up(self.protein),
            carbs=round_half_up(self.carbs),
            fats=round_half_up(self.fats),
        )


@dataclass(frozen=True)
class MealEntry:
    """A logged quantity of one food in one section on one day."""

    id: UUID
    food_id: UUID
    meal_section_id: UUID
    day: date
    quantity: float
    food: Food


@dataclass(frozen=True)
class MealSection:
    """A named daily bucket with the entries of the requested day."""

    id: UUID
    name: str
    order_index: int
    entries: list[MealEntry] = field(default_factory=list)


@dataclass(frozen=True)
class EntryRow:
    """Minimal dated entry row used to copy or chart entries."""

    food_id: UUID
    meal_section_id: UUID
    day: date
    quantity: float
    food: Food | None = None


@dataclass(frozen=True)
class CopyResult:
    """Outcome of copying the previous day's entries."""

    source_date: date
    target_date: date
    copied: int

    @property
    def succeeded(self) -> bool:
        """Return True when at least one entry was copied."""
        return self.copied > 0


class MealEntryInput(BaseModel):
    """Validated payload for logging a meal entry."""

    model_config = ConfigDict(extra="forbid")

    food_id: UUID
    meal_section_id: UUID
    day: date
    quantity: float = Field(gt=0)
