"""Domain models for the calorie tracker."""

from dataclasses import dataclass
from uuid import UUID

from calorie_tracker.domain.foods import Food
from calorie_tracker.domain.goals import CalorieGoals
from calorie_tracker.domain.meals import MealSection


@dataclass(frozen=True)
class AuthUser:
    """An authenticated user as reported by the auth provider."""

    id: UUID
    email: str | None
    full_name: str = ""


@dataclass(frozen=True)
class Profile:
    """Represents a profile row stored in the database."""

    id: UUID
    email: str | None
    full_name: str | None


@dataclass(frozen=True)
class DailyState:
    """Everything the dashboard needs for one user and day."""

    foods: list[Food]
    meal_sections: list[MealSection]
    calorie_goals: CalorieGoals
