"""Daily goal models."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class CalorieGoals:
    """Per-day calorie and macro targets."""

    calories: float
    protein: float
    carbs: float
    fats: float


class GoalsInput(BaseModel):
    """Validated payload for updating daily goals."""

    model_config = ConfigDict(extra="forbid")

    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fats: float = Field(ge=0)

    def to_goals(self) -> CalorieGoals:
        return CalorieGoals(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fats=self.fats,
        )
