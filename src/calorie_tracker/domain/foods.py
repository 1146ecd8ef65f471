"""Domain models for the user food database."""

from dataclasses import dataclass
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


@dataclass(frozen=True)
class Food:
    """A food with macros normalised to 100 grams."""

    id: UUID
    name: str
    calories_per_100g: float
    protein_per_100g: float
    carbs_per_100g: float
    fats_per_100g: float


class FoodInput(BaseModel):
    """Validated payload for creating or updating a food."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: str = Field(min_length=1)
    calories_per_100g: float = Field(ge=0)
    protein_per_100g: float = Field(default=0, ge=0)
    carbs_per_100g: float = Field(default=0, ge=0)
    fats_per_100g: float = Field(default=0, ge=0)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value


@dataclass(frozen=True)
class ParsedFood:
    """A spreadsheet row parsed into a food candidate."""

    row_index: int
    name: str
    calories_per_100g: float
    protein_per_100g: float
    carbs_per_100g: float
    fats_per_100g: float
    errors: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Return True when the row passed validation."""
        return not self.errors

    def to_input(self) -> FoodInput:
        """Convert a valid row into a food payload."""
        return FoodInput(
            name=self.name,
            calories_per_100g=self.calories_per_100g,
            protein_per_100g=self.protein_per_100g,
            carbs_per_100g=self.carbs_per_100g,
            fats_per_100g=self.fats_per_100g,
        )


@dataclass(frozen=True)
class ImportSummary:
    """Outcome of a bulk food import."""

    imported: int
    skipped: int
    batches: int
