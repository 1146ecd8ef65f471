"""Meal section settings."""

from dataclasses import dataclass, field
from uuid import UUID

from calorie_tracker.domain.meals import MealSection
from calorie_tracker.services.cache import Cache, QueryCache
from calorie_tracker.services.meals import MealRepository


@dataclass
class SectionService:
    """Service for listing and renaming meal sections."""

    repository: MealRepository
    cache: Cache = field(default_factory=QueryCache)

    def list_sections(self, user_id: UUID) -> list[MealSection]:
        return self.repository.list_sections(user_id)

    def rename_section(self, user_id: UUID, section_id: UUID, name: str) -> None:
        """Rename a section; names need not be unique but must not be blank."""
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Section name must not be blank")
        self.repository.rename_section(user_id, section_id, cleaned)
        self.cache.invalidate("dashboard", user_id)
