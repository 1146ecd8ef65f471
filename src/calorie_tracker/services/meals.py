"""Meal logging service."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.meals import (
    CopyResult,
    EntryRow,
    MealEntryInput,
    MealSection,
)
from calorie_tracker.services.cache import Cache, QueryCache

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meal sections and entries."""

    def list_sections(self, user_id: UUID) -> list[MealSection]:
        """Return sections ordered by order_index, without entries."""

    def list_sections_with_entries(
        self, user_id: UUID, day: date
    ) -> list[MealSection]:
        """Return sections ordered by order_index with the entries of a day."""

    def create_sections(self, user_id: UUID, names: Sequence[str]) -> list[MealSection]:
        """Create sections with order indices following the given order."""

    def rename_section(self, user_id: UUID, section_id: UUID, name: str) -> None:
        """Rename a section."""

    def create_entry(self, user_id: UUID, payload: MealEntryInput) -> UUID:
        """Create a meal entry and return its id."""

    def create_entries(self, user_id: UUID, rows: list[EntryRow]) -> int:
        """Create meal entries in one call and return how many were stored."""

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete a meal entry."""

    def list_entries_on(self, user_id: UUID, day: date) -> list[EntryRow]:
        """Return the entries logged on a day."""

    def list_entries_since(self, user_id: UUID, start: date) -> list[EntryRow]:
        """Return entries dated on or after start with their foods, by date."""


@dataclass
class MealLogService:
    """Service that logs, removes and copies meal entries."""

    repository: MealRepository
    cache: Cache = field(default_factory=QueryCache)

    def add_entry(self, user_id: UUID, payload: MealEntryInput) -> UUID:
        """Log a quantity of a food in a section."""
        entry_id = self.repository.create_entry(user_id, payload)
        self._invalidate(user_id, payload.day)
        return entry_id

    def remove_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete an entry; unknown ids are ignored by the store.

        The entry's day is not known here, so every cached dashboard day of
        the user is dropped.
        """
        self.repository.delete_entry(user_id, entry_id)
        self.cache.invalidate("dashboard", user_id)
        self.cache.invalidate("progress", user_id)

    def copy_from_yesterday(self, user_id: UUID, day: date) -> CopyResult:
        """Duplicate the previous day's entries onto day.

        Copies keep food, section and quantity and get new ids. When the
        previous day has nothing logged no write is made.
        """
        source = day - timedelta(days=1)
        rows = self.repository.list_entries_on(user_id, source)
        if not rows:
            _logger.info("Nothing to copy: user_id=%s source=%s", user_id, source)
            return CopyResult(source_date=source, target_date=day, copied=0)

        copies = [
            EntryRow(
                food_id=row.food_id,
                meal_section_id=row.meal_section_id,
                day=day,
                quantity=row.quantity,
            )
            for row in rows
        ]
        copied = self.repository.create_entries(user_id, copies)
        self._invalidate(user_id, day)
        _logger.info(
            "Copied entries: user_id=%s source=%s target=%s count=%s",
            user_id,
            source,
            day,
            copied,
        )
        return CopyResult(source_date=source, target_date=day, copied=copied)

    def _invalidate(self, user_id: UUID, day: date) -> None:
        self.cache.invalidate("dashboard", user_id, day)
        self.cache.invalidate("progress", user_id)
