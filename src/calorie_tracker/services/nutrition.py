"""Nutrition aggregation over logged meal entries."""

from collections.abc import Iterable
from datetime import date

from calorie_tracker.domain.foods import Food
from calorie_tracker.domain.meals import (
    EntryRow,
    MealEntry,
    MealSection,
    NutritionTotals,
)
from calorie_tracker.domain.progress import DailyNutrition


def portion_totals(food: Food, quantity: float) -> NutritionTotals:
    """Scale a food's per-100g macros to a quantity in grams."""
    factor = quantity / 100.0
    return NutritionTotals(
        calories=food.calories_per_100g * factor,
        protein=food.protein_per_100g * factor,
        carbs=food.carbs_per_100g * factor,
        fats=food.fats_per_100g * factor,
    )


def calculate_nutrition(entries: Iterable[MealEntry] | None) -> NutritionTotals:
    """Sum the contribution of every entry; no entries gives zero totals."""
    total = NutritionTotals()
    for entry in entries or ():
        total = total + portion_totals(entry.food, entry.quantity)
    return total


def day_total(sections: Iterable[MealSection] | None) -> NutritionTotals:
    """Sum per-section totals across all sections of a day."""
    total = NutritionTotals()
    for section in sections or ():
        total = total + calculate_nutrition(section.entries)
    return total


def daily_series(rows: Iterable[EntryRow]) -> list[DailyNutrition]:
    """Fold dated entry rows into per-day totals sorted by day."""
    totals: dict[date, NutritionTotals] = {}
    for row in rows:
        if row.food is None:
            continue
        current = totals.get(row.day, NutritionTotals())
        totals[row.day] = current + portion_totals(row.food, row.quantity)
    return [DailyNutrition(day=day, totals=totals[day]) for day in sorted(totals)]
