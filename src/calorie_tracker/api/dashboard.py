"""Dashboard endpoints: daily state, meal entries and copying."""

from __future__ import annotations

from dataclasses import asdict
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request, status

from calorie_tracker.api.auth import current_user
from calorie_tracker.api.errors import backend_failure
from calorie_tracker.domain.meals import MealEntryInput, MealSection
from calorie_tracker.domain.models import AuthUser
from calorie_tracker.services.nutrition import calculate_nutrition, day_total

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def today() -> date:
    """Return the current calendar day in UTC."""
    return datetime.now(tz=UTC).date()


@router.get("")
async def get_dashboard(
    request: Request,
    day: date | None = Query(default=None, alias="date"),
    user: AuthUser = Depends(current_user),
) -> dict[str, object]:
    """Return foods, sections with entries, goals and totals for a day."""
    container: AppContainer = request.app.state.container
    resolved_day = day or today()
    try:
        container.user_service.ensure_profile(user)
        state = await container.daily_state_service.resolve(user.id, resolved_day)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to load dashboard") from exc
    total = day_total(state.meal_sections)
    return {
        "date": resolved_day,
        "foods": state.foods,
        "meal_sections": [_section_payload(s) for s in state.meal_sections],
        "calorie_goals": state.calorie_goals,
        "day_total": total,
        "day_total_rounded": total.rounded(),
    }


@router.post("/entries", status_code=status.HTTP_201_CREATED)
async def add_entry(
    payload: MealEntryInput,
    request: Request,
    user: AuthUser = Depends(current_user),
) -> dict[str, object]:
    """Log a food quantity in a section."""
    container: AppContainer = request.app.state.container
    try:
        entry_id = container.meal_log_service.add_entry(user.id, payload)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to add meal entry") from exc
    return {"id": entry_id}


@router.delete("/entries/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_entry(
    entry_id: UUID,
    request: Request,
    user: AuthUser = Depends(current_user),
) -> None:
    """Delete a meal entry."""
    container: AppContainer = request.app.state.container
    try:
        container.meal_log_service.remove_entry(user.id, entry_id)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to remove meal entry") from exc


@router.post("/copy-from-yesterday")
async def copy_from_yesterday(
    request: Request,
    day: date | None = Query(default=None, alias="date"),
    user: AuthUser = Depends(current_user),
) -> dict[str, object]:
    """Duplicate the previous day's entries onto the given day."""
    container: AppContainer = request.app.state.container
    try:
        result = container.meal_log_service.copy_from_yesterday(
            user.id, day or today()
        )
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to copy from yesterday") from exc
    return {
        "copied": result.copied,
        "succeeded": result.succeeded,
        "source_date": result.source_date,
        "target_date": result.target_date,
        "message": (
            "Copied from yesterday" if result.succeeded else "Nothing to copy"
        ),
    }


def _section_payload(section: MealSection) -> dict[str, object]:
    totals = calculate_nutrition(section.entries)
    return {
        "id": section.id,
        "name": section.name,
        "order_index": section.order_index,
        "entries": [asdict(entry) for entry in section.entries],
        "totals": totals,
        "totals_rounded": totals.rounded(),
    }
