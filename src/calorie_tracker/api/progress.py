"""Progress chart endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request

from calorie_tracker.api.auth import current_user
from calorie_tracker.api.dashboard import today
from calorie_tracker.api.errors import backend_failure
from calorie_tracker.domain.models import AuthUser

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("")
async def get_progress(
    request: Request,
    days: int | None = Query(default=None, ge=1, le=366),
    user: AuthUser = Depends(current_user),
) -> dict[str, object]:
    """Return daily nutrition, weights and weekly calorie averages."""
    container: AppContainer = request.app.state.container
    try:
        report = container.progress_service.get_progress(user.id, today(), days)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to load progress") from exc
    return {
        "start": report.start,
        "end": report.end,
        "nutrition": [
            {
                "date": item.day,
                "calories": item.totals.calories,
                "protein": item.totals.protein,
                "carbs": item.totals.carbs,
                "fats": item.totals.fats,
            }
            for item in report.nutrition
        ],
        "weights": [
            {"date": entry.day, "weight": entry.weight} for entry in report.weights
        ],
        "weekly": [
            {
                "week": week.label,
                "week_start": week.week_start,
                "avg_calories": week.avg_calories,
            }
            for week in report.weekly
        ],
    }
