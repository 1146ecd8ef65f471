"""Settings endpoints for daily goals and meal section names."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, ConfigDict, Field

from calorie_tracker.api.auth import current_user
from calorie_tracker.api.errors import backend_failure
from calorie_tracker.domain.goals import CalorieGoals, GoalsInput
from calorie_tracker.domain.models import AuthUser

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/settings", tags=["settings"])


class SectionRename(BaseModel):
    """New name for a meal section."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)


@router.get("/goals")
async def get_goals(
    request: Request, user: AuthUser = Depends(current_user)
) -> CalorieGoals:
    """Return the user's daily goals."""
    container: AppContainer = request.app.state.container
    try:
        return container.goals_service.get_goals(user.id)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to load daily goals") from exc


@router.put("/goals")
async def update_goals(
    payload: GoalsInput, request: Request, user: AuthUser = Depends(current_user)
) -> CalorieGoals:
    """Replace the user's daily goals."""
    container: AppContainer = request.app.state.container
    try:
        return container.goals_service.update_goals(user.id, payload)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to update daily goals") from exc


@router.get("/sections")
async def list_sections(
    request: Request, user: AuthUser = Depends(current_user)
) -> dict[str, object]:
    """Return meal sections in display order."""
    container: AppContainer = request.app.state.container
    try:
        sections = container.section_service.list_sections(user.id)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to load meal sections") from exc
    return {
        "sections": [
            {"id": s.id, "name": s.name, "order_index": s.order_index}
            for s in sections
        ]
    }


@router.patch("/sections/{section_id}", status_code=status.HTTP_204_NO_CONTENT)
async def rename_section(
    section_id: UUID,
    payload: SectionRename,
    request: Request,
    user: AuthUser = Depends(current_user),
) -> None:
    """Rename a meal section."""
    container: AppContainer = request.app.state.container
    try:
        container.section_service.rename_section(user.id, section_id, payload.name)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to rename meal section") from exc
