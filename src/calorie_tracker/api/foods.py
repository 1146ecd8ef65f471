"""Food database endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from calorie_tracker.api.auth import current_user
from calorie_tracker.api.errors import backend_failure
from calorie_tracker.domain.foods import Food, FoodInput, ParsedFood
from calorie_tracker.domain.models import AuthUser
from calorie_tracker.services.food_import import parse_food_csv

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("")
async def list_foods(
    request: Request, user: AuthUser = Depends(current_user)
) -> dict[str, object]:
    """Return the user's foods ordered by name."""
    container: AppContainer = request.app.state.container
    try:
        foods = container.food_service.list_foods(user.id)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to load foods") from exc
    return {"foods": foods}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_food(
    payload: FoodInput, request: Request, user: AuthUser = Depends(current_user)
) -> Food:
    """Add a food to the user's database."""
    container: AppContainer = request.app.state.container
    try:
        return container.food_service.create_food(user.id, payload)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to add food") from exc


@router.put("/{food_id}")
async def update_food(
    food_id: UUID,
    payload: FoodInput,
    request: Request,
    user: AuthUser = Depends(current_user),
) -> Food:
    """Replace a food's name and macros."""
    container: AppContainer = request.app.state.container
    try:
        food = container.food_service.update_food(user.id, food_id, payload)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to update food") from exc
    if food is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Food not found"
        )
    return food


@router.delete("/{food_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_food(
    food_id: UUID, request: Request, user: AuthUser = Depends(current_user)
) -> None:
    """Delete a food."""
    container: AppContainer = request.app.state.container
    try:
        container.food_service.delete_food(user.id, food_id)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to delete food") from exc


@router.post("/import")
async def import_foods(
    request: Request,
    dry_run: bool = False,
    user: AuthUser = Depends(current_user),
) -> dict[str, object]:
    """Import foods from a CSV request body.

    With ``dry_run`` the parsed rows are returned without writing anything.
    """
    container: AppContainer = request.app.state.container
    body = await request.body()
    try:
        text = body.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Import file must be UTF-8 encoded CSV",
        ) from exc
    rows = parse_food_csv(text)
    preview = [_row_payload(row) for row in rows]
    if dry_run:
        return {"rows": preview}
    if not any(row.is_valid for row in rows):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No valid foods to import",
        )
    try:
        summary = container.food_service.import_foods(user.id, rows)
    except Exception as exc:
        raise backend_failure(request, exc, "Failed to import foods") from exc
    return {"summary": summary, "rows": preview}


def _row_payload(row: ParsedFood) -> dict[str, object]:
    return {**asdict(row), "is_valid": row.is_valid}
